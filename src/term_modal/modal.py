"""
Animated two-button modal dialog.

Input handling is split in two steps: :meth:`Modal.handle_event` maps an
event to a :class:`ModalMessage` without touching the dialog, and
:meth:`Modal.update` applies the message and optionally returns an
:class:`~term_modal.component.Action` for the host. Whether a confirmed
dialog closes is up to the host.
"""

import logging
import textwrap
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from blessed import Terminal

from . import animation, events, geometry
from .animation import DisplayState
from .component import Action, ActionKind, Component, FocusTarget
from .geometry import Rect
from .theme import Theme, compose_style

logger = logging.getLogger(__name__)

MESSAGE_MAX_LINES = 6


class MessageKind(Enum):
    NAVIGATE_NEXT = "navigate_next"
    NAVIGATE_PREV = "navigate_prev"
    CONFIRM = "confirm"
    DISMISS = "dismiss"
    PRIMARY_BUTTON = "primary_button"
    SECONDARY_BUTTON = "secondary_button"
    HOVER_PRIMARY = "hover_primary"
    HOVER_SECONDARY = "hover_secondary"
    NO_HOVER = "no_hover"


@dataclass(frozen=True)
class ModalMessage:
    """Semantic message produced by :meth:`Modal.handle_event`.

    Attributes:
        kind: What happened
        target: Button a CONFIRM message refers to
        pointer: Pointer position for mouse-originated messages
    """
    kind: MessageKind
    target: FocusTarget = FocusTarget.NONE
    pointer: Optional[Tuple[int, int]] = None


_KEY_MESSAGES = {
    events.KEY_TAB: ModalMessage(MessageKind.NAVIGATE_NEXT),
    events.KEY_RIGHT: ModalMessage(MessageKind.NAVIGATE_NEXT),
    events.KEY_BTAB: ModalMessage(MessageKind.NAVIGATE_PREV),
    events.KEY_LEFT: ModalMessage(MessageKind.NAVIGATE_PREV),
    events.KEY_ESCAPE: ModalMessage(MessageKind.DISMISS),
    'y': ModalMessage(MessageKind.CONFIRM, FocusTarget.PRIMARY),
    'Y': ModalMessage(MessageKind.CONFIRM, FocusTarget.PRIMARY),
    'n': ModalMessage(MessageKind.CONFIRM, FocusTarget.SECONDARY),
    'N': ModalMessage(MessageKind.CONFIRM, FocusTarget.SECONDARY),
}

_HOVER_KINDS = {
    FocusTarget.PRIMARY: MessageKind.HOVER_PRIMARY,
    FocusTarget.SECONDARY: MessageKind.HOVER_SECONDARY,
    FocusTarget.NONE: MessageKind.NO_HOVER,
}

_CLICK_KINDS = {
    FocusTarget.PRIMARY: MessageKind.PRIMARY_BUTTON,
    FocusTarget.SECONDARY: MessageKind.SECONDARY_BUTTON,
}

_CONFIRM_ACTIONS = {
    FocusTarget.PRIMARY: ActionKind.CONFIRM,
    FocusTarget.SECONDARY: ActionKind.CANCEL,
}


class Modal(Component):
    """A dialog with a title, a message and two buttons.

    The dialog is centered in its area unless ``x``/``y`` place it.
    The dialog starts hidden. :meth:`show` and :meth:`hide` start the
    appear and disappear transitions, which the host advances once per
    frame with :meth:`advance_animation`.

    Attributes:
        title: Title drawn in the top border
        content: Message text
        primary_label: Caption of the left (primary) button
        secondary_label: Caption of the right (secondary) button
        theme: Shared, read-only Theme
        width: Requested dialog width (cells, or a float fraction)
        height: Requested dialog height (cells, or a float fraction)
        x: Requested left edge, or None to center horizontally
        y: Requested top edge, or None to center vertically
        display_state: Current DisplayState
        animation_frame: Progress of the current transition
        last_pointer: Last pointer position seen, or None
        term: Blessed Terminal used to size the viewport
    """

    def __init__(self, content, title="Confirm", primary_label="Confirm",
                 secondary_label="Cancel", theme: Optional[Theme] = None,
                 width=geometry.DEFAULT_WIDTH, height=geometry.DEFAULT_HEIGHT,
                 term: Optional[Terminal] = None, x=None, y=None):
        super().__init__()
        self.content = content
        self.title = title
        self.primary_label = primary_label
        self.secondary_label = secondary_label
        self.theme = theme or Theme.dark()
        self.width = width
        self.height = height
        self.x = x
        self.y = y
        self.display_state = DisplayState.HIDDEN
        self.animation_frame = 0
        self.last_pointer: Optional[Tuple[int, int]] = None
        self._focused_button = FocusTarget.PRIMARY
        self.term = term if term is not None else Terminal()

    # Fluent configuration

    def with_title(self, title):
        """Set the title drawn in the top border.

        Args:
            title: New title text

        Returns:
            The modal, for chaining
        """
        self.title = title
        return self

    def primary_button(self, label):
        """Set the caption of the primary (left) button.

        Args:
            label: Button caption

        Returns:
            The modal, for chaining
        """
        self.primary_label = label
        return self

    def secondary_button(self, label):
        """Set the caption of the secondary (right) button."""
        self.secondary_label = label
        return self

    def with_theme(self, theme: Theme):
        """Replace the theme used for drawing."""
        self.theme = theme
        self.redraw = True
        return self

    def with_position(self, x=None, y=None):
        """Place the dialog's top-left corner.

        Args:
            x: Left edge in cells, a float fraction of the free space, or None to center
            y: Top edge, same conventions as x

        Returns:
            The modal, for chaining
        """
        self.x = x
        self.y = y
        self.redraw = True
        return self

    # Lifecycle

    @property
    def focused_button(self) -> FocusTarget:
        """Button that Enter activates, or FocusTarget.NONE."""
        return self._focused_button

    @property
    def visibility(self) -> float:
        return animation.visibility(self.display_state, self.animation_frame)

    def is_visible(self):
        """True while the dialog is appearing or fully shown."""
        return self.display_state in (DisplayState.APPEARING, DisplayState.VISIBLE)

    def show(self):
        """Start the appear transition. Ignored unless the dialog is hidden."""
        if self.display_state is not DisplayState.HIDDEN:
            return
        self._set_state(DisplayState.APPEARING)

    def hide(self):
        """Start the disappear transition. Ignored unless the dialog is showing."""
        if not self.is_visible():
            return
        self._set_state(DisplayState.DISAPPEARING)

    def _set_state(self, state):
        logger.debug("Modal %r: %s -> %s", self.title, self.display_state.value, state.value)
        self.display_state = state
        self.animation_frame = 0
        self.redraw = True

    def advance_animation(self):
        state, frame = animation.advance_animation(self.display_state, self.animation_frame)
        if (state, frame) == (self.display_state, self.animation_frame):
            return
        if state is not self.display_state:
            logger.debug("Modal %r: %s -> %s", self.title, self.display_state.value, state.value)
        self.display_state = state
        self.animation_frame = frame
        self.redraw = True

    # Geometry

    def viewport(self) -> Rect:
        """Current terminal area, used for hit testing."""
        return Rect(0, 0, self.term.width, self.term.height)

    def layout(self, area: Rect):
        """Dialog, primary button and secondary button rectangles for ``area``."""
        box = geometry.modal_rect(area, self.width, self.height, self.x, self.y)
        primary, secondary = geometry.button_rects(box, self.primary_label, self.secondary_label)
        return box, primary, secondary

    def hit_test(self, x, y, area: Optional[Rect] = None) -> FocusTarget:
        _, primary, secondary = self.layout(area if area is not None else self.viewport())
        return geometry.hit_test(x, y, primary, secondary)

    # Component contract

    def handle_event(self, event) -> Optional[ModalMessage]:
        """Translate an input event into a message without changing state.

        Hidden and disappearing dialogs ignore all input.

        Args:
            event: KeyPress, mouse, Resize or Tick event

        Returns:
            ModalMessage for :meth:`update`, or None if the event is ignored
        """
        if self.display_state in (DisplayState.HIDDEN, DisplayState.DISAPPEARING):
            return None

        if isinstance(event, events.KeyPress):
            if event.code == events.KEY_ENTER:
                if self._focused_button is FocusTarget.NONE:
                    return None
                return ModalMessage(MessageKind.CONFIRM, self._focused_button)
            return _KEY_MESSAGES.get(event.code)

        if isinstance(event, events.MouseMove):
            target = self.hit_test(event.x, event.y)
            return ModalMessage(_HOVER_KINDS[target], pointer=(event.x, event.y))

        if isinstance(event, (events.MouseDown, events.MouseUp)):
            if event.button is not events.MouseButton.LEFT:
                return None
            target = self.hit_test(event.x, event.y)
            if target is FocusTarget.NONE:
                return None
            return ModalMessage(_CLICK_KINDS[target], target, pointer=(event.x, event.y))

        if isinstance(event, events.Resize):
            if self.last_pointer is None:
                return None
            x, y = self.last_pointer
            target = self.hit_test(x, y, Rect(0, 0, event.width, event.height))
            if target is FocusTarget.NONE:
                return None
            return ModalMessage(_HOVER_KINDS[target], pointer=self.last_pointer)

        return None

    def update(self, message: ModalMessage) -> Optional[Action]:
        """Apply a message and report what the host should do.

        Args:
            message: Message produced by :meth:`handle_event`

        Returns:
            Action for the host, or None
        """
        if message.pointer is not None:
            self.last_pointer = message.pointer

        kind = message.kind
        if kind is MessageKind.NAVIGATE_NEXT:
            if self._focused_button is FocusTarget.PRIMARY:
                self._focus(FocusTarget.SECONDARY)
            else:
                self._focus(FocusTarget.PRIMARY)
        elif kind is MessageKind.NAVIGATE_PREV:
            if self._focused_button is FocusTarget.SECONDARY:
                self._focus(FocusTarget.PRIMARY)
            else:
                self._focus(FocusTarget.SECONDARY)
        elif kind is MessageKind.HOVER_PRIMARY:
            self._focus(FocusTarget.PRIMARY)
        elif kind is MessageKind.HOVER_SECONDARY:
            self._focus(FocusTarget.SECONDARY)
        elif kind is MessageKind.NO_HOVER:
            self._focus(FocusTarget.NONE)
        elif kind is MessageKind.PRIMARY_BUTTON:
            return Action(ActionKind.CONFIRM, FocusTarget.PRIMARY)
        elif kind is MessageKind.SECONDARY_BUTTON:
            return Action(ActionKind.CANCEL, FocusTarget.SECONDARY)
        elif kind is MessageKind.CONFIRM:
            if message.target in _CONFIRM_ACTIONS:
                return Action(_CONFIRM_ACTIONS[message.target], message.target)
        elif kind is MessageKind.DISMISS:
            self.hide()
            return Action(ActionKind.CANCEL)
        return None

    def _focus(self, target):
        if target is not self._focused_button:
            self._focused_button = target
            self.redraw = True

    def render(self, surface, area: Rect):
        """Draw the backdrop, dialog, message and buttons into ``area``.

        Args:
            surface: Drawing target, normally a TerminalSurface
            area: Screen area the dialog is placed in
        """
        if self.display_state is DisplayState.HIDDEN:
            return

        theme = self.theme
        visibility = self.visibility
        fade = ('dim',) if visibility < 1.0 else ()
        box, primary, secondary = self.layout(area)

        if visibility > 0.5:
            surface.fill(area, compose_style(theme.muted, theme.background))
        surface.draw_box(
            box,
            border=theme.border_style,
            title=self.title,
            style=compose_style(theme.primary, theme.background, 'bold', *fade),
            fill_style=compose_style(theme.text, theme.background),
        )

        inner = box.inner()
        text_width = max(1, inner.width - 2)
        lines = []
        for paragraph in self.content.splitlines() or ['']:
            lines.extend(textwrap.wrap(paragraph, text_width) or [''])
        max_lines = min(inner.height // 2, MESSAGE_MAX_LINES)
        text_style = compose_style(theme.text, theme.background, *fade)
        for row, line in enumerate(lines[:max_lines]):
            surface.draw_text(inner.x + 1, inner.y + row, line, text_style)

        self._render_button(surface, primary, self.primary_label,
                            FocusTarget.PRIMARY, theme.primary, fade)
        self._render_button(surface, secondary, self.secondary_label,
                            FocusTarget.SECONDARY, theme.secondary, fade)

    def _render_button(self, surface, rect, label, target, color, fade):
        if rect.is_empty():
            return
        if self._focused_button is target:
            text = f'  {label}  '
            style = compose_style(self.theme.background, color, 'bold', *fade)
        else:
            text = f'[ {label} ]'
            style = compose_style(color, self.theme.background, 'bold', *fade)
        surface.draw_text(rect.x, rect.y, text[:rect.width], style)
