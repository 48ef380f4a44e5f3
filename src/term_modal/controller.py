"""
Host loop for component-based terminal applications.

:class:`ComponentController` owns the terminal: it enters fullscreen and
cbreak mode, polls for input once per frame, routes each event to the
top-most component, advances animations, and redraws the component stack.
"""

import logging
import signal
from typing import List, Optional

from blessed import Terminal

from .component import Action, Component
from .config import RuntimeConfig
from .events import Resize, TerminalEventSource, mouse_tracking
from .geometry import Rect
from .surface import TerminalSurface

logger = logging.getLogger(__name__)


class ComponentController:
    """Helper that manages a component stack and event loop.

    Subclasses push their initial components (typically in ``__init__``)
    using :meth:`push_component` and react to outcomes in :meth:`on_action`.
    Components are drawn bottom-up, so later components overlay earlier
    ones; only the top-most component receives input.
    """

    def __init__(
        self,
        *,
        term: Optional[Terminal] = None,
        config: Optional[RuntimeConfig] = None,
        event_source: Optional[TerminalEventSource] = None,
        register_resize_handler: bool = True,
    ):
        self.term = term or Terminal()
        self.config = config or RuntimeConfig()
        self.events = event_source or TerminalEventSource(
            self.term, timeout=self.config.tick_interval
        )
        self.surface = TerminalSurface(self.term)
        self.components: List[Component] = []
        self._running = False
        if register_resize_handler:
            signal.signal(signal.SIGWINCH, self._handle_sigwinch)

    def _handle_sigwinch(self, signum, frame):
        """Queue a Resize event for the next loop iteration."""
        self.events.notify_resize()

    def push_component(self, component: Component):
        """Push a component onto the stack."""
        component.redraw = True
        self.components.append(component)

    def pop_component(self) -> Optional[Component]:
        """Pop the top component off the stack."""
        if not self.components:
            return None
        popped = self.components.pop()
        if self.components:
            self.components[-1].redraw = True
        return popped

    def current_component(self) -> Optional[Component]:
        """Return the top-most component, if any."""
        return self.components[-1] if self.components else None

    def on_action(self, component: Component, action: Action):
        """Hook receiving every Action returned by a component's update()."""

    def on_tick(self):
        """Optional hook executed once per loop iteration after animations."""

    def stop(self):
        """Leave the event loop after the current iteration."""
        self._running = False

    def run(self):
        """Enter the main event loop."""
        if not self.components:
            raise RuntimeError(
                "ComponentController.run() called with no components. "
                "Call push_component() before run()."
            )

        logger.info("Starting event loop at %.1f fps", self.config.fps)
        self._running = True
        with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor(), \
                mouse_tracking(self.term, enabled=self.config.mouse):
            self._redraw(force=True)
            while self._running and self.components:
                self.step(self.events.poll())
        logger.info("Event loop stopped")

    def step(self, event):
        """Process one event, advance one frame, and redraw if needed."""
        force = False
        if isinstance(event, Resize):
            logger.info("Terminal resized to %dx%d", event.width, event.height)
            force = True

        component = self.current_component()
        if component is not None:
            message = component.handle_event(event)
            if message is not None:
                action = component.update(message)
                if action is not None:
                    logger.debug("Action %s from %s", action, type(component).__name__)
                    self.on_action(component, action)

        for component in list(self.components):
            component.advance_animation()
        self.on_tick()
        self._redraw(force=force)

    def _redraw(self, force: bool = False):
        """Redraw every layer if any of them requested it."""
        if not self.components:
            return
        if not force and not any(component.redraw for component in self.components):
            return
        area = Rect(0, 0, self.term.width, self.term.height)
        self.surface.clear()
        for component in self.components:
            component.redraw = False
            component.render(self.surface, area)
        self.surface.flush()
