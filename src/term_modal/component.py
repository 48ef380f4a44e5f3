"""
Component contract shared by every widget hosted in a terminal application.

A component turns raw input events into its own message type
(:meth:`Component.handle_event`), applies those messages
(:meth:`Component.update`), and draws itself onto a surface
(:meth:`Component.render`). The host loop owns the terminal and calls these
in order, so components never touch terminal I/O directly.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class FocusTarget(Enum):
    """Which dialog button, if any, is focused or under the pointer."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    NONE = "none"


class ActionKind(Enum):
    """Application-level outcomes a component hands back to its host."""
    QUIT = "quit"
    CANCEL = "cancel"
    CONFIRM = "confirm"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Action:
    """Result of :meth:`Component.update` returned to the host loop.

    Attributes:
        kind: What the host should do
        target: Button that produced the action, if any
        payload: Free-form value for ``ActionKind.CUSTOM`` actions
    """
    kind: ActionKind
    target: FocusTarget = FocusTarget.NONE
    payload: Optional[str] = None


class Component(ABC):
    """Base class for widgets driven by a :class:`ComponentController`.

    Attributes:
        redraw: Whether the component asked to be drawn on the next frame.
            The host clears it after rendering.
    """

    def __init__(self):
        self.redraw = True

    @abstractmethod
    def handle_event(self, event) -> Optional[Any]:
        """Translate an input event into a component message.

        Must not mutate the component. Returns None when the event is
        not relevant.
        """

    @abstractmethod
    def update(self, message) -> Optional[Action]:
        """Apply a message produced by :meth:`handle_event`."""

    @abstractmethod
    def render(self, surface, area):
        """Draw the component onto ``surface`` within ``area``."""

    def advance_animation(self):
        """Called once per frame by the host.

        Static components have nothing to animate.
        """
        pass
