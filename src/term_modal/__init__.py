"""
Terminal Modal Library

An animated, keyboard-and-mouse-driven modal dialog for terminal UIs built
on the Blessed library, plus the component contract and host loop that
drive it.
"""

from .animation import FRAME_MAX, DisplayState, advance_animation, visibility
from .component import Action, ActionKind, Component, FocusTarget
from .config import RuntimeConfig
from .controller import ComponentController
from .events import (
    Event,
    KeyPress,
    MouseButton,
    MouseDown,
    MouseMove,
    MouseUp,
    Resize,
    TerminalEventSource,
    Tick,
)
from .geometry import Dimensions, ConstrainedDimensions, Rect, button_rects, hit_test, modal_rect
from .logging_setup import configure_logging
from .modal import MessageKind, Modal, ModalMessage
from .surface import TerminalSurface
from .theme import BorderStyle, Theme

__all__ = [
    'FRAME_MAX',
    'DisplayState',
    'advance_animation',
    'visibility',
    'Action',
    'ActionKind',
    'Component',
    'FocusTarget',
    'RuntimeConfig',
    'ComponentController',
    'Event',
    'KeyPress',
    'MouseButton',
    'MouseDown',
    'MouseMove',
    'MouseUp',
    'Resize',
    'TerminalEventSource',
    'Tick',
    'Dimensions',
    'ConstrainedDimensions',
    'Rect',
    'button_rects',
    'hit_test',
    'modal_rect',
    'configure_logging',
    'MessageKind',
    'Modal',
    'ModalMessage',
    'TerminalSurface',
    'BorderStyle',
    'Theme',
]

__version__ = '0.1.0'
