"""
Input events and the terminal event source that produces them.

Events are plain immutable records. :class:`TerminalEventSource` reads
keystrokes from a ``blessed`` Terminal, decodes SGR mouse reports, and
yields a :class:`Tick` whenever nothing arrives within the tick interval.
"""

import contextlib
import logging
import re
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Optional, Union

from blessed import Terminal

logger = logging.getLogger(__name__)

KEY_TAB = 'KEY_TAB'
KEY_BTAB = 'KEY_BTAB'
KEY_ENTER = 'KEY_ENTER'
KEY_ESCAPE = 'KEY_ESCAPE'
KEY_LEFT = 'KEY_LEFT'
KEY_RIGHT = 'KEY_RIGHT'

# Control characters blessed may hand back without a key name
_RAW_KEY_NAMES = {
    '\t': KEY_TAB,
    '\r': KEY_ENTER,
    '\n': KEY_ENTER,
    '\x1b': KEY_ESCAPE,
}

# SGR (1006) extended mouse report: ESC [ < button ; column ; row M|m
_SGR_MOUSE = re.compile(r'\x1b\[<(\d+);(\d+);(\d+)([Mm])')
_SGR_PREFIX = '\x1b[<'
_MAX_REPORT_LENGTH = 32

_MOTION_FLAG = 32
_WHEEL_FLAG = 64
_NO_BUTTON = 3

# Any-motion tracking (1003) with SGR encoding (1006)
_MOUSE_ON = '\x1b[?1003h\x1b[?1006h'
_MOUSE_OFF = '\x1b[?1006l\x1b[?1003l'


class MouseButton(Enum):
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


@dataclass(frozen=True)
class KeyPress:
    """A key press; ``code`` is a blessed key name or a printable character."""
    code: str


@dataclass(frozen=True)
class MouseMove:
    x: int
    y: int


@dataclass(frozen=True)
class MouseDown:
    x: int
    y: int
    button: MouseButton = MouseButton.LEFT


@dataclass(frozen=True)
class MouseUp:
    x: int
    y: int
    button: MouseButton = MouseButton.LEFT


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Tick:
    """No input arrived within the tick interval."""


Event = Union[KeyPress, MouseMove, MouseDown, MouseUp, Resize, Tick]


def from_keystroke(key) -> Optional[KeyPress]:
    """Convert a blessed Keystroke into a :class:`KeyPress`.

    Returns None for an empty keystroke (inkey timeout).
    """
    text = str(key)
    if not text:
        return None
    if key.is_sequence and key.name:
        return KeyPress(key.name)
    return KeyPress(_RAW_KEY_NAMES.get(text, text))


def parse_mouse_report(sequence: str) -> Optional[Event]:
    """Decode one SGR mouse report into a mouse event.

    Terminal coordinates are 1-based; events use 0-based cells. Wheel
    reports and unrecognized sequences return None.
    """
    match = _SGR_MOUSE.fullmatch(sequence)
    if not match:
        return None
    code, column, row, final = match.groups()
    code = int(code)
    x, y = int(column) - 1, int(row) - 1
    if code & _WHEEL_FLAG:
        return None
    if code & _MOTION_FLAG:
        return MouseMove(x, y)
    button_bits = code & 3
    if button_bits == _NO_BUTTON:
        return None
    button = MouseButton(button_bits)
    if final == 'M':
        return MouseDown(x, y, button)
    return MouseUp(x, y, button)


@contextlib.contextmanager
def mouse_tracking(term: Terminal, enabled=True):
    """Enable SGR any-motion mouse reporting for the duration of the block."""
    if not enabled:
        yield
        return
    print(_MOUSE_ON, end='', flush=True)
    try:
        yield
    finally:
        print(_MOUSE_OFF, end='', flush=True)


class TerminalEventSource:
    """Polls a blessed Terminal and produces :data:`Event` values.

    Attributes:
        term: Blessed Terminal instance to read from
        timeout: Seconds to wait for input before producing a Tick
    """

    def __init__(self, term: Terminal, timeout: float = 1 / 60):
        self.term = term
        self.timeout = timeout
        self._pending: Deque[Event] = deque()

    def push(self, event: Event):
        """Queue a synthetic event ahead of terminal input."""
        self._pending.append(event)

    def notify_resize(self):
        """Queue a Resize event with the terminal's current size."""
        self.push(Resize(self.term.width, self.term.height))

    def poll(self) -> Event:
        """Return the next event, waiting at most ``timeout`` seconds."""
        if self._pending:
            return self._pending.popleft()

        key = self.term.inkey(timeout=self.timeout)
        if not key:
            return Tick()

        text = str(key)
        if text == '\x1b' or text.startswith('\x1b['):
            matched, event = self._read_mouse_report(text)
            if matched:
                # Wheel and release-without-button reports carry no event
                return event if event is not None else Tick()

        return from_keystroke(key)

    def _read_mouse_report(self, prefix: str):
        """Finish reading a mouse report that starts with ``prefix``.

        Returns ``(matched, event)``. Characters that turn out not to belong
        to a mouse report are pushed back so they are delivered as ordinary
        keystrokes.
        """
        buffer = prefix
        consumed = ''
        while len(buffer) < _MAX_REPORT_LENGTH:
            if len(buffer) >= len(_SGR_PREFIX):
                if not buffer.startswith(_SGR_PREFIX):
                    break
                if buffer[-1] in 'Mm':
                    event = parse_mouse_report(buffer)
                    if event is None:
                        logger.debug("Dropped mouse report %r", buffer)
                    return True, event
            elif not _SGR_PREFIX.startswith(buffer):
                break
            key = self.term.inkey(timeout=0)
            if not key:
                break
            buffer += str(key)
            consumed += str(key)
        if consumed:
            self.term.ungetch(consumed)
        return False, None
