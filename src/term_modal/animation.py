"""
Frame-counted appear/disappear transitions.

The host loop calls :func:`advance_animation` once per tick; at the default
60 Hz a full transition of ``FRAME_MAX`` frames lasts about 167 ms.
"""

from enum import Enum
from typing import Tuple

FRAME_MAX = 10


class DisplayState(Enum):
    """Lifecycle phase of a dialog's visibility."""
    HIDDEN = "hidden"
    APPEARING = "appearing"
    VISIBLE = "visible"
    DISAPPEARING = "disappearing"


_FINAL_STATE = {
    DisplayState.APPEARING: DisplayState.VISIBLE,
    DisplayState.DISAPPEARING: DisplayState.HIDDEN,
}


def clamp_frame(frame: int) -> int:
    return max(0, min(FRAME_MAX, frame))


def is_transitioning(state: DisplayState) -> bool:
    return state in _FINAL_STATE


def advance_animation(state: DisplayState, frame: int) -> Tuple[DisplayState, int]:
    """Step a transition by one frame.

    Returns the new ``(state, frame)``. Outside a transition the state is
    kept and only the frame is clamped, so callers may invoke this
    unconditionally.
    """
    if not is_transitioning(state):
        return state, clamp_frame(frame)
    frame = min(clamp_frame(frame) + 1, FRAME_MAX)
    if frame == FRAME_MAX:
        return _FINAL_STATE[state], frame
    return state, frame


def visibility(state: DisplayState, frame: int) -> float:
    """Opacity in ``[0.0, 1.0]`` for the given state and frame."""
    progress = clamp_frame(frame) / FRAME_MAX
    if state is DisplayState.APPEARING:
        return progress
    if state is DisplayState.DISAPPEARING:
        return 1.0 - progress
    if state is DisplayState.VISIBLE:
        return 1.0
    return 0.0


def transition_duration(fps: float) -> float:
    """Seconds a full transition takes when ticked at ``fps``."""
    return FRAME_MAX / fps
