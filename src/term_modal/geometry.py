"""
Layout and hit testing for the modal dialog.

Everything here is a pure function of the viewport size and the button
labels. Nothing is cached: callers recompute the layout for every render and
every pointer event, so the dialog follows terminal resizes automatically.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .component import FocusTarget

DEFAULT_WIDTH = 60
DEFAULT_HEIGHT = 14

# Space kept free around the dialog (total per axis)
HORIZONTAL_MARGIN = 4
VERTICAL_MARGIN = 2

BUTTON_INSET = 4
BUTTON_PADDING = 4
BUTTON_GAP = 4
BUTTON_ROW_FROM_BOTTOM = 4


@dataclass
class Dimensions:
    """Requested dialog position and size.

    All fields are optional and can be None, int, or float.
    Float values are interpreted as relative values (0.0 to 1.0) of the
    container size. A None position centers the dialog.
    """
    x: Optional[Union[int, float]] = None
    y: Optional[Union[int, float]] = None
    width: Optional[Union[int, float]] = None
    height: Optional[Union[int, float]] = None


@dataclass(frozen=True)
class Rect:
    """A resolved, non-negative screen rectangle in cell coordinates."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    def is_empty(self):
        return self.width <= 0 or self.height <= 0

    def contains(self, x, y):
        """Half-open containment test: ``[x, x+w) x [y, y+h)``."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def inner(self, margin=1):
        """The rectangle shrunk by ``margin`` cells on every side."""
        return Rect(
            self.x + margin,
            self.y + margin,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )

    def intersect(self, other: 'Rect') -> 'Rect':
        """Overlap of two rectangles; zero-sized when they are disjoint."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= left or bottom <= top:
            return Rect(left, top, 0, 0)
        return Rect(left, top, right - left, bottom - top)


class ConstrainedDimensions:
    """Dimensions that are constrained within a parent container.

    Positions and sizes are clamped so the result always fits inside the
    constraint box and never has a negative size, however small the
    container gets.

    Attributes:
        base: The requested dimensions
        constraints: The box the result must fit in
    """

    def __init__(self, base: Dimensions, constraints: Rect):
        self.base = base
        self.constraints = constraints

    @staticmethod
    def _clamp(val, minval, maxval):
        """Clamp a value between min and max, handling relative float values."""
        maxval = max(minval, maxval)
        if isinstance(val, float):
            # Interpret as relative value (0.0-1.0) and scale to container size
            return max(minval, min(maxval, int(round(minval + val * (maxval - minval)))))
        return max(minval, min(maxval, val))

    @property
    def width(self):
        if self.base.width is None:
            return self.constraints.width
        return ConstrainedDimensions._clamp(self.base.width, 0, self.constraints.width)

    @property
    def height(self):
        if self.base.height is None:
            return self.constraints.height
        return ConstrainedDimensions._clamp(self.base.height, 0, self.constraints.height)

    @property
    def x(self):
        """X position, centered if base.x is None."""
        if self.base.x is None:
            return self.constraints.x + (self.constraints.width - self.width) // 2
        return ConstrainedDimensions._clamp(
            self.base.x,
            self.constraints.x,
            self.constraints.right - self.width,
        )

    @property
    def y(self):
        """Y position, centered if base.y is None."""
        if self.base.y is None:
            return self.constraints.y + (self.constraints.height - self.height) // 2
        return ConstrainedDimensions._clamp(
            self.base.y,
            self.constraints.y,
            self.constraints.bottom - self.height,
        )

    def to_rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


def modal_rect(viewport: Rect, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, x=None, y=None) -> Rect:
    """Dialog rectangle for the given viewport.

    The size is clamped to the viewport minus its margins, so a tiny
    terminal yields a smaller (possibly empty) dialog rather than a
    negative one.

    Args:
        viewport: Area the dialog is placed in
        width: Requested width (cells, or a float fraction)
        height: Requested height (cells, or a float fraction)
        x: Left edge in screen cells, a float fraction of the free space,
            or None to center
        y: Top edge, same conventions as ``x``
    """
    available = Rect(
        viewport.x + HORIZONTAL_MARGIN // 2,
        viewport.y + VERTICAL_MARGIN // 2,
        max(0, viewport.width - HORIZONTAL_MARGIN),
        max(0, viewport.height - VERTICAL_MARGIN),
    )
    return ConstrainedDimensions(Dimensions(x, y, width, height), available).to_rect()


def button_rects(modal: Rect, primary_label: str, secondary_label: str) -> Tuple[Rect, Rect]:
    """Primary and secondary button rectangles inside ``modal``.

    Buttons sit on one row near the bottom of the dialog, primary on the
    left. Both are clipped to the area inside the border; a button that
    does not fit at all comes back empty.
    """
    inner = modal.inner()
    row = max(inner.y, modal.bottom - BUTTON_ROW_FROM_BOTTOM)
    primary = Rect(modal.x + BUTTON_INSET, row, len(primary_label) + BUTTON_PADDING, 1)
    secondary = Rect(primary.right + BUTTON_GAP, row, len(secondary_label) + BUTTON_PADDING, 1)
    return primary.intersect(inner), secondary.intersect(inner)


def hit_test(x, y, primary: Rect, secondary: Rect) -> FocusTarget:
    """Which button, if any, contains the point."""
    if primary.contains(x, y):
        return FocusTarget.PRIMARY
    if secondary.contains(x, y):
        return FocusTarget.SECONDARY
    return FocusTarget.NONE
