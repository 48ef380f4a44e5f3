"""
Drawing surface backed by a blessed Terminal.

Components only ever call the methods here; cursor movement, formatting
and clipping to the visible screen are handled by the surface.
"""

from typing import Optional

from blessed import Terminal

from .geometry import Rect
from .theme import BorderStyle


class TerminalSurface:
    """Draws styled text and boxes at absolute cell positions.

    Styles are blessed compound formatter names such as
    ``"bold_magenta_on_black"``; None draws unstyled text.

    Attributes:
        term: Blessed Terminal instance to draw on
    """

    def __init__(self, term: Terminal):
        self.term = term

    def _format(self, text, style: Optional[str]):
        if not style:
            return text
        return getattr(self.term, style)(text)

    def draw_text(self, x, y, text, style: Optional[str] = None):
        """Draw ``text`` at ``(x, y)``, clipped to the terminal."""
        if y < 0 or y >= self.term.height or x >= self.term.width:
            return
        if x < 0:
            text = text[-x:]
            x = 0
        text = text[:self.term.width - x]
        if not text:
            return
        print(self.term.move(y, x) + self._format(text, style), end='')

    def fill(self, rect: Rect, style: Optional[str] = None):
        """Paint ``rect`` with blanks in the given style."""
        if rect.is_empty():
            return
        for row in range(rect.height):
            self.draw_text(rect.x, rect.y + row, ' ' * rect.width, style)

    def draw_box(self, rect: Rect, border: BorderStyle = BorderStyle.SINGLE,
                 title="", style: Optional[str] = None,
                 fill_style: Optional[str] = None):
        """Draw a bordered box with an optional title in the top edge.

        The interior is filled with ``fill_style``. Boxes smaller than
        2x2 only get their interior filled.
        """
        if rect.is_empty():
            return
        if rect.width < 2 or rect.height < 2:
            self.fill(rect, fill_style)
            return

        span = rect.width - 2
        title_text = f' {title} ' if title else ''
        title_text = title_text[:span]
        top = border.top_left + title_text.center(span, border.horizontal) + border.top_right
        bottom = border.bottom_left + border.horizontal * span + border.bottom_right

        self.draw_text(rect.x, rect.y, top, style)
        for row in range(1, rect.height - 1):
            self.draw_text(rect.x, rect.y + row, border.vertical, style)
            self.draw_text(rect.x + 1, rect.y + row, ' ' * span, fill_style)
            self.draw_text(rect.right - 1, rect.y + row, border.vertical, style)
        self.draw_text(rect.x, rect.bottom - 1, bottom, style)

    def clear(self):
        print(self.term.home + self.term.clear, end='')

    def flush(self):
        print('', end='', flush=True)
