"""
Colors and border glyphs used when drawing dialogs.

Colors are ``blessed`` color names (``"magenta"``, ``"bright_black"``,
``"on_black"`` ...), so a style is just a compound formatter name that
the terminal resolves, e.g. ``"bold_black_on_magenta"``.
"""

from dataclasses import dataclass, replace
from enum import Enum


class BorderStyle(Enum):
    """Box-drawing glyphs: corners (tl, tr, bl, br), horizontal, vertical."""
    ROUNDED = ('╭', '╮', '╰', '╯', '─', '│')
    SINGLE = ('┌', '┐', '└', '┘', '─', '│')
    DOUBLE = ('╔', '╗', '╚', '╝', '═', '║')
    THICK = ('┏', '┓', '┗', '┛', '━', '┃')
    ASCII = ('+', '+', '+', '+', '-', '|')
    NONE = (' ', ' ', ' ', ' ', ' ', ' ')

    @property
    def top_left(self):
        return self.value[0]

    @property
    def top_right(self):
        return self.value[1]

    @property
    def bottom_left(self):
        return self.value[2]

    @property
    def bottom_right(self):
        return self.value[3]

    @property
    def horizontal(self):
        return self.value[4]

    @property
    def vertical(self):
        return self.value[5]


def compose_style(fg=None, bg=None, *modifiers):
    """Build a blessed compound formatter name.

    >>> compose_style('magenta', 'black', 'bold')
    'bold_magenta_on_black'
    """
    parts = list(modifiers)
    if fg:
        parts.append(fg)
    if bg:
        parts.append(f'on_{bg}')
    return '_'.join(parts) or None


@dataclass(frozen=True)
class Theme:
    """Immutable color and border configuration, shared between dialogs."""
    primary: str = 'magenta'
    secondary: str = 'blue'
    background: str = 'black'
    text: str = 'white'
    accent: str = 'cyan'
    muted: str = 'bright_black'
    border_style: BorderStyle = BorderStyle.ROUNDED

    @classmethod
    def dark(cls):
        return cls()

    @classmethod
    def light(cls):
        return cls(background='white', text='black', muted='white')

    @classmethod
    def named(cls, name):
        """Look up a preset theme by name."""
        presets = {'dark': cls.dark, 'light': cls.light}
        try:
            return presets[name.lower()]()
        except KeyError:
            raise ValueError(
                f"Unknown theme {name!r}; expected one of {sorted(presets)}"
            ) from None

    def with_primary(self, color):
        return replace(self, primary=color)

    def with_secondary(self, color):
        return replace(self, secondary=color)

    def with_border_style(self, border_style):
        return replace(self, border_style=border_style)
