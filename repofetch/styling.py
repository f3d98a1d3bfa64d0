"""Terminal colours and text styles expressed as ANSI escape sequences."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class AnsiColor(enum.Enum):
    """One of the sixteen standard terminal colours, or the terminal default."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    DEFAULT = 39
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    @property
    def fg_code(self) -> str:
        """SGR parameters selecting this colour as foreground."""
        return str(self.value)

    @property
    def bg_code(self) -> str:
        """SGR parameters selecting this colour as background."""
        return str(self.value + 10)


@dataclass(frozen=True)
class RgbColor:
    """A 24-bit true colour."""

    r: int
    g: int
    b: int

    @property
    def fg_code(self) -> str:
        """SGR parameters selecting this colour as foreground."""
        return f"38;2;{self.r};{self.g};{self.b}"

    @property
    def bg_code(self) -> str:
        """SGR parameters selecting this colour as background."""
        return f"48;2;{self.r};{self.g};{self.b}"


Color = Union[AnsiColor, RgbColor]

_RESET = "\x1b[0m"
_FG_RESET = "\x1b[39m"
_BG_RESET = "\x1b[49m"


@dataclass(frozen=True)
class Style:
    """A foreground colour with optional bold weight."""

    color: Color | None = None
    bold: bool = False

    def paint(self, text: str) -> str:
        """Return ``text`` wrapped in this style's escape sequences."""
        codes = []
        if self.bold:
            codes.append("1")
        if self.color is not None:
            codes.append(self.color.fg_code)
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


_NUMBERED_COLORS = (
    AnsiColor.BLACK,
    AnsiColor.RED,
    AnsiColor.GREEN,
    AnsiColor.YELLOW,
    AnsiColor.BLUE,
    AnsiColor.MAGENTA,
    AnsiColor.CYAN,
    AnsiColor.WHITE,
    AnsiColor.BRIGHT_BLACK,
    AnsiColor.BRIGHT_RED,
    AnsiColor.BRIGHT_GREEN,
    AnsiColor.BRIGHT_YELLOW,
    AnsiColor.BRIGHT_BLUE,
    AnsiColor.BRIGHT_MAGENTA,
    AnsiColor.BRIGHT_CYAN,
    AnsiColor.BRIGHT_WHITE,
)


def num_to_color(num: int) -> AnsiColor:
    """Map a colour number 0-15 to its ANSI colour; anything else is the default."""
    if 0 <= num < len(_NUMBERED_COLORS):
        return _NUMBERED_COLORS[num]
    return AnsiColor.DEFAULT


def get_style(is_bold: bool, color: Color) -> Style:
    """Build a style of the given colour, bold if requested."""
    return Style(color=color, bold=is_bold)


def paint(text: str, color: Color) -> str:
    """Colour the foreground of ``text``."""
    return f"\x1b[{color.fg_code}m{text}{_FG_RESET}"


def on_color(text: str, color: Color) -> str:
    """Colour the background of ``text``."""
    return f"\x1b[{color.bg_code}m{text}{_BG_RESET}"