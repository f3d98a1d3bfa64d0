"""Colours used for the text part of the output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from repofetch.styling import AnsiColor, Color, num_to_color


@dataclass
class TextColors:
    """Colours of the title, separators, subtitles and values."""

    title: Color
    tilde: Color
    underline: Color
    subtitle: Color
    colon: Color
    info: Color

    @classmethod
    def from_numbers(
        cls, colors: Sequence[int], logo_primary_color: Color
    ) -> "TextColors":
        """Build text colours from colour numbers, falling back to defaults."""
        custom = [num_to_color(num) for num in colors]

        def pick(position: int, fallback: Color) -> Color:
            return custom[position] if position < len(custom) else fallback

        default = AnsiColor.DEFAULT
        return cls(
            title=pick(0, logo_primary_color),
            tilde=pick(1, default),
            underline=pick(2, default),
            subtitle=pick(3, logo_primary_color),
            colon=pick(4, default),
            info=pick(5, default),
        )