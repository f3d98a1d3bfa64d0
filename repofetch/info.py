"""All information about a repository, rendered as text or serialized."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Collection, Iterable, Optional, Union

from repofetch.info_field import InfoField, InfoType
from repofetch.styling import AnsiColor, Color, on_color
from repofetch.text_colors import TextColors
from repofetch.title import Title

_PALETTE = (
    AnsiColor.BLACK,
    AnsiColor.RED,
    AnsiColor.GREEN,
    AnsiColor.YELLOW,
    AnsiColor.BLUE,
    AnsiColor.MAGENTA,
    AnsiColor.CYAN,
    AnsiColor.WHITE,
)

FieldSource = Union[InfoField, Callable[[], InfoField]]


def select_fields(
    fields: Iterable[tuple[InfoType, FieldSource]],
    disabled_fields: Collection[InfoType],
) -> list[InfoField]:
    """Keep the fields that are not disabled, in order.

    A field may be given as a callable that builds it; it is only called
    when the field is enabled.
    """
    selected = []
    for info_type, source in fields:
        if info_type in disabled_fields:
            continue
        selected.append(source if isinstance(source, InfoField) else source())
    return selected


@dataclass
class Info:
    """A title, the info fields and how to display them."""

    title: Optional[Title]
    info_fields: list[InfoField]
    text_colors: TextColors
    no_color_palette: bool = False
    no_bold: bool = False
    dominant_language: Any = None
    ascii_colors: list[Color] = field(default_factory=list)

    def __str__(self) -> str:
        parts = []
        if self.title is not None:
            parts.append(str(self.title))
        parts.extend(
            info_field.write_styled(self.no_bold, self.text_colors)
            for info_field in self.info_fields
        )
        if not self.no_color_palette:
            palette = "".join(on_color("   ", color) for color in _PALETTE)
            parts.append(f"\n{palette}\n")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """The title and fields as plain data with camelCase keys."""
        title = None
        if self.title is not None:
            title = {
                "gitUsername": self.title.git_username,
                "gitVersion": self.title.git_version,
            }
        return {
            "title": title,
            "infoFields": [info_field.to_dict() for info_field in self.info_fields],
        }

    def to_json(self) -> str:
        """Pretty-printed JSON of :meth:`to_dict`."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)