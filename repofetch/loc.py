"""Total lines of code in a repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from repofetch.info_field import InfoField
from repofetch.languages import get_total_loc
from repofetch.utils import NumberSeparator, format_number


@dataclass
class LocInfo(InfoField):
    """The number of lines of code over all languages."""

    lines_of_code: int
    number_separator: NumberSeparator = field(
        default=NumberSeparator.PLAIN, metadata={"serialize": False}
    )

    @classmethod
    def from_loc(
        cls,
        loc_by_language: Iterable[tuple[Any, int]],
        number_separator: NumberSeparator,
    ) -> "LocInfo":
        """Sum the lines of code of every language."""
        return cls(
            lines_of_code=get_total_loc(loc_by_language),
            number_separator=number_separator,
        )

    def value(self) -> str:
        return format_number(self.lines_of_code, self.number_separator)

    def title(self) -> str:
        return "Lines of code"