"""Size of the tracked files of a repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from repofetch.info_field import InfoField
from repofetch.utils import NumberSeparator, format_number

_BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")


def bytes_to_human_readable(num_bytes: int) -> str:
    """Express a byte count in the largest binary unit, with up to two decimals."""
    value = float(num_bytes)
    unit = _BINARY_UNITS[0]
    for candidate in _BINARY_UNITS[1:]:
        if value < 1024:
            break
        value /= 1024
        unit = candidate
    if unit == "B":
        return f"{num_bytes} B"
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {unit}"


@dataclass
class SizeInfo(InfoField):
    """Total size and number of files in the index."""

    repo_size: str
    file_count: int
    number_separator: NumberSeparator = field(
        default=NumberSeparator.PLAIN, metadata={"serialize": False}
    )

    @classmethod
    def from_entry_sizes(
        cls, sizes: Iterable[int], number_separator: NumberSeparator
    ) -> "SizeInfo":
        """Build from the sizes of the index entries."""
        entries = list(sizes)
        return cls(
            repo_size=bytes_to_human_readable(sum(entries)),
            file_count=len(entries),
            number_separator=number_separator,
        )

    def value(self) -> str:
        if self.file_count == 0:
            return self.repo_size
        if self.file_count == 1:
            return f"{self.repo_size} (1 file)"
        count = format_number(self.file_count, self.number_separator)
        return f"{self.repo_size} ({count} files)"

    def title(self) -> str:
        return "Size"