"""The date of the most recent commit."""

from __future__ import annotations

from dataclasses import dataclass

from repofetch.info_field import InfoField
from repofetch.utils import format_time


@dataclass
class LastChangeInfo(InfoField):
    """When the repository was last changed."""

    last_change: str

    @classmethod
    def from_timestamp(cls, timestamp: int, iso_time: bool) -> "LastChangeInfo":
        """Build from the Unix time of the most recent commit."""
        return cls(last_change=format_time(timestamp, iso_time))

    def value(self) -> str:
        return self.last_change

    def title(self) -> str:
        return "Last change"