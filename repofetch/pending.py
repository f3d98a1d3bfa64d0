"""Uncommitted changes in the working tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Optional

from repofetch.info_field import InfoField


class ChangeKind(enum.Enum):
    """Kind of difference between the index and the working tree."""

    REMOVED = "removed"
    ADDED = "added"
    COPIED = "copied"
    MODIFIED = "modified"
    TYPE_CHANGE = "type-change"
    RENAMED = "renamed"
    INTENT_TO_ADD = "intent-to-add"
    CONFLICT = "conflict"


@dataclass
class PendingInfo(InfoField):
    """Counts of added, deleted and modified files."""

    added: int = 0
    deleted: int = 0
    modified: int = 0

    @classmethod
    def from_changes(cls, changes: Iterable[Optional[ChangeKind]]) -> "PendingInfo":
        """Tally changes; entries without a kind are ignored."""
        added = deleted = modified = 0
        for change in changes:
            if change is ChangeKind.REMOVED:
                deleted += 1
            elif change in (ChangeKind.ADDED, ChangeKind.COPIED):
                added += 1
            elif change in (ChangeKind.MODIFIED, ChangeKind.TYPE_CHANGE):
                modified += 1
            elif change is ChangeKind.RENAMED:
                added += 1
                deleted += 1
        return cls(added=added, deleted=deleted, modified=modified)

    def value(self) -> str:
        parts = []
        if self.modified > 0:
            parts.append(f"{self.modified}+-")
        if self.added > 0:
            parts.append(f"{self.added}+")
        if self.deleted > 0:
            parts.append(f"{self.deleted}-")
        return " ".join(parts)

    def title(self) -> str:
        return "Pending"