"""The version of a project, from its latest tag or its manifest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from repofetch.info_field import InfoField


@dataclass
class VersionInfo(InfoField):
    """The project's current version."""

    version: str

    def value(self) -> str:
        return self.version

    def title(self) -> str:
        return "Version"


def get_version(
    tags: Iterable[tuple[str, Optional[int]]], manifest_version: Optional[str]
) -> str:
    """Name of the tag whose commit is most recent, else the manifest's version.

    ``tags`` holds pairs of short tag name and commit time in Unix seconds;
    a time of None marks a tag that does not point at a commit.
    """
    version = ""
    most_recent = 0
    for name, commit_time in tags:
        if commit_time is not None and commit_time > most_recent:
            most_recent = commit_time
            version = name
    if version:
        return version
    return manifest_version or ""