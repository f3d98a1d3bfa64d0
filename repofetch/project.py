"""Project name with its numbers of branches and tags."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Optional
from urllib.parse import urlsplit

from repofetch.info_field import InfoField
from repofetch.utils import NumberSeparator, format_number

_SCP_LIKE = re.compile(r"^(?:[^@/]+@)?[^/:]+:(?P<path>.*)$")


def _url_path(repo_url: str) -> str:
    if "://" in repo_url:
        return urlsplit(repo_url).path
    match = _SCP_LIKE.match(repo_url)
    if match:
        return match.group("path")
    return repo_url


def get_repo_name(repo_url: str, manifest_name: Optional[str]) -> str:
    """Name of the repository taken from its remote URL, else from the manifest."""
    if not repo_url:
        return ""
    path = PurePosixPath(_url_path(repo_url))
    repo_name = path.with_suffix("").name if path.name else ""
    if repo_name:
        return repo_name
    return manifest_name or ""


def _counted(count: int, singular: str, plural: str, separator: NumberSeparator) -> str:
    if count == 0:
        return ""
    if count == 1:
        return f"1 {singular}"
    return f"{format_number(count, separator)} {plural}"


@dataclass
class ProjectInfo(InfoField):
    """The repository name, branch count and tag count."""

    repo_name: str
    number_of_branches: int = 0
    number_of_tags: int = 0
    number_separator: NumberSeparator = field(
        default=NumberSeparator.PLAIN, metadata={"serialize": False}
    )

    def value(self) -> str:
        if not self.repo_name:
            return ""
        branches = _counted(
            self.number_of_branches, "branch", "branches", self.number_separator
        )
        tags = _counted(self.number_of_tags, "tag", "tags", self.number_separator)
        if not branches and not tags:
            return self.repo_name
        if not branches or not tags:
            return f"{self.repo_name} ({tags}{branches})"
        return f"{self.repo_name} ({branches}, {tags})"

    def title(self) -> str:
        return "Project"