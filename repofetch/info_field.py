"""The common shape of every line of repository information."""

from __future__ import annotations

import dataclasses
import enum
from abc import ABC, abstractmethod
from typing import Any

from repofetch.styling import get_style
from repofetch.text_colors import TextColors


class InfoType(enum.Enum):
    """Names of the fields that can be turned off."""

    PROJECT = "project"
    DESCRIPTION = "description"
    HEAD = "head"
    PENDING = "pending"
    VERSION = "version"
    CREATED = "created"
    LANGUAGES = "languages"
    DEPENDENCIES = "dependencies"
    AUTHORS = "authors"
    LAST_CHANGE = "last-change"
    CONTRIBUTORS = "contributors"
    URL = "url"
    COMMITS = "commits"
    CHURN = "churn"
    LINES_OF_CODE = "lines-of-code"
    SIZE = "size"
    LICENSE = "license"


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _to_plain(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.name
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            _camel_case(f.name): _to_plain(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if f.metadata.get("serialize", True)
        }
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    return value


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class InfoField(ABC):
    """A titled piece of information about a repository."""

    @abstractmethod
    def value(self) -> str:
        """The text shown after the title."""

    @abstractmethod
    def title(self) -> str:
        """The field's title."""

    def write_styled(self, no_bold: bool, text_colors: TextColors) -> str:
        """Return the styled line for this field, or "" when it has no value."""
        styled_value = self.style_value(text_colors)
        if styled_value is None:
            return ""
        return f"{self.style_title(text_colors, no_bold)} {styled_value}\n"

    def style_title(self, text_colors: TextColors, no_bold: bool) -> str:
        """The title followed by a colon, both styled."""
        subtitle_style = get_style(not no_bold, text_colors.subtitle)
        colon_style = get_style(not no_bold, text_colors.colon)
        return subtitle_style.paint(self.title()) + colon_style.paint(":")

    def style_value(self, text_colors: TextColors) -> str | None:
        """The value styled line by line, or None when it is empty."""
        value = self.value()
        if not value:
            return None
        style = get_style(False, text_colors.info)
        return "\n".join(style.paint(line) for line in _lines(value))

    def to_dict(self) -> dict[str, Any]:
        """Serialize as ``{ClassName: {camelCaseField: value}}``.

        Dataclass fields whose metadata holds ``serialize: False`` are left out.
        """
        if dataclasses.is_dataclass(self):
            payload = _to_plain(self)
        else:
            payload = {
                _camel_case(name): _to_plain(item)
                for name, item in vars(self).items()
                if not name.startswith("_")
            }
        return {type(self).__name__: payload}