"""The heading line showing the committer and the git version."""

from __future__ import annotations

from dataclasses import dataclass

from repofetch.styling import AnsiColor, Color, get_style, paint


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


@dataclass
class Title:
    """Committer name and git version, underlined."""

    git_username: str
    git_version: str
    title_color: Color = AnsiColor.DEFAULT
    tilde_color: Color = AnsiColor.DEFAULT
    underline_color: Color = AnsiColor.DEFAULT
    is_bold: bool = True

    def __str__(self) -> str:
        if not self.git_username and not self.git_version:
            return ""
        git_info_length = _byte_length(self.git_username) + _byte_length(
            self.git_version
        )
        title_style = get_style(self.is_bold, self.title_color)
        if self.git_username and self.git_version:
            tilde_style = get_style(self.is_bold, self.tilde_color)
            line = (
                f"{title_style.paint(self.git_username)} "
                f"{tilde_style.paint('~')} "
                f"{title_style.paint(self.git_version)}"
            )
            width = git_info_length + 3
        else:
            line = title_style.paint(self.git_username) + title_style.paint(
                self.git_version
            )
            width = git_info_length
        separator = paint("-" * width, self.underline_color)
        return f"{line}\n{separator}\n"