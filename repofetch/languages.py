"""Share of each programming language in a repository, with a coloured bar."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Mapping, Sequence

from repofetch.info_field import InfoField
from repofetch.styling import AnsiColor, Color, on_color, paint

LANGUAGES_BAR_LENGTH = 26

_COLOR_PALETTE: tuple[Color, ...] = (
    AnsiColor.RED,
    AnsiColor.GREEN,
    AnsiColor.YELLOW,
    AnsiColor.BLUE,
    AnsiColor.MAGENTA,
    AnsiColor.CYAN,
)

PreparedLanguage = tuple[str, float, Color]


@dataclass
class LanguageWithPercentage:
    """A language and the percentage of the code written in it."""

    language: Any
    percentage: float


@dataclass
class LanguagesInfo(InfoField):
    """The languages of a repository, ordered as given, with their shares."""

    languages_with_percentage: list[LanguageWithPercentage]
    true_color: bool = field(default=False, metadata={"serialize": False})
    number_of_languages_to_display: int = field(
        default=6, metadata={"serialize": False}
    )
    info_color: Color = field(
        default=AnsiColor.DEFAULT, metadata={"serialize": False}
    )

    @classmethod
    def from_loc(
        cls,
        loc_by_language: Iterable[tuple[Any, int]],
        true_color: bool,
        number_of_languages_to_display: int,
        info_color: Color,
    ) -> "LanguagesInfo":
        """Turn lines of code per language into percentages of the total."""
        pairs = list(loc_by_language)
        total = sum(loc for _, loc in pairs)
        languages = [
            LanguageWithPercentage(
                language=language,
                percentage=(loc / total * 100.0) if total else math.nan,
            )
            for language, loc in pairs
        ]
        return cls(
            languages_with_percentage=languages,
            true_color=true_color,
            number_of_languages_to_display=number_of_languages_to_display,
            info_color=info_color,
        )

    def value(self) -> str:
        languages = prepare_languages(self, _COLOR_PALETTE)
        parts = [build_language_bar(languages)]
        padding = " " * (len(self.title()) + 2)
        for index, (language, percentage, circle_color) in enumerate(languages):
            circle = paint("\u25cf", circle_color)
            label = paint(f"{language} ({percentage:.1f} %)", self.info_color)
            language_str = f"{circle} {label} "
            if index % 2 == 0:
                parts.append(f"\n{padding}{language_str}")
            else:
                parts.append(language_str.rstrip())
        return "".join(parts)

    def title(self) -> str:
        return "Languages" if len(self.languages_with_percentage) > 1 else "Language"

    def to_dict(self) -> dict[str, Any]:
        """Serialize the languages and their percentages."""
        return super().to_dict()


def _circle_color_of(language: Any) -> Color | None:
    return getattr(language, "circle_color", None)


def prepare_languages(
    languages_info: LanguagesInfo, color_palette: Sequence[Color]
) -> list[PreparedLanguage]:
    """Name, percentage and colour of each shown language; the rest becomes "Other"."""
    prepared: list[PreparedLanguage] = []
    for index, entry in enumerate(languages_info.languages_with_percentage):
        circle_color = None
        if languages_info.true_color:
            circle_color = _circle_color_of(entry.language)
        if circle_color is None:
            circle_color = color_palette[index % len(color_palette)]
        prepared.append((str(entry.language), entry.percentage, circle_color))

    limit = languages_info.number_of_languages_to_display
    if len(prepared) <= limit:
        return prepared
    shown = prepared[:limit]
    other = sum(percentage for _, percentage, _ in prepared[limit:])
    shown.append(("Other", other, AnsiColor.WHITE))
    return shown


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def build_language_bar(languages: Iterable[PreparedLanguage]) -> str:
    """One background-coloured segment per language, sized by its share."""
    segments = []
    for _, percentage, circle_color in languages:
        width = max(_round_half_away(percentage / 100.0 * LANGUAGES_BAR_LENGTH), 1)
        segments.append(on_color(" " * width, circle_color))
    return "".join(segments)


def sort_by_loc(loc_by_language: Mapping[Hashable, int]) -> list[tuple[Any, int]]:
    """Languages with their lines of code, most lines first."""
    return sorted(loc_by_language.items(), key=lambda item: item[1], reverse=True)


def get_total_loc(loc_by_language: Iterable[tuple[Any, int]]) -> int:
    """Total lines of code over all languages."""
    return sum(loc for _, loc in loc_by_language)


def get_main_language(loc_by_language: Sequence[tuple[Any, int]]) -> Any:
    """The first language of a list sorted by lines of code."""
    return loc_by_language[0][0]