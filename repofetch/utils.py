"""Number and time formatting shared by the info fields."""

from __future__ import annotations

import enum
import time
from datetime import datetime, timedelta, timezone

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class NumberSeparator(enum.Enum):
    """How thousands are separated when printing numbers."""

    PLAIN = "plain"
    COMMA = "comma"
    SPACE = "space"
    UNDERSCORE = "underscore"

    @property
    def separator(self) -> str:
        return {
            NumberSeparator.PLAIN: "",
            NumberSeparator.COMMA: ",",
            NumberSeparator.SPACE: "\u202f",
            NumberSeparator.UNDERSCORE: "_",
        }[self]


class TimeTravelError(RuntimeError):
    """Raised when a commit date lies in the future."""


def format_number(number: int, number_separator: NumberSeparator) -> str:
    """Format ``number`` with the chosen thousands separator."""
    if number_separator is NumberSeparator.PLAIN:
        return str(number)
    return f"{number:,}".replace(",", number_separator.separator)


def format_time(timestamp: int, iso_time: bool) -> str:
    """Render a Unix timestamp as RFC 3339 or as a relative human time."""
    if iso_time:
        moment = _EPOCH + timedelta(seconds=timestamp)
        return moment.strftime("%Y-%m-%dT%H:%M:%SZ")
    return to_human_time(timestamp)


def to_human_time(timestamp: int, now: float | None = None) -> str:
    """Describe how long ago ``timestamp`` was, relative to ``now``."""
    if timestamp < 0:
        return "<before UNIX epoch>"
    current = int(time.time() if now is None else now)
    elapsed = current - timestamp
    if elapsed < 0:
        raise TimeTravelError(
            "Achievement unlocked: time travel! "
            "Check your system clock and commit dates."
        )
    return human_time(-elapsed)


def _rough_period(seconds: int) -> str | None:
    if seconds > 547 * _DAY:
        return _plural(max(seconds // _YEAR, 2), "year")
    if seconds > 345 * _DAY:
        return "a year"
    if seconds > 45 * _DAY:
        return _plural(max(seconds // _MONTH, 2), "month")
    if seconds > 29 * _DAY:
        return "a month"
    if seconds > 10 * _DAY + 12 * _HOUR:
        return _plural(max(seconds // _WEEK, 2), "week")
    if seconds > 6 * _DAY + 12 * _HOUR:
        return "a week"
    if seconds > 36 * _HOUR:
        return _plural(max(seconds // _DAY, 2), "day")
    if seconds > 22 * _HOUR:
        return "a day"
    if seconds > 90 * _MINUTE:
        return _plural(max(seconds // _HOUR, 2), "hour")
    if seconds > 45 * _MINUTE:
        return "an hour"
    if seconds > 90:
        return _plural(max(seconds // _MINUTE, 2), "minute")
    if seconds > 45:
        return "a minute"
    if seconds > 10:
        return _plural(seconds, "second")
    return None


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}s"


def human_time(delta_seconds: int) -> str:
    """Describe a signed offset from now; negative offsets lie in the past."""
    period = _rough_period(abs(delta_seconds))
    if period is None:
        return "now"
    if delta_seconds < 0:
        return f"{period} ago"
    return f"in {period}"