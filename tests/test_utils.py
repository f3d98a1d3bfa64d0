import time

import pytest

from repofetch.utils import (
    NumberSeparator,
    TimeTravelError,
    format_number,
    format_time,
    human_time,
    to_human_time,
)

DAY = 60 * 60 * 24


def test_display_time_as_human_time_current_time_now():
    assert format_time(int(time.time()), False) == "now"


def test_display_time_as_human_time_current_time_arbitrary():
    year_ago = int(time.time()) - DAY * 366
    assert format_time(year_ago, False) == "a year ago"


def test_display_time_as_iso_time_some_time():
    assert format_time(1_637_233_282, True) == "2021-11-18T11:01:22Z"


def test_display_time_as_iso_time_current_epoch():
    assert format_time(0, True) == "1970-01-01T00:00:00Z"


def test_raises_when_commit_date_in_the_future():
    tomorrow = int(time.time()) + DAY
    with pytest.raises(
        TimeTravelError,
        match="Achievement unlocked: time travel! Check your system clock and commit dates.",
    ):
        format_time(tomorrow, False)


def test_display_time_before_epoch():
    assert to_human_time(-(2**63)) == "<before UNIX epoch>"


def test_to_human_time_with_fixed_now():
    assert to_human_time(1000, now=1000 + 34 * 60) == "34 minutes ago"


@pytest.mark.parametrize(
    "delta, expected",
    [
        (0, "now"),
        (-10, "now"),
        (-30, "30 seconds ago"),
        (-60, "a minute ago"),
        (7200, "in 2 hours"),
        (-3 * DAY, "3 days ago"),
        (-800 * DAY, "2 years ago"),
    ],
)
def test_human_time(delta, expected):
    assert human_time(delta) == expected


@pytest.mark.parametrize(
    "number, separator, expected",
    [
        (1_000_000, NumberSeparator.COMMA, "1,000,000"),
        (1_000_000, NumberSeparator.SPACE, "1\u202f000\u202f000"),
        (1_000_000, NumberSeparator.UNDERSCORE, "1_000_000"),
        (1_000_000, NumberSeparator.PLAIN, "1000000"),
    ],
)
def test_format_number(number, separator, expected):
    assert format_number(number, separator) == expected


def test_format_small_number_has_no_separator():
    assert format_number(999, NumberSeparator.COMMA) == "999"