import pytest

from repofetch.styling import (
    AnsiColor,
    RgbColor,
    Style,
    get_style,
    num_to_color,
    on_color,
    paint,
)


def test_num_to_color():
    assert num_to_color(2) == AnsiColor.GREEN
    assert num_to_color(255) == AnsiColor.DEFAULT


@pytest.mark.parametrize(
    "num, expected",
    [
        (0, AnsiColor.BLACK),
        (7, AnsiColor.WHITE),
        (8, AnsiColor.BRIGHT_BLACK),
        (15, AnsiColor.BRIGHT_WHITE),
        (16, AnsiColor.DEFAULT),
    ],
)
def test_num_to_color_range(num, expected):
    assert num_to_color(num) == expected


def test_get_style():
    assert get_style(True, AnsiColor.CYAN) == Style(color=AnsiColor.CYAN, bold=True)


def test_get_style_no_bold():
    assert get_style(False, AnsiColor.CYAN) == Style(color=AnsiColor.CYAN)


def test_style_paint_bold_ansi():
    assert get_style(True, AnsiColor.RED).paint("x") == "\x1b[1;31mx\x1b[0m"


def test_style_paint_rgb():
    assert Style(color=RgbColor(1, 2, 3)).paint("ab") == "\x1b[38;2;1;2;3mab\x1b[0m"


def test_empty_style_leaves_text_alone():
    assert Style().paint("plain") == "plain"


def test_paint_foreground():
    assert paint("x", AnsiColor.RED) == "\x1b[31mx\x1b[39m"


def test_on_color_background():
    assert on_color(" ", AnsiColor.RED) == "\x1b[41m \x1b[49m"
    assert on_color(" ", RgbColor(9, 8, 7)) == "\x1b[48;2;9;8;7m \x1b[49m"