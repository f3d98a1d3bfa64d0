from repofetch.styling import AnsiColor, num_to_color
from repofetch.text_colors import TextColors


def test_no_custom_colors():
    primary = AnsiColor.BLUE
    colors = TextColors.from_numbers([], primary)
    assert colors.title == primary
    assert colors.tilde == AnsiColor.DEFAULT
    assert colors.underline == AnsiColor.DEFAULT
    assert colors.subtitle == primary
    assert colors.colon == AnsiColor.DEFAULT
    assert colors.info == AnsiColor.DEFAULT


def test_with_custom_colors():
    custom = [0, 1, 2, 3, 4, 5]
    colors = TextColors.from_numbers(custom, AnsiColor.BLUE)
    assert colors.title == num_to_color(custom[0])
    assert colors.tilde == num_to_color(custom[1])
    assert colors.underline == num_to_color(custom[2])
    assert colors.subtitle == num_to_color(custom[3])
    assert colors.colon == num_to_color(custom[4])
    assert colors.info == num_to_color(custom[5])


def test_with_some_custom_colors():
    custom = [0, 1, 2]
    primary = AnsiColor.BLUE
    colors = TextColors.from_numbers(custom, primary)
    assert colors.title == AnsiColor.BLACK
    assert colors.tilde == AnsiColor.RED
    assert colors.underline == AnsiColor.GREEN
    assert colors.subtitle == primary
    assert colors.colon == AnsiColor.DEFAULT
    assert colors.info == AnsiColor.DEFAULT