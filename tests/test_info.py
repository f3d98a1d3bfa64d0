import json

import pytest

from repofetch.info import Info, select_fields
from repofetch.info_field import InfoType
from repofetch.license import LicenseInfo
from repofetch.loc import LocInfo
from repofetch.pending import PendingInfo
from repofetch.styling import AnsiColor, on_color
from repofetch.text_colors import TextColors
from repofetch.title import Title
from repofetch.version import VersionInfo


def _colors() -> TextColors:
    return TextColors.from_numbers([], AnsiColor.BLUE)


def _info(**kwargs) -> Info:
    defaults = dict(
        title=Title(git_username="someone", git_version="git version 2.37.2"),
        info_fields=[LocInfo(lines_of_code=1235), LicenseInfo(license="MIT")],
        text_colors=_colors(),
    )
    defaults.update(kwargs)
    return Info(**defaults)


def test_to_dict_shape():
    data = _info().to_dict()
    assert data["title"] == {
        "gitUsername": "someone",
        "gitVersion": "git version 2.37.2",
    }
    assert data["infoFields"] == [
        {"LocInfo": {"linesOfCode": 1235}},
        {"LicenseInfo": {"license": "MIT"}},
    ]


def test_to_dict_without_title():
    assert _info(title=None).to_dict()["title"] is None


def test_to_json_round_trip():
    info = _info()
    assert json.loads(info.to_json()) == info.to_dict()


def test_text_contains_fields_in_order():
    text = str(_info())
    assert "1235" in text
    assert text.index("Lines of code") < text.index("License")
    assert text.index("someone") < text.index("Lines of code")


def test_empty_fields_are_not_written():
    text = str(_info(info_fields=[VersionInfo(version=""), LocInfo(lines_of_code=5)]))
    assert "Version" not in text
    assert "Lines of code" in text


def test_palette_shown_by_default():
    text = str(_info())
    assert on_color("   ", AnsiColor.BLACK) in text
    assert on_color("   ", AnsiColor.WHITE) in text
    assert text.endswith("\n")


def test_palette_hidden():
    text = str(_info(no_color_palette=True))
    assert on_color("   ", AnsiColor.BLACK) not in text


def test_text_without_title_or_palette_is_fields_only():
    fields = [LicenseInfo(license="MIT")]
    info = _info(title=None, info_fields=fields, no_color_palette=True)
    assert str(info) == fields[0].write_styled(False, info.text_colors)


def test_select_fields_drops_disabled():
    loc = LocInfo(lines_of_code=3)
    pending = PendingInfo(modified=4)
    selected = select_fields(
        [(InfoType.LINES_OF_CODE, loc), (InfoType.PENDING, pending)],
        [InfoType.PENDING],
    )
    assert selected == [loc]


def test_select_fields_keeps_order():
    loc = LocInfo(lines_of_code=3)
    pending = PendingInfo(modified=4)
    selected = select_fields(
        [(InfoType.PENDING, pending), (InfoType.LINES_OF_CODE, loc)], []
    )
    assert selected == [pending, loc]


def test_select_fields_does_not_build_disabled():
    def broken():
        raise RuntimeError("should not be built")

    selected = select_fields(
        [(InfoType.LICENSE, broken), (InfoType.VERSION, lambda: VersionInfo("v1"))],
        {InfoType.LICENSE},
    )
    assert [field.value() for field in selected] == ["v1"]


def test_select_fields_propagates_build_errors():
    def broken():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        select_fields([(InfoType.LICENSE, broken)], [])