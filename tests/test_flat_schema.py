import json
import logging

import pytest

from zed_theme_compiler.color import HexColor
from zed_theme_compiler.errors import ThemeParseError
from zed_theme_compiler.schema import (
    ZED_SCHEMA_URL,
    Appearance,
    FlatTheme,
    FlatThemeFamily,
    read_json_theme_family,
)


def minimal_theme(style):
    return {"name": "T", "appearance": "dark", "style": style}


def test_from_dict(flat_family_dict):
    family = FlatThemeFamily.from_dict(flat_family_dict)
    assert family.meta.name == "Flat"
    assert family.schema == ZED_SCHEMA_URL
    dark, light = family.themes
    assert dark.appearance == Appearance.DARK
    assert light.appearance == Appearance.LIGHT
    assert dark.style["text"] == HexColor(0xD4, 0xD4, 0xD4)
    assert "border" in dark.style and dark.style["border"] is None
    assert dark.players[0].selection == HexColor(0x56, 0x9C, 0xD6, 0x40)
    assert dark.syntax["keyword"].font_weight == 700
    assert dark.syntax["comment"].font_style == "italic"


def test_to_dict_reproduces_input(flat_family_dict):
    assert FlatThemeFamily.from_dict(flat_family_dict).to_dict() == flat_family_dict


def test_to_json(flat_family_dict):
    family = FlatThemeFamily.from_dict(flat_family_dict)
    assert json.loads(family.to_json()) == flat_family_dict


def test_short_hex_defaults_to_opaque():
    theme = FlatTheme.from_dict(minimal_theme({"text": "#ABCDEF"}))
    assert theme.style["text"] == HexColor(0xAB, 0xCD, 0xEF, 255)
    assert theme.to_dict()["style"]["text"] == "#abcdefff"


def test_missing_players_and_syntax():
    theme = FlatTheme.from_dict(minimal_theme({}))
    assert theme.players == []
    assert theme.syntax == {}


def test_null_players_and_syntax_read_as_empty():
    theme = FlatTheme.from_dict(minimal_theme({"players": None, "syntax": None, "text": "#000000"}))
    assert theme.players == []
    assert theme.syntax == {}
    assert theme.style == {"text": HexColor(0, 0, 0)}


def test_non_color_entries_are_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="zed_theme_compiler"):
        theme = FlatTheme.from_dict(minimal_theme({"text": "#000000", "opacity": 0.5}))
    assert "opacity" not in theme.style
    assert "opacity" in caplog.text


@pytest.mark.parametrize(
    "style, message",
    [
        ({"text": "red"}, "style.text"),
        ({"players": {}}, "list of players"),
        ({"players": [{"cursor": "#12"}]}, "players[0].cursor"),
        ({"syntax": []}, "map of syntax scopes"),
        ({"syntax": {"keyword": {"font_weight": 70000}}}, "font weight"),
        ({"syntax": {"keyword": {"color": "#gggggg"}}}, "syntax.keyword.color"),
    ],
)
def test_invalid_style(style, message):
    with pytest.raises(ThemeParseError) as excinfo:
        FlatTheme.from_dict(minimal_theme(style))
    assert message in str(excinfo.value)


def test_invalid_appearance():
    with pytest.raises(ThemeParseError):
        FlatTheme.from_dict({"name": "T", "appearance": "dim", "style": {}})


def test_missing_family_fields():
    with pytest.raises(ThemeParseError):
        FlatThemeFamily.from_dict({"name": "x", "themes": []})


def test_invalid_json():
    with pytest.raises(ThemeParseError):
        FlatThemeFamily.from_json("{not json")


def test_read_json_theme_family(tmp_path, flat_family_dict):
    path = tmp_path / "family.json"
    path.write_text(json.dumps(flat_family_dict))
    family = read_json_theme_family(path)
    assert [theme.name for theme in family.themes] == ["Flat Dark", "Flat Light"]
