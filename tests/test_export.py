import json

import pytest

from zed_theme_compiler.color import HexColor
from zed_theme_compiler.export import export_json, format_palette
from zed_theme_compiler.palette import ResolvedPalette
from zed_theme_compiler.schema import FlatThemeFamily


@pytest.fixture
def resolved():
    return ResolvedPalette({"b": HexColor(0, 0, 255), "a": HexColor(255, 0, 0, 128)})


def test_array_of_tuples(resolved):
    assert format_palette(resolved, "array-of-tuples") == (
        '[("a", "#ff000080"), ("b", "#0000ffff")]'
    )


def test_space_separated(resolved):
    assert format_palette(resolved, "space-separated") == "a #ff000080\nb #0000ffff"


def test_empty_palette():
    assert format_palette(ResolvedPalette(), "array-of-tuples") == "[]"
    assert format_palette(ResolvedPalette(), "space-separated") == ""


def test_unknown_format(resolved):
    with pytest.raises(ValueError):
        format_palette(resolved, "yaml")


def test_export_json(tmp_path, flat_family_dict):
    path = tmp_path / "theme.json"
    export_json(FlatThemeFamily.from_dict(flat_family_dict), path)
    text = path.read_text()
    assert text.endswith("}\n")
    assert json.loads(text) == flat_family_dict
