"""Shared fixtures for the zed_theme_compiler test suite."""

import pytest

from zed_theme_compiler.color import ColorModifiers, ColorRef, HexColor, PaletteReference
from zed_theme_compiler.palette import Palette
from zed_theme_compiler.schema import (
    Action,
    Appearance,
    Meta,
    Modifier,
    ModifierPath,
    Player,
    Theme,
    ThemeFamily,
)


def ref(name, **modifiers):
    return ColorRef(PaletteReference(name), ColorModifiers(**modifiers))


def hex_ref(text):
    return ColorRef(HexColor.parse(text))


@pytest.fixture
def palette():
    return Palette(
        {
            "black": hex_ref("#000000"),
            "white": hex_ref("#ffffff"),
            "red": hex_ref("#ff0000"),
            "blue": hex_ref("#0000ff"),
            "grey": ref("black", lighten=0.5),
            "accent": ref("red", hue_shift=40.0),
        }
    )


@pytest.fixture
def dark_theme():
    return Theme(
        name="Test Dark",
        appearance=Appearance.DARK,
        players=[Player(cursor=ref("red"), selection=ref("red", alpha=0.25))],
        modifiers=[
            Modifier(
                Action(color=ref("white")),
                [ModifierPath.style("text"), ModifierPath.syntax("variable")],
            ),
            Modifier(Action(color=ref("black")), [ModifierPath.style("editor.background")]),
            Modifier(
                Action(color=ref("accent"), font_weight=700),
                [ModifierPath.syntax("keyword")],
            ),
        ],
    )


@pytest.fixture
def light_theme():
    return Theme(
        name="Test Light",
        appearance=Appearance.LIGHT,
        players=[Player(cursor=ref("blue"), selection=ref("blue", alpha=0.25))],
        modifiers=[
            Modifier(
                Action(color=ref("black")),
                [ModifierPath.style("text"), ModifierPath.syntax("variable")],
            ),
            Modifier(Action(color=ref("white")), [ModifierPath.style("editor.background")]),
            Modifier(
                Action(color=ref("accent"), font_weight=700),
                [ModifierPath.syntax("keyword")],
            ),
        ],
    )


@pytest.fixture
def common_theme():
    return Theme(
        name="common",
        appearance=Appearance.DARK,
        players=[Player(cursor=ref("grey"))],
        modifiers=[
            Modifier(
                Action(background=ref("grey", alpha=0.5), font_style="italic"),
                [ModifierPath.syntax("comment")],
            ),
            Modifier(Action(color=ref("grey")), [ModifierPath.style("border")]),
        ],
    )


@pytest.fixture
def family(palette, dark_theme, light_theme, common_theme):
    return ThemeFamily(
        meta=Meta(name="Test", author="Tester"),
        palette=palette,
        themes=[dark_theme, light_theme],
        common=common_theme,
    )


@pytest.fixture
def sample_kdl():
    return """\
meta {
    name "Sample"
    author "Tester"
}
palette {
    black "#000000"
    grey "black" lighten=0.5
    "1st" "#FF8800"
}
common {
    name "common"
    appearance "dark"
    modifier {
        color "1st"
        apply {
            syntax "string"
        }
    }
}
theme {
    name "Sample Dark"
    appearance "dark"
    player {
        cursor "grey"
        selection "grey" alpha=0.25
    }
    modifier {
        color "grey"
        font-weight 700
        font-style "italic"
        apply {
            style "text"
            syntax "keyword"
            style "text"
        }
    }
}
"""


@pytest.fixture
def flat_family_dict():
    return {
        "$schema": "https://zed.dev/schema/themes/v0.2.0.json",
        "name": "Flat",
        "author": "Tester",
        "themes": [
            {
                "name": "Flat Dark",
                "appearance": "dark",
                "style": {
                    "background": "#1e1e1eff",
                    "editor.background": "#1e1e1eff",
                    "text": "#d4d4d4ff",
                    "border": None,
                    "players": [
                        {"cursor": "#569cd6ff", "background": "#569cd6ff", "selection": "#569cd640"}
                    ],
                    "syntax": {
                        "keyword": {
                            "color": "#569cd6ff",
                            "background": None,
                            "font_weight": 700,
                            "font_style": None,
                        },
                        "comment": {
                            "color": "#6a9955ff",
                            "background": "#1e1e1e80",
                            "font_weight": None,
                            "font_style": "italic",
                        },
                    },
                },
            },
            {
                "name": "Flat Light",
                "appearance": "light",
                "style": {
                    "background": "#ffffffff",
                    "editor.background": "#ffffffff",
                    "text": "#1e1e1eff",
                    "players": [
                        {"cursor": "#569cd6ff", "background": "#569cd6ff", "selection": "#569cd640"}
                    ],
                    "syntax": {
                        "keyword": {
                            "color": "#569cd6ff",
                            "background": None,
                            "font_weight": 700,
                            "font_style": None,
                        },
                        "comment": {
                            "color": "#008000ff",
                            "background": None,
                            "font_weight": None,
                            "font_style": "italic",
                        },
                    },
                },
            },
        ],
    }
