"""Flat (Zed JSON) theme family: every color is a literal ``#rrggbbaa``."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..color import HexColor, parse_hex_color
from ..errors import ThemeParseError
from ..logging import get_logger
from .common import Appearance, Meta, parse_font_weight

logger = get_logger(__name__)

ZED_SCHEMA_URL = "https://zed.dev/schema/themes/v0.2.0.json"

PLAYERS_KEY = "players"
SYNTAX_KEY = "syntax"


def parse_color(value, where):
    if value is None:
        return None
    color = parse_hex_color(value)
    if color is None:
        raise ThemeParseError(f"{where}: expected hex color, got {value!r}")
    return color


def _color_str(color):
    return None if color is None else str(color)


@dataclass
class FlatPlayer:
    cursor: Optional[HexColor] = None
    background: Optional[HexColor] = None
    selection: Optional[HexColor] = None

    def colors(self):
        return [c for c in (self.cursor, self.background, self.selection) if c is not None]

    def to_dict(self):
        return {
            "cursor": _color_str(self.cursor),
            "background": _color_str(self.background),
            "selection": _color_str(self.selection),
        }

    @classmethod
    def from_dict(cls, data, where="player"):
        if not isinstance(data, dict):
            raise ThemeParseError(f"{where}: expected an object, got {data!r}")
        return cls(
            cursor=parse_color(data.get("cursor"), f"{where}.cursor"),
            background=parse_color(data.get("background"), f"{where}.background"),
            selection=parse_color(data.get("selection"), f"{where}.selection"),
        )


@dataclass
class Syntax:
    color: Optional[HexColor] = None
    background: Optional[HexColor] = None
    font_weight: Optional[int] = None
    font_style: Optional[str] = None

    def to_dict(self):
        return {
            "color": _color_str(self.color),
            "background": _color_str(self.background),
            "font_weight": self.font_weight,
            "font_style": self.font_style,
        }

    @classmethod
    def from_dict(cls, data, where="syntax"):
        if not isinstance(data, dict):
            raise ThemeParseError(f"{where}: expected an object, got {data!r}")
        font_weight = data.get("font_weight")
        if font_weight is not None:
            font_weight = parse_font_weight(font_weight, where)
        font_style = data.get("font_style")
        return cls(
            color=parse_color(data.get("color"), f"{where}.color"),
            background=parse_color(data.get("background"), f"{where}.background"),
            font_weight=font_weight,
            font_style=None if font_style is None else str(font_style),
        )


@dataclass
class FlatTheme:
    """One theme variant. ``style`` maps ``players`` to a list of FlatPlayer,
    ``syntax`` to a dict of Syntax and every other key to a HexColor or None."""

    name: str
    appearance: Appearance
    style: Dict[str, object] = field(default_factory=dict)

    @property
    def players(self):
        return self.style.get(PLAYERS_KEY, [])

    @property
    def syntax(self):
        return self.style.get(SYNTAX_KEY, {})

    def to_dict(self):
        style = {}
        for key, value in self.style.items():
            if key == PLAYERS_KEY:
                style[key] = [player.to_dict() for player in value]
            elif key == SYNTAX_KEY:
                style[key] = {scope: entry.to_dict() for scope, entry in value.items()}
            else:
                style[key] = _color_str(value)
        return {"name": self.name, "appearance": str(self.appearance), "style": style}

    @classmethod
    def from_dict(cls, data):
        try:
            name = data["name"]
            appearance = Appearance.parse(data["appearance"])
            raw_style = data.get("style") or {}
        except (KeyError, TypeError) as e:
            raise ThemeParseError(f"theme is missing field {e}") from e
        if not isinstance(raw_style, dict):
            raise ThemeParseError(f"{name}: `style` must be an object")

        style = {}
        for key, value in raw_style.items():
            where = f"{name}: style.{key}"
            if value is None and key in (PLAYERS_KEY, SYNTAX_KEY):
                logger.debug(f"{where} is null, treating it as empty")
                continue
            if key == PLAYERS_KEY:
                if not isinstance(value, list):
                    raise ThemeParseError(f"{where}: expected a list of players")
                style[key] = [
                    FlatPlayer.from_dict(player, f"{where}[{idx}]")
                    for idx, player in enumerate(value)
                ]
            elif key == SYNTAX_KEY:
                if not isinstance(value, dict):
                    raise ThemeParseError(f"{where}: expected a map of syntax scopes")
                style[key] = {
                    scope: Syntax.from_dict(entry, f"{where}.{scope}")
                    for scope, entry in value.items()
                }
            elif value is None or isinstance(value, str):
                style[key] = parse_color(value, where)
            else:
                logger.warning(f"{where} is not a color. Skipping...")
        return cls(name=name, appearance=appearance, style=style)


@dataclass
class FlatThemeFamily:
    meta: Meta
    themes: List[FlatTheme] = field(default_factory=list)
    schema: str = ZED_SCHEMA_URL

    def to_dict(self):
        return {
            "$schema": self.schema,
            "name": self.meta.name,
            "author": self.meta.author,
            "themes": [theme.to_dict() for theme in self.themes],
        }

    def to_json(self, indent=2):
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ThemeParseError("theme family JSON root must be an object")
        try:
            meta = Meta(name=data["name"], author=data["author"])
            themes = data["themes"]
        except KeyError as e:
            raise ThemeParseError(f"theme family is missing field {e}") from e
        if not isinstance(themes, list):
            raise ThemeParseError("`themes` must be a list")
        return cls(
            meta=meta,
            themes=[FlatTheme.from_dict(theme) for theme in themes],
            schema=data.get("$schema", ZED_SCHEMA_URL),
        )

    @classmethod
    def from_json(cls, text):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ThemeParseError(f"invalid JSON: {e}") from e
        return cls.from_dict(data)


def read_json_theme_family(path):
    """Load a Zed theme family JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        FlatThemeFamily
    """
    with open(path) as f:
        return FlatThemeFamily.from_json(f.read())
