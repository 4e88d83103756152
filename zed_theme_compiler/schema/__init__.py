from .authored import (
    Action,
    Modifier,
    ModifierPath,
    Player,
    Theme,
    ThemeFamily,
    extract_common,
)
from .common import Appearance, Meta
from .flat import (
    ZED_SCHEMA_URL,
    FlatPlayer,
    FlatTheme,
    FlatThemeFamily,
    Syntax,
    read_json_theme_family,
)

__all__ = [
    "Action",
    "Appearance",
    "FlatPlayer",
    "FlatTheme",
    "FlatThemeFamily",
    "Meta",
    "Modifier",
    "ModifierPath",
    "Player",
    "Syntax",
    "Theme",
    "ThemeFamily",
    "ZED_SCHEMA_URL",
    "extract_common",
    "read_json_theme_family",
]
