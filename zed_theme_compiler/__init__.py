"""Generate Zed themes from a KDL format with a named palette, and migrate
existing Zed themes back into it."""

from .color import ColorModifiers, ColorRef, HexColor, PaletteReference, apply_modifiers
from .errors import (
    CycleError,
    InvalidTargetError,
    MissingReferenceError,
    ThemeError,
    ThemeParseError,
    UnsupportedArityError,
)
from .migrate import generate_kdl
from .palette import Palette, PaletteGenerator, ResolvedPalette
from .zed import generate_json

__all__ = [
    "ColorModifiers",
    "ColorRef",
    "CycleError",
    "HexColor",
    "InvalidTargetError",
    "MissingReferenceError",
    "Palette",
    "PaletteGenerator",
    "PaletteReference",
    "ResolvedPalette",
    "ThemeError",
    "ThemeParseError",
    "UnsupportedArityError",
    "apply_modifiers",
    "generate_json",
    "generate_kdl",
]
