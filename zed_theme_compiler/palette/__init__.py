from .generator import PaletteGenerator
from .resolver import Palette, ResolvedPalette

__all__ = ["Palette", "PaletteGenerator", "ResolvedPalette"]
