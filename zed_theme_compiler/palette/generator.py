from ..color import ColorModifiers, ColorRef, HexColor, PaletteReference
from ..color_names import name_color
from ..logging import get_logger
from .resolver import ResolvedPalette

logger = get_logger(__name__)


def alpha_to_modifier(alpha):
    """Convert an 8-bit alpha channel to an ``alpha`` modifier factor."""
    return alpha / 255


class PaletteGenerator:
    """Builds a named palette from the literal colors of existing themes.

    Colors are keyed by RGB only; alpha is carried as a per-use modifier.
    The RGB <-> name mapping is kept injective: a name already held by a
    different color gets a ``-1``, ``-2``, ... suffix.
    """

    def __init__(self, namer=name_color):
        self.rgb_to_name = {}
        self.name_to_rgb = {}
        self.namer = namer

    def __repr__(self):
        return f"PaletteGenerator(rgb_to_name={self.rgb_to_name!r})"

    def __len__(self):
        return len(self.rgb_to_name)

    def feed(self, color):
        """Register a color, naming it if its RGB triple has not been seen."""
        rgb = color.rgb
        if rgb in self.rgb_to_name:
            return

        name = self.namer(*rgb)
        candidate = name
        idx = 1
        while candidate in self.name_to_rgb:
            candidate = f"{name}-{idx}"
            idx += 1

        self.rgb_to_name[rgb] = candidate
        self.name_to_rgb[candidate] = rgb
        logger.debug(f"Named {color} as {candidate!r}")

    def lookup(self, color):
        """Express ``color`` in terms of the generated palette.

        Returns:
            ColorRef referencing the assigned name (with an alpha modifier
            unless fully opaque), or the literal color if it was never fed.
        """
        name = self.rgb_to_name.get(color.rgb)
        if name is None:
            return ColorRef(color)
        alpha = alpha_to_modifier(color.a) if color.a != 255 else None
        return ColorRef(PaletteReference(name), ColorModifiers(alpha=alpha))

    def into_resolved_palette(self):
        return ResolvedPalette(
            sorted(
                (name, HexColor(r, g, b, 255))
                for (r, g, b), name in self.rgb_to_name.items()
            )
        )
