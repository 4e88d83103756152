from ..color import ColorRef, PaletteReference
from ..errors import CycleError, MissingReferenceError
from ..logging import get_logger

logger = get_logger(__name__)


class Palette:
    """Named color definitions as written by the theme author.

    Entries may reference each other and may contain cycles or dangling
    references; only ``resolve`` establishes validity.
    """

    def __init__(self, colors=None):
        self.colors = dict(colors or {})

    def __len__(self):
        return len(self.colors)

    def __iter__(self):
        return iter(self.colors.items())

    def __eq__(self, other):
        if not isinstance(other, Palette):
            return NotImplemented
        return self.colors == other.colors

    def __repr__(self):
        return f"Palette({self.colors!r})"

    def resolve(self):
        """Resolve every entry to a literal color.

        Returns:
            ResolvedPalette

        Raises:
            CycleError: an entry depends on itself, directly or transitively
            MissingReferenceError: an entry references an unknown name
        """
        resolved = {}
        for name, color in self.colors.items():
            self._resolve_color(name, color, resolved, [])
        logger.debug(f"Resolved {len(resolved)} palette colors")
        return ResolvedPalette(resolved)

    def _resolve_color(self, name, color, resolved, deps):
        if name in resolved:
            return resolved[name]

        if name in deps:
            raise CycleError(deps[deps.index(name):] + [name])

        deps.append(name)
        if isinstance(color.base, PaletteReference):
            reference = color.base.name
            if reference not in self.colors:
                raise MissingReferenceError(reference)
            base = self._resolve_color(reference, self.colors[reference], resolved, deps)
        else:
            base = color.base
        modified = base.apply_modifiers(color.modifiers)
        resolved[name] = modified
        deps.pop()
        return modified


class ResolvedPalette:
    """Acyclic, fully literal palette: name -> HexColor."""

    def __init__(self, colors=None):
        self.colors = dict(colors or {})

    def __len__(self):
        return len(self.colors)

    def __contains__(self, name):
        return name in self.colors

    def __getitem__(self, name):
        return self.colors[name]

    def __eq__(self, other):
        if not isinstance(other, ResolvedPalette):
            return NotImplemented
        return self.colors == other.colors

    def __repr__(self):
        return f"ResolvedPalette({self.colors!r})"

    def sorted_items(self):
        return sorted(self.colors.items())

    def lookup(self, color):
        """Resolve a single ColorRef against this palette and apply its modifiers.

        Raises:
            MissingReferenceError: the reference is not in the palette
        """
        if isinstance(color.base, PaletteReference):
            try:
                base = self.colors[color.base.name]
            except KeyError:
                raise MissingReferenceError(color.base.name) from None
        else:
            base = color.base
        return base.apply_modifiers(color.modifiers)

    def into_palette(self):
        """Turn the resolved colors back into authored palette entries, sorted by name."""
        return Palette(
            (name, ColorRef(color)) for name, color in self.sorted_items()
        )
