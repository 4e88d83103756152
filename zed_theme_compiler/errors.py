"""Errors raised while reading, resolving and compiling theme families."""


class ThemeError(Exception):
    """Base class for every error raised by the theme compiler."""


class ThemeParseError(ThemeError):
    """The input tree (KDL or JSON) does not have the expected structure."""


class CycleError(ThemeError):
    """A palette entry transitively depends on itself.

    ``chain`` lists the names from the first repeated entry back to itself,
    e.g. ``["a", "b", "c", "a"]``.
    """

    def __init__(self, chain):
        self.chain = list(chain)
        super().__init__(self._format())

    @property
    def self_reference(self):
        return len(self.chain) <= 2

    def _format(self):
        if self.self_reference:
            return f"cyclic dependency in palette: {self.chain[0]} directly depends on itself!"
        first, second, *rest = self.chain
        msg = f"cyclic dependency in palette:\n    {first} depends on {second}"
        for name in rest:
            msg += f"\n        which depends on {name}"
        return msg


class MissingReferenceError(ThemeError):
    """A palette reference names an entry absent from the palette."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"could not find color {name!r} in the palette")


class InvalidTargetError(ThemeError):
    """A modifier targets a style path it is not allowed to write."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"cannot apply modifier to {path}: {reason}")


class UnsupportedArityError(ThemeError):
    """Common extraction needs exactly two themes."""

    def __init__(self, count):
        self.count = count
        super().__init__(
            f"extracting common attributes needs exactly 2 themes, got {count}"
        )
