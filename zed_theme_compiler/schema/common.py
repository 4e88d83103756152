from dataclasses import dataclass
from enum import Enum

from ..errors import ThemeParseError

MAX_FONT_WEIGHT = 0xFFFF


class Appearance(Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, value):
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ThemeParseError(
                f"appearance must be 'light' or 'dark', got {value!r}"
            ) from None

    def __str__(self):
        return self.value


@dataclass
class Meta:
    name: str
    author: str


def parse_font_weight(value, where):
    """Validate a font weight as an unsigned 16-bit integer."""
    if isinstance(value, bool):
        raise ThemeParseError(f"{where}: font weight must be an integer, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or not 0 <= value <= MAX_FONT_WEIGHT:
        raise ThemeParseError(
            f"{where}: font weight must be an integer in 0..{MAX_FONT_WEIGHT}, got {value!r}"
        )
    return value
