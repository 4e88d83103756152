import math
import re
from collections import namedtuple

import numpy as np

HEX_COLOR_PATTERN = re.compile(r"^#([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")

# sRGB primaries, D65 white point
SRGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)
XYZ_TO_SRGB = np.linalg.inv(SRGB_TO_XYZ)
D65_WHITE = np.array([0.95047, 1.0, 1.08883])

LAB_DELTA = 6 / 29

# Upper bounds used by the relative lighten/saturate operators
MAX_LIGHTNESS = 100.0
MAX_CHROMA = 128.0


class HexColor(namedtuple("HexColor", ["r", "g", "b", "a"])):
    """An 8-bit RGBA color, printed as ``#rrggbbaa``."""

    __slots__ = ()

    def __new__(cls, r, g, b, a=255):
        return super().__new__(cls, r, g, b, a)

    @classmethod
    def parse(cls, text):
        color = parse_hex_color(text)
        if color is None:
            raise ValueError(f"Expected hex color, got {text!r}")
        return color

    @property
    def rgb(self):
        return (self.r, self.g, self.b)

    def apply_modifiers(self, modifiers):
        return apply_modifiers(self, modifiers)

    def __str__(self):
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"


def parse_hex_color(text):
    """Parse ``#rrggbb`` or ``#rrggbbaa`` (case insensitive).

    Returns:
        HexColor, or None when the text is not a hex color
    """
    if not isinstance(text, str):
        return None
    match = HEX_COLOR_PATTERN.match(text)
    if match is None:
        return None
    rgb, alpha = match.groups()
    r, g, b = (int(rgb[i : i + 2], 16) for i in (0, 2, 4))
    a = int(alpha, 16) if alpha else 255
    return HexColor(r, g, b, a)


class PaletteReference(namedtuple("PaletteReference", ["name"])):
    """A base color naming another palette entry."""

    __slots__ = ()

    def __str__(self):
        return self.name


def parse_base_color(text):
    """A hex color if ``text`` parses as one, otherwise a palette reference."""
    color = parse_hex_color(text)
    if color is not None:
        return color
    return PaletteReference(text)


def _float_key(value):
    # zero and NaN compare and hash the same regardless of sign or payload
    if value is None:
        return None
    value = float(value)
    if value == 0:
        return 0.0
    if math.isnan(value):
        return "nan"
    return value


class ColorModifiers(
    namedtuple(
        "ColorModifiers",
        ["alpha", "lighten", "darken", "saturate", "desaturate", "hue_shift"],
    )
):
    """Optional perceptual adjustments attached to a color.

    ``alpha`` multiplies the existing alpha, ``lighten``/``darken`` and
    ``saturate``/``desaturate`` are relative intensities, ``hue_shift`` is in
    degrees. A field left as None is not applied.
    """

    __slots__ = ()
    FIELDS = ("alpha", "lighten", "darken", "saturate", "desaturate", "hue_shift")

    def __new__(
        cls,
        alpha=None,
        lighten=None,
        darken=None,
        saturate=None,
        desaturate=None,
        hue_shift=None,
    ):
        return super().__new__(cls, alpha, lighten, darken, saturate, desaturate, hue_shift)

    def is_empty(self):
        return all(value is None for value in self)

    def _key(self):
        return tuple(_float_key(value) for value in self)

    def __eq__(self, other):
        if not isinstance(other, ColorModifiers):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._key())


NO_MODIFIERS = ColorModifiers()


class ColorRef(namedtuple("ColorRef", ["base", "modifiers"])):
    """A base color (hex or palette reference) plus its modifiers."""

    __slots__ = ()

    def __new__(cls, base, modifiers=NO_MODIFIERS):
        return super().__new__(cls, base, modifiers)

    @classmethod
    def parse(cls, text, **modifiers):
        return cls(parse_base_color(text), ColorModifiers(**modifiers))


def srgb_to_lab(rgb):
    """Convert sRGB values in 0-1 (last axis) to CIE L*a*b*."""
    rgb = np.asarray(rgb, dtype=float)
    linear = np.where(rgb <= 0.04045, rgb / 12.92, ((rgb + 0.055) / 1.055) ** 2.4)
    xyz = linear @ SRGB_TO_XYZ.T / D65_WHITE
    f = np.where(
        xyz > LAB_DELTA**3,
        np.cbrt(xyz),
        xyz / (3 * LAB_DELTA**2) + 4 / 29,
    )
    l = 116 * f[..., 1] - 16
    a = 500 * (f[..., 0] - f[..., 1])
    b = 200 * (f[..., 1] - f[..., 2])
    return np.stack([l, a, b], axis=-1)


def lab_to_srgb(lab):
    """Convert CIE L*a*b* (last axis) back to sRGB values clamped to 0-1."""
    lab = np.asarray(lab, dtype=float)
    fy = (lab[..., 0] + 16) / 116
    fx = fy + lab[..., 1] / 500
    fz = fy - lab[..., 2] / 200
    f = np.stack([fx, fy, fz], axis=-1)
    xyz = np.where(f > LAB_DELTA, f**3, 3 * LAB_DELTA**2 * (f - 4 / 29)) * D65_WHITE
    linear = np.clip(np.nan_to_num(xyz @ XYZ_TO_SRGB.T, nan=0.0), 0.0, 1.0)
    return np.where(
        linear <= 0.0031308, linear * 12.92, 1.055 * linear ** (1 / 2.4) - 0.055
    )


def rgb_to_lch(r, g, b):
    """Convert 8-bit RGB to (lightness, chroma, hue in degrees)."""
    l, a, b_ = srgb_to_lab(np.array([r, g, b]) / 255)
    return float(l), math.hypot(a, b_), math.degrees(math.atan2(b_, a)) % 360


def lch_to_rgb(l, c, h):
    """Convert (lightness, chroma, hue) to clamped 8-bit RGB."""
    hue = math.radians(h)
    rgb = lab_to_srgb([l, c * math.cos(hue), c * math.sin(hue)])
    return tuple(_to_channel(value) for value in rgb)


def _to_channel(value):
    value = float(np.clip(np.nan_to_num(value, nan=0.0), 0.0, 1.0))
    return int(math.floor(value * 255 + 0.5))


def _shift(value, factor, maximum):
    """Move ``value`` toward ``maximum`` (factor > 0) or zero (factor < 0).

    The factor is a fraction of the remaining distance, so 0.5 lightens
    black halfway to white.
    """
    difference = maximum - value if factor >= 0 else value
    return max(value + max(difference, 0.0) * factor, 0.0)


def apply_modifiers(color, modifiers):
    """Apply color modifiers in L*C*h space.

    Order is fixed: alpha, darken, lighten, desaturate, saturate, hue shift.

    Args:
        color: HexColor to adjust
        modifiers: ColorModifiers

    Returns:
        HexColor
    """
    if modifiers.is_empty():
        return color

    l, c, h = rgb_to_lch(*color.rgb)
    alpha = color.a / 255

    if modifiers.alpha is not None:
        alpha *= modifiers.alpha
    if modifiers.darken is not None:
        l = _shift(l, -modifiers.darken, MAX_LIGHTNESS)
    if modifiers.lighten is not None:
        l = _shift(l, modifiers.lighten, MAX_LIGHTNESS)
    if modifiers.desaturate is not None:
        c = _shift(c, -modifiers.desaturate, MAX_CHROMA)
    if modifiers.saturate is not None:
        c = _shift(c, modifiers.saturate, MAX_CHROMA)
    if modifiers.hue_shift is not None:
        h = (h + modifiers.hue_shift) % 360

    r, g, b = lch_to_rgb(l, c, h)
    return HexColor(r, g, b, _to_channel(alpha))
