import math

import pytest

from zed_theme_compiler.color import (
    ColorModifiers,
    ColorRef,
    HexColor,
    PaletteReference,
    apply_modifiers,
    parse_base_color,
    parse_hex_color,
)


class TestHexColor:
    def test_parse_rgb_defaults_to_opaque(self):
        assert parse_hex_color("#FF00aa") == HexColor(255, 0, 170, 255)

    def test_parse_rgba(self):
        assert parse_hex_color("#ff00aa80") == HexColor(255, 0, 170, 128)

    @pytest.mark.parametrize(
        "text", ["ff00aa", "#ff00a", "#ff00aa8", "#gg0000", "black", "", "#ff00aa800"]
    )
    def test_parse_rejects_non_hex(self, text):
        assert parse_hex_color(text) is None

    def test_parse_raises_on_invalid(self):
        with pytest.raises(ValueError):
            HexColor.parse("not-a-color")

    def test_prints_lowercase_rrggbbaa(self):
        assert str(HexColor(255, 0, 170)) == "#ff00aaff"
        assert str(HexColor.parse("#ABCDEF12")) == "#abcdef12"

    def test_equality_and_hash_by_value(self):
        assert HexColor(1, 2, 3, 4) == parse_hex_color("#01020304")
        assert len({HexColor(1, 2, 3), HexColor(1, 2, 3, 255)}) == 1


def test_base_color_is_reference_unless_hex():
    assert parse_base_color("#000000") == HexColor(0, 0, 0)
    assert parse_base_color("black") == PaletteReference("black")
    assert parse_base_color("#black") == PaletteReference("#black")


def test_color_ref_parse():
    color = ColorRef.parse("accent", alpha=0.5)
    assert color.base == PaletteReference("accent")
    assert color.modifiers == ColorModifiers(alpha=0.5)
    assert ColorRef.parse("#ff0000").base == HexColor(255, 0, 0)


class TestColorModifiers:
    def test_empty(self):
        assert ColorModifiers().is_empty()
        assert not ColorModifiers(hue_shift=10).is_empty()

    def test_signed_zero_is_equal_and_hashes_alike(self):
        a = ColorModifiers(lighten=0.0)
        b = ColorModifiers(lighten=-0.0)
        assert a == b
        assert hash(a) == hash(b)

    def test_nan_is_equal_and_hashes_alike(self):
        a = ColorModifiers(alpha=float("nan"))
        b = ColorModifiers(alpha=-float("nan"))
        assert a == b
        assert hash(a) == hash(b)

    def test_different_values_differ(self):
        assert ColorModifiers(alpha=0.5) != ColorModifiers(alpha=0.25)
        assert ColorModifiers() != ColorModifiers(alpha=1.0)
        assert ColorModifiers(lighten=0.1) != ColorModifiers(darken=0.1)

    def test_usable_as_dict_key_inside_color_ref(self):
        groups = {ColorRef.parse("a", lighten=0.0): 1}
        assert groups[ColorRef.parse("a", lighten=-0.0)] == 1


class TestApplyModifiers:
    @pytest.mark.parametrize(
        "color", [HexColor(0, 0, 0), HexColor(18, 52, 86, 120), HexColor(255, 255, 255)]
    )
    def test_empty_modifiers_are_identity(self, color):
        assert apply_modifiers(color, ColorModifiers()) == color

    def test_alpha_scales_alpha_only(self):
        assert apply_modifiers(HexColor(255, 0, 0), ColorModifiers(alpha=0.5)) == HexColor(
            255, 0, 0, 128
        )

    def test_alpha_only_keeps_rgb_exactly(self):
        for color in (HexColor(30, 30, 30), HexColor(86, 156, 214), HexColor(250, 1, 99)):
            result = apply_modifiers(color, ColorModifiers(alpha=64 / 255))
            assert result.rgb == color.rgb
            assert result.a == 64

    def test_lighten_black_is_strictly_lighter(self):
        result = apply_modifiers(HexColor(0, 0, 0), ColorModifiers(lighten=0.5))
        assert result != HexColor(0, 0, 0)
        assert min(result.rgb) > 0
        assert result.a == 255

    def test_darken_fully_gives_black(self):
        result = apply_modifiers(HexColor(255, 255, 255), ColorModifiers(darken=1.0))
        assert result == HexColor(0, 0, 0)

    def test_desaturate_fully_gives_grey(self):
        r, g, b, _ = apply_modifiers(HexColor(255, 0, 0), ColorModifiers(desaturate=1.0))
        assert max(r, g, b) - min(r, g, b) <= 1

    def test_saturate_increases_colorfulness(self):
        before = HexColor(120, 100, 100)
        after = apply_modifiers(before, ColorModifiers(saturate=0.5))
        assert max(after.rgb) - min(after.rgb) > max(before.rgb) - min(before.rgb)

    def test_hue_shift_changes_color(self):
        assert apply_modifiers(HexColor(255, 0, 0), ColorModifiers(hue_shift=180)) != HexColor(
            255, 0, 0
        )

    def test_extreme_values_saturate(self):
        result = apply_modifiers(HexColor(255, 0, 0), ColorModifiers(lighten=100))
        assert min(result.rgb) > 200
        result = apply_modifiers(HexColor(10, 20, 30), ColorModifiers(alpha=100))
        assert result.a == 255

    def test_nan_does_not_raise(self):
        result = apply_modifiers(HexColor(10, 20, 30), ColorModifiers(lighten=math.nan))
        assert all(0 <= channel <= 255 for channel in result)

    def test_is_deterministic(self):
        modifiers = ColorModifiers(alpha=0.7, lighten=0.2, saturate=0.1, hue_shift=33)
        color = HexColor(86, 156, 214)
        assert apply_modifiers(color, modifiers) == apply_modifiers(color, modifiers)
        assert color.apply_modifiers(modifiers) == apply_modifiers(color, modifiers)
