"""Tests for themecolors.core.color."""

from __future__ import annotations

import pytest

from themecolors.core.color import BLACK, HSLA, RGBA, WHITE, Color, ColorModelError


def _hex(text: str) -> Color:
    color = Color.from_hex(text)
    assert color is not None
    return color


@pytest.mark.parametrize("text", ["#1e1e1e", "#FFAA00", "#0a0B0c", "#ffffff", "#000000"])
def test_six_digit_hex_round_trips_lowercased(text: str) -> None:
    assert _hex(text).to_hex() == text.lower()


def test_short_forms_expand() -> None:
    assert _hex("#abc") == _hex("#aabbcc")
    short_alpha = _hex("#abc8")
    assert short_alpha.rgba.r == 0xAA
    assert short_alpha.rgba.a == pytest.approx(0x88 / 255, abs=1e-3)


def test_eight_digit_hex_keeps_alpha() -> None:
    color = _hex("#FF000080")
    assert color.rgba == RGBA(255, 0, 0, 0.502)
    assert color.to_hex() == "#ff000080"
    assert not color.is_opaque()


@pytest.mark.parametrize("text", ["ffffff", "#ggg", "#12345", "#1234567", "", "#", "red", None, 12])
def test_malformed_hex_is_absent(text) -> None:
    assert Color.from_hex(text) is None


def test_hex_ignores_surrounding_whitespace() -> None:
    assert Color.from_hex("  #102030\n") == _hex("#102030")


def test_transparent_scales_alpha() -> None:
    color = _hex("#33669980")
    assert color.transparent(1.0).rgba.a == color.rgba.a
    assert color.transparent(0.0).rgba.a == 0
    assert _hex("#ffffff").transparent(0.5).rgba.a == 0.5
    assert _hex("#ffffff").transparent(3.0).rgba.a == 1.0


def test_rgb_to_hsl_conversion() -> None:
    assert _hex("#336699").hsla == HSLA(210, 0.5, 0.4, 1.0)
    assert _hex("#ff0000").hsla == HSLA(0, 1.0, 0.5, 1.0)
    assert _hex("#808080").hsla.s == 0


def test_hsl_to_rgb_conversion() -> None:
    assert Color(HSLA(0, 1.0, 0.5)).rgba == RGBA(255, 0, 0, 1.0)
    assert Color(HSLA(120, 1.0, 0.5)).rgba == RGBA(0, 255, 0, 1.0)
    assert Color(HSLA(240, 1.0, 0.25)).to_hex() == "#000080"
    assert Color(HSLA(0, 0.0, 1.0)) == WHITE


def test_darken_and_lighten_bounds() -> None:
    base = _hex("#336699")
    assert base.darken(0).hsla.l == base.hsla.l
    assert base.lighten(0).hsla.l == base.hsla.l
    assert base.darken(1).hsla.l == 0
    assert base.lighten(1).hsla.l == 1
    assert base.darken(1) == BLACK
    assert base.lighten(1) == WHITE


def test_lighten_moves_toward_white_by_fraction() -> None:
    base = _hex("#336699")
    lighter = base.lighten(0.5)
    assert lighter.hsla.l == pytest.approx(0.7)
    assert lighter.hsla.h == 210
    assert lighter.hsla.s == 0.5
    assert base.darken(0.5).hsla.l == pytest.approx(0.2)


def test_out_of_range_factors_clamp() -> None:
    base = _hex("#336699")
    assert base.lighten(5).hsla.l == 1
    assert base.darken(5).hsla.l == 0
    assert base.lighten(-5).hsla.l == 0


def test_relative_luminance_and_darker_comparison() -> None:
    assert WHITE.get_relative_luminance() == 1.0
    assert BLACK.get_relative_luminance() == 0.0
    assert BLACK.is_darker_than(WHITE)
    assert not WHITE.is_darker_than(BLACK)
    gray = _hex("#808080")
    assert not gray.is_darker_than(_hex("#808080"))
    assert not gray.is_lighter_than(_hex("#808080"))


def test_opacity_predicates() -> None:
    assert WHITE.is_opaque()
    assert not WHITE.is_transparent()
    assert WHITE.transparent(0).is_transparent()
    translucent = _hex("#ffffff80")
    assert not translucent.is_opaque()
    assert not translucent.is_transparent()


_SAMPLES = ["#000000", "#ffffff", "#1e1e1e", "#ff0000", "#0000ff", "#ffff00", "#264f78", "#add6ff", "#808080"]


@pytest.mark.parametrize("background", _SAMPLES)
@pytest.mark.parametrize("factor", [0.05, 0.3, 1.0])
def test_lighter_color_is_never_darker_than_background(background: str, factor: float) -> None:
    bg = _hex(background)
    for source in _SAMPLES:
        result = Color.get_lighter_color(_hex(source), bg, factor)
        assert not result.is_darker_than(bg)


@pytest.mark.parametrize("background", _SAMPLES)
@pytest.mark.parametrize("factor", [0.05, 0.3, 1.0])
def test_darker_color_is_never_lighter_than_background(background: str, factor: float) -> None:
    bg = _hex(background)
    for source in _SAMPLES:
        result = Color.get_darker_color(_hex(source), bg, factor)
        assert not result.is_lighter_than(bg)


def test_lighter_color_recomputes_even_when_already_lighter() -> None:
    background = _hex("#202020")
    result = Color.get_lighter_color(WHITE, background, 0.5)
    assert result != WHITE
    assert result.is_lighter_than(background)


def test_lighter_color_keeps_hue_and_alpha() -> None:
    source = _hex("#264f7880")
    result = Color.get_lighter_color(source, _hex("#808080"), 0.4)
    assert result.hsla.h == source.hsla.h
    assert result.rgba.a == source.rgba.a
    assert result.is_lighter_than(_hex("#808080"))


def test_contrast_helpers_with_zero_factor_return_source() -> None:
    source = _hex("#336699")
    assert Color.get_lighter_color(source, WHITE, 0) is source
    assert Color.get_darker_color(source, BLACK, 0) is source


def test_blend_and_make_opaque() -> None:
    assert _hex("#ff0000").blend(WHITE) == _hex("#ff0000")
    blended = _hex("#00000080").blend(WHITE)
    assert blended.rgba.g == 126
    assert blended.rgba.a == 1.0

    flattened = _hex("#00000080").make_opaque(WHITE)
    assert flattened.is_opaque()
    assert flattened.rgba.r == 126
    assert WHITE.make_opaque(BLACK) is WHITE


def test_css_format() -> None:
    assert str(_hex("#1E1E1E")) == "#1e1e1e"
    assert str(_hex("#ffffff80")) == "rgba(255, 255, 255, 0.5)"
    assert str(WHITE.transparent(0.25)) == "rgba(255, 255, 255, 0.25)"
    assert str(WHITE.transparent(0)) == "rgba(255, 255, 255, 0)"


def test_value_equality_and_hashing() -> None:
    assert _hex("#ABC") == _hex("#aabbcc")
    assert len({_hex("#abc"), _hex("#aabbcc"), _hex("#000")}) == 2
    assert _hex("#abc") != "#aabbcc"


def test_operations_return_new_instances() -> None:
    base = _hex("#336699")
    assert base.darken(0.1) is not base
    assert base.to_hex() == "#336699"


def test_invalid_channels_raise_model_error() -> None:
    with pytest.raises(ColorModelError):
        RGBA(256, 0, 0)
    with pytest.raises(ColorModelError):
        RGBA(0, 0, 0, 1.5)
    with pytest.raises(ColorModelError):
        HSLA(361, 0.5, 0.5)


def test_clamped_constructors_normalize() -> None:
    assert RGBA.clamped(300.7, -4, 12.9, 2) == RGBA(255, 0, 12, 1.0)
    assert HSLA.clamped(400, 2, -1, 0.12345) == HSLA(360, 1.0, 0.0, 0.123)
