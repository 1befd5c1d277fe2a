import pytest

from geopattern.utils import (
    FILL_COLOR_DARK,
    FILL_COLOR_LIGHT,
    OPACITY_MAX,
    OPACITY_MIN,
    fill_color,
    fill_opacity,
    hex_val,
    remap,
    scale_pattern,
)


def test_hex_val_single_digit():
    assert hex_val("0a1f", 1) == 10
    assert hex_val("0a1f", 3) == 15


def test_hex_val_multiple_digits():
    assert hex_val("00fff0", 2, 3) == 4095
    assert hex_val("123456", 0, 2) == 0x12


def test_remap_is_linear_and_unclamped():
    assert remap(0, 0, 15, 10, 60) == 10
    assert remap(15, 0, 15, 10, 60) == pytest.approx(60)
    assert remap(7.5, 0, 15, 0, 100) == pytest.approx(50)
    assert remap(30, 0, 15, 10, 60) == pytest.approx(110)


def test_scale_pattern_adds_offset():
    assert scale_pattern(3, 5) == 8
    assert scale_pattern(3, -2) == 1


def test_fill_color_parity():
    for v in range(16):
        expected = FILL_COLOR_DARK if v % 2 else FILL_COLOR_LIGHT
        assert fill_color(v) == expected


def test_fill_opacity_bounds_and_monotonic():
    values = [fill_opacity(v) for v in range(16)]
    assert values[0] == pytest.approx(OPACITY_MIN)
    assert values[-1] == pytest.approx(OPACITY_MAX)
    for v in values:
        assert OPACITY_MIN - 1e-12 <= v <= OPACITY_MAX + 1e-12
    assert values == sorted(values)
