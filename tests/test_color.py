import pytest

from geopattern import InvalidConfiguration
from geopattern.color import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl, rgb_to_rgb_string


def test_hex_to_rgb_forms():
    assert hex_to_rgb("#933c3c") == (147, 60, 60)
    assert hex_to_rgb("933c3c") == (147, 60, 60)
    assert hex_to_rgb("#fff") == (255, 255, 255)


def test_hex_to_rgb_rejects_garbage():
    with pytest.raises(InvalidConfiguration):
        hex_to_rgb("#nothex")


@pytest.mark.parametrize("rgb", [(147, 60, 60), (0, 0, 0), (255, 255, 255), (12, 200, 99), (51, 102, 153)])
def test_hsl_round_trip(rgb):
    assert hsl_to_rgb(rgb_to_hsl(rgb)) == rgb


def test_rgb_to_hsl_primary():
    h, s, l = rgb_to_hsl((255, 0, 0))
    assert h == pytest.approx(0)
    assert s == pytest.approx(1)
    assert l == pytest.approx(0.5)


def test_string_forms():
    assert rgb_to_hex((147, 60, 60)) == "#933c3c"
    assert rgb_to_rgb_string((1, 2, 3)) == "rgb(1,2,3)"


@pytest.mark.parametrize("value", ["red", "#12345", "#1234567", 123, None])
def test_hex_to_rgb_accepts_hex_only(value):
    with pytest.raises(InvalidConfiguration):
        hex_to_rgb(value)
