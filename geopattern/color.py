"""
Color conversions used for the background.

RGB channels are integers in 0..255; hue, saturation and lightness are floats
in 0..1.
"""

import colorsys
import re
from typing import Tuple

from PIL import ImageColor

from .errors import InvalidConfiguration

RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]

_HEX = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def hex_to_rgb(hex_color: str) -> RGB:
    """Convert '#RRGGBB', 'RRGGBB' or shorthand '#RGB' to (r, g, b)."""
    if not isinstance(hex_color, str) or not _HEX.match(hex_color.strip()):
        raise InvalidConfiguration(f"Invalid base color: {hex_color!r}")
    h = hex_color.strip()
    if not h.startswith("#"):
        h = "#" + h
    r, g, b = ImageColor.getrgb(h)[:3]
    return r, g, b


def rgb_to_hsl(rgb: RGB) -> HSL:
    r, g, b = (c / 255.0 for c in rgb)
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return h, s, l


def hsl_to_rgb(hsl: HSL) -> RGB:
    h, s, l = hsl
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return _channel(r), _channel(g), _channel(b)


def _channel(value: float) -> int:
    # Half-up rounding, clamped to a byte.
    return max(0, min(255, int(value * 255 + 0.5)))


def rgb_to_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def rgb_to_rgb_string(rgb: RGB) -> str:
    return "rgb({},{},{})".format(*rgb)
