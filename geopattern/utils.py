"""
Digest helpers shared by every generator: reading integers out of the hex
digest, linear re-mapping, and the light/dark fill rules.
"""

from typing import Optional, Union

Number = Union[int, float]


# ---------------------------- Style constants --------------------------------

FILL_COLOR_DARK = "#222"
FILL_COLOR_LIGHT = "#ddd"
STROKE_COLOR = "#000"
STROKE_OPACITY = 0.02
OPACITY_MIN = 0.02
OPACITY_MAX = 0.15


# ---------------------------- Digest access ----------------------------------

def hex_val(digest: str, index: int, length: Optional[int] = None) -> int:
    """Parse ``length`` hex characters of ``digest`` starting at ``index``."""
    return int(digest[index:index + (length or 1)], 16)


def scale_pattern(value: int, scale: int) -> int:
    return value + scale


def remap(value: Number, v_min: Number, v_max: Number, d_min: Number, d_max: Number) -> float:
    """Re-map ``value`` from [v_min, v_max] to [d_min, d_max]. No clamping."""
    v_range = v_max - v_min
    d_range = d_max - d_min
    return (float(value) - v_min) * d_range / v_range + d_min


# ---------------------------- Fill rules -------------------------------------

def fill_color(value: int) -> str:
    return FILL_COLOR_LIGHT if value % 2 == 0 else FILL_COLOR_DARK


def fill_opacity(value: int) -> float:
    return remap(value, 0, 15, OPACITY_MIN, OPACITY_MAX)
