"""
The pattern engine.

A :class:`Pattern` is built once from an input string and options: the
background is derived from the digest and base color, a generator is chosen,
and the finished SVG document can then be read in several encodings.

>>> from geopattern import generate
>>> generate("GitHub", generator="xes").to_data_url()  # doctest: +ELLIPSIS
'url("data:image/svg+xml;base64,...")'
"""

import base64
import hashlib
import logging
from typing import Any, Mapping, Optional, Union

from . import color
from .generators import GENERATORS, Generator
from .options import Options
from .svg import SVG
from .utils import hex_val, remap

log = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:image/svg+xml;base64,"


def sha1(string: str) -> str:
    return hashlib.sha1(string.encode("utf-8")).hexdigest()


class Pattern:
    """Deterministic, tileable SVG pattern derived from a string."""

    def __init__(self, string: str, options: Optional[Union[Options, Mapping[str, Any]]] = None):
        if not isinstance(options, Options):
            options = Options.from_mapping(options)
        self.options = options
        self.hash = options.hash or sha1(string)
        self.svg = SVG()

        self.color = self._generate_background()
        self.generator = self._generate_pattern()
        log.debug("generated %s for hash %s (%sx%s)",
                  self.generator.value, self.hash, self.svg.width, self.svg.height)

    # ---------------------------- Build steps --------------------------------

    def _generate_background(self) -> str:
        if self.options.grayscale:
            rgb = color.hex_to_rgb(self.options.base_color)
            gray = int((rgb[0] + rgb[1] + rgb[2]) / 3 + 0.5)
            rgb = (gray, gray, gray)
        else:
            hue_offset = remap(hex_val(self.hash, 14, 3), 0, 4095, 0, 359)
            sat_offset = hex_val(self.hash, 17)
            h, s, l = color.rgb_to_hsl(color.hex_to_rgb(self.options.base_color))

            h = ((h * 360 - hue_offset) + 360) % 360 / 360
            if sat_offset % 2 == 0:
                s = min(1, (s * 100 + sat_offset) / 100)
            else:
                s = max(0, (s * 100 - sat_offset) / 100)
            rgb = color.hsl_to_rgb((h, s, l))

        self.svg.rect(0, 0, "100%", "100%", {"fill": color.rgb_to_rgb_string(rgb)})
        return color.rgb_to_hex(rgb)

    def _generate_pattern(self) -> Generator:
        if self.options.generator:
            generator = Generator.from_name(self.options.generator)
        else:
            generator = Generator.from_digest(self.hash)
        GENERATORS[generator](self.svg, self.hash, self.options)
        return generator

    # ---------------------------- Encodings ----------------------------------

    def to_svg(self) -> str:
        return self.svg.to_string()

    def to_base64(self) -> str:
        return base64.b64encode(self.to_svg().encode("utf-8")).decode("ascii")

    def to_data_uri(self) -> str:
        return DATA_URI_PREFIX + self.to_base64()

    def to_css_url(self) -> str:
        return 'url("' + self.to_data_uri() + '")'

    to_data_url = to_css_url

    def __str__(self) -> str:
        return self.to_svg()

    def __repr__(self) -> str:
        return f"<Pattern {self.generator.value} {self.hash}>"


def generate(string: str, options: Optional[Union[Options, Mapping[str, Any]]] = None, **kwargs: Any) -> Pattern:
    """High-level convenience: ``generate("name", generator="squares")``."""
    if kwargs:
        if isinstance(options, Options):
            options = options.replace(**kwargs)
        else:
            options = Options.from_mapping(options, **kwargs)
    return Pattern(string, options)
