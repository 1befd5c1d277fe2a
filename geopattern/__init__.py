"""
geopattern
==========

Deterministic, seamlessly tileable SVG background patterns derived from a
string (a username, an id, a title). The same string and options always give
byte-identical markup.

Quick start
-----------
>>> from geopattern import generate
>>> pattern = generate("octocat", base_color="#336699")
>>> css = pattern.to_css_url()

Sixteen generators are available, see :data:`PATTERNS`. One is chosen from the
digest unless ``generator=`` names one explicitly.
"""

from .errors import InvalidConfiguration
from .generators import GENERATORS, PATTERNS, Generator
from .options import Options
from .pattern import Pattern, generate, sha1

__all__ = [
    "GENERATORS",
    "PATTERNS",
    "Generator",
    "InvalidConfiguration",
    "Options",
    "Pattern",
    "generate",
    "sha1",
]

__version__ = "1.0.0"
