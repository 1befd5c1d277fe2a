"""
Pattern options.

``Options`` is immutable; build variants with :meth:`Options.replace`. Mappings
may use either the Python field names or the camelCase names used by the
JavaScript geopattern (``baseColor``, ``scalePattern``, ``sizeMultiplier``).
"""

import dataclasses
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .errors import InvalidConfiguration

DEFAULT_BASE_COLOR = "#933c3c"
DEFAULT_SIZE_MULTIPLIER = 2

# Highest digest offset read by any generator is 39.
MIN_DIGEST_LENGTH = 40

_DIGEST = re.compile(r"^[0-9a-fA-F]+$")

_ALIASES = {
    "baseColor": "base_color",
    "scalePattern": "scale_pattern",
    "sizeMultiplier": "size_multiplier",
}


@dataclass(frozen=True)
class Options:
    base_color: str = DEFAULT_BASE_COLOR
    scale_pattern: int = 0
    grayscale: bool = False
    generator: Optional[str] = None    # explicit generator name; otherwise picked from the digest
    hash: Optional[str] = None         # digest override
    size_multiplier: Optional[int] = DEFAULT_SIZE_MULTIPLIER

    def __post_init__(self):
        if not isinstance(self.base_color, str):
            raise InvalidConfiguration(f"Invalid base color: {self.base_color!r}")
        if not _is_int(self.scale_pattern):
            raise InvalidConfiguration(f"scale_pattern must be an integer, got {self.scale_pattern!r}")
        if self.size_multiplier is not None and not _is_int(self.size_multiplier):
            raise InvalidConfiguration(f"size_multiplier must be an integer, got {self.size_multiplier!r}")
        if self.hash is not None:
            validate_digest(self.hash)

    @property
    def tile_multiplier(self) -> int:
        """``size_multiplier`` with 0/None falling back to the default."""
        return self.size_multiplier or DEFAULT_SIZE_MULTIPLIER

    def replace(self, **changes: Any) -> "Options":
        return dataclasses.replace(self, **_normalize(changes))

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "Options":
        """Merge user-supplied keys over the defaults."""
        merged = dict(options or {})
        merged.update(kwargs)
        return cls(**_normalize(merged))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _normalize(options: Mapping[str, Any]) -> dict:
    fields = {f.name for f in dataclasses.fields(Options)}
    out = {}
    for key, value in options.items():
        name = _ALIASES.get(key, key)
        if name not in fields:
            raise InvalidConfiguration(f"Unknown option: {key!r}")
        out[name] = value
    return out


def validate_digest(digest: str) -> str:
    if not isinstance(digest, str) or not _DIGEST.match(digest):
        raise InvalidConfiguration(f"The hash {digest!r} is not a hexadecimal string.")
    if len(digest) < MIN_DIGEST_LENGTH:
        raise InvalidConfiguration(
            f"The hash must be at least {MIN_DIGEST_LENGTH} hex characters long, got {len(digest)}."
        )
    return digest
