"""
Command line
------------
$ geopattern "octocat" --generator hexagons --out octocat.svg
$ geopattern "octocat" --format css-url --base-color "#336699" --scale 2
$ geopattern --list
"""

import argparse
import logging
from typing import Optional, Sequence

from .errors import InvalidConfiguration
from .generators import PATTERNS
from .options import DEFAULT_BASE_COLOR, DEFAULT_SIZE_MULTIPLIER
from .pattern import generate

log = logging.getLogger(__name__)

FORMATS = {
    "svg": lambda p: p.to_svg(),
    "base64": lambda p: p.to_base64(),
    "data-uri": lambda p: p.to_data_uri(),
    "css-url": lambda p: p.to_css_url(),
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="geopattern", description="Generate tileable SVG patterns from a string")
    ap.add_argument("string", nargs="?", help="Input string the pattern is derived from")
    ap.add_argument("--generator", default=None, choices=[g.value for g in PATTERNS],
                    help="Use this generator instead of picking one from the hash")
    ap.add_argument("--base-color", default=DEFAULT_BASE_COLOR, help="Background base color as hex")
    ap.add_argument("--scale", type=int, default=0, help="Offset added to every size-driving hash value")
    ap.add_argument("--grayscale", action="store_true", help="Flatten the background to gray")
    ap.add_argument("--hash", default=None, help="Use this hex digest instead of hashing STRING")
    ap.add_argument("--size-multiplier", type=int, default=DEFAULT_SIZE_MULTIPLIER,
                    help="Tile repeat multiplier for xes, triangles and mosaicSquares")
    ap.add_argument("--format", default="svg", choices=sorted(FORMATS), help="Output encoding")
    ap.add_argument("--out", default=None, help="Write to this path instead of stdout")
    ap.add_argument("--list", action="store_true", help="List generator names and exit")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for g in PATTERNS:
            print(g.value)
        return 0

    if args.string is None and args.hash is None:
        ap.error("STRING is required unless --hash is given")

    try:
        pattern = generate(
            args.string or "",
            base_color=args.base_color,
            scale_pattern=args.scale,
            grayscale=args.grayscale,
            generator=args.generator,
            hash=args.hash,
            size_multiplier=args.size_multiplier,
        )
    except InvalidConfiguration as e:
        ap.error(str(e))

    out = FORMATS[args.format](pattern)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as fh:
            fh.write(out)
        log.info("wrote %s pattern to %s", pattern.generator.value, args.out)
        print(args.out)
    else:
        print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
