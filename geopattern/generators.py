"""
The sixteen geometry generators.

Every generator has the signature ``(svg, digest, options) -> None``. It sizes
the canvas, then walks a grid of cells, reading one digest value per cell for
the fill and opacity. Generators that wrap seamlessly repeat their boundary
cells on the opposite edge.

Which digest index a cell reads differs between generators (some restart at 0
after 16 cells, some run through the whole digest). The output of each one is
part of the public contract, so keep them as they are.
"""

import math
from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple

from .errors import InvalidConfiguration
from .options import Options
from .svg import SVG, Point, Styles, transform
from .utils import (
    STROKE_COLOR,
    STROKE_OPACITY,
    fill_color,
    fill_opacity,
    hex_val,
    remap,
    scale_pattern,
)

GeneratorFn = Callable[[SVG, str, Options], None]


class Generator(Enum):
    """Generator names, in digest-selection order."""

    OCTOGONS = "octogons"
    OVERLAPPING_CIRCLES = "overlappingCircles"
    PLUS_SIGNS = "plusSigns"
    XES = "xes"
    SINE_WAVES = "sineWaves"
    HEXAGONS = "hexagons"
    OVERLAPPING_RINGS = "overlappingRings"
    PLAID = "plaid"
    TRIANGLES = "triangles"
    SQUARES = "squares"
    CONCENTRIC_CIRCLES = "concentricCircles"
    DIAMONDS = "diamonds"
    TESSELLATION = "tessellation"
    NESTED_SQUARES = "nestedSquares"
    MOSAIC_SQUARES = "mosaicSquares"
    CHEVRONS = "chevrons"

    @classmethod
    def from_name(cls, name) -> "Generator":
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise InvalidConfiguration(f"The generator {name} does not exist.") from None

    @classmethod
    def from_digest(cls, digest: str) -> "Generator":
        return PATTERNS[hex_val(digest, 20)]


PATTERNS: Tuple[Generator, ...] = tuple(Generator)


def _filled(value: int) -> Styles:
    """Translucent fill with the faint outline most tiles share."""
    return {
        "fill": fill_color(value),
        "fill-opacity": fill_opacity(value),
        "stroke": STROKE_COLOR,
        "stroke-opacity": STROKE_OPACITY,
    }


def _stroked(value: int, width: float) -> Styles:
    return {
        "fill": "none",
        "stroke": fill_color(value),
        "opacity": fill_opacity(value),
        "stroke-width": f"{width}px",
    }


# ---------------------------- Shapes -----------------------------------------

def build_hexagon_shape(side: float) -> List[Point]:
    c = side
    a = c / 2
    b = math.sin(60 * math.pi / 180) * c
    return [(0, b), (a, 0), (a + c, 0), (2 * c, b), (a + c, 2 * b), (a, 2 * b), (0, b)]


def build_chevron_shape(width: float, height: float) -> Tuple[List[Point], List[Point]]:
    e = height * 0.66
    left = [(0, 0), (width / 2, height - e), (width / 2, height), (0, e), (0, 0)]
    right = [(width / 2, height - e), (width, 0), (width, e), (width / 2, height), (width / 2, height - e)]
    return left, right


def build_plus_shape(square: float) -> List[Tuple[float, float, float, float]]:
    """Two overlapping bars as (x, y, w, h) rects."""
    return [
        (square, 0, square, square * 3),
        (0, square, square * 3, square),
    ]


def build_octogon_shape(square: float) -> List[Point]:
    s = square
    c = s * 0.33
    return [(c, 0), (s - c, 0), (s, c), (s, s - c), (s - c, s), (c, s), (0, s - c), (0, c), (c, 0)]


def build_triangle_shape(side: float, height: float) -> List[Point]:
    half = side / 2
    return [(half, 0), (side, height), (0, height), (half, 0)]


def build_diamond_shape(width: float, height: float) -> List[Point]:
    return [(width / 2, 0), (width, height / 2), (width / 2, height), (0, height / 2)]


def build_right_triangle_shape(side: float) -> List[Point]:
    return [(0, 0), (side, side), (0, side), (0, 0)]


def build_rotated_triangle_shape(side: float, width: float) -> List[Point]:
    return [(0, 0), (width, side / 2), (0, side), (0, 0)]


def _plus(svg: SVG, shape: Sequence[Tuple[float, float, float, float]]) -> None:
    for x, y, w, h in shape:
        svg.rect(x, y, w, h)


# ---------------------------- Generators -------------------------------------

def geo_octogons(svg: SVG, digest: str, options: Options) -> None:
    scale = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    square = remap(scale, 0, 15, 10, 60)
    tile = build_octogon_shape(square)
    cols, rows = 12, 6

    svg.set_width(square * cols)
    svg.set_height(square * rows)

    i = 0
    for y in range(rows):
        for x in range(cols):
            val = hex_val(digest, i)
            transform(svg.polyline(tile, _filled(val)), translate=(x * square, y * square))
            i += 1
            if i >= 16:
                i = 0


def geo_overlapping_circles(svg: SVG, digest: str, options: Options) -> None:
    scale = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    diameter = remap(scale, 0, 15, 25, 200)
    radius = diameter / 2

    svg.set_width(radius * 7)
    svg.set_height(radius * 6)

    i = 0
    for y in range(6):
        for x in range(6):
            val = hex_val(digest, i)
            styles = {"fill": fill_color(val), "opacity": fill_opacity(val)}

            svg.circle(x * radius, y * radius, radius, styles)
            # Repeat the first column on the right and the first row at the bottom.
            if x == 0:
                svg.circle(6 * radius, y * radius, radius, styles)
            if y == 0:
                svg.circle(x * radius, 6 * radius, radius, styles)
            if x == 0 and y == 0:
                svg.circle(6 * radius, 6 * radius, radius, styles)

            i += 1
            if i >= 16:
                i = 0


def geo_plus_signs(svg: SVG, digest: str, options: Options) -> None:
    scale = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    square = remap(scale, 0, 15, 10, 25)
    plus_size = square * 3
    shape = build_plus_shape(square)
    cols, rows = 20, 15

    svg.set_width(square * cols * 2)
    svg.set_height(square * rows * 2)

    i = 0
    for y in range(rows):
        for x in range(cols):
            val = hex_val(digest, i)
            styles = _filled(val)
            dx = 0 if y % 2 == 0 else 1

            tx = x * plus_size - x * square + dx * square - square
            ty = y * plus_size - y * square - plus_size / 2
            wrap_x = cols * plus_size - x * square + dx * square - square
            wrap_y = rows * plus_size - y * square - plus_size / 2

            placements = [(tx, ty)]
            if x == 0:
                placements.append((wrap_x, ty))
            if y == 0:
                placements.append((tx, wrap_y))
            if x == 0 and y == 0:
                placements.append((wrap_x, wrap_y))

            for px, py in placements:
                with svg.group(styles, translate=(px, py)):
                    _plus(svg, shape)

            i += 1
            if i >= 16:
                i = 0


def geo_xes(svg: SVG, digest: str, options: Options) -> None:
    scale = 3 * scale_pattern(hex_val(digest, 0), options.scale_pattern)
    square = remap(scale, 0, 15, 10, 25)
    shape = build_plus_shape(square)
    x_size = square * 3 * 0.943
    tiles = 6 * options.tile_multiplier
    rotate = (45, x_size / 2, x_size / 2)

    svg.set_width(x_size * 6)
    svg.set_height(x_size * 4)

    def draw(styles: Styles, tx: float, ty: float) -> None:
        with svg.group(styles, translate=(tx, ty), rotate=rotate):
            _plus(svg, shape)

    i = 0
    for y in range(tiles):
        for x in range(tiles):
            val = hex_val(digest, i % len(digest))
            styles = {"fill": fill_color(val), "opacity": fill_opacity(val)}
            dy = y * x_size - x_size * 0.5
            if x % 2 != 0:
                dy += x_size / 4

            draw(styles, x * x_size / 2 - x_size / 2, dy - y * x_size / 2)

            if x == 0:
                draw(styles, tiles * x_size / 2 - x_size / 2, dy - y * x_size / 2)

            # Extra row at the bottom matching the first row.
            if y == 0:
                dy = tiles * x_size - x_size / 2
                if x % 2 != 0:
                    dy += x_size / 4
                draw(styles, x * x_size / 2 - x_size / 2, dy - tiles * x_size / 2)

            # The last row hangs off the bottom, so repeat it above the top.
            if y == tiles - 1:
                draw(styles, x * x_size / 2 - x_size / 2, dy - (2 * tiles - 1) * x_size / 2)

            if x == 0 and y == 0:
                draw(styles, tiles * x_size / 2 - x_size / 2, dy - tiles * x_size / 2)

            i += 1


def geo_sine_waves(svg: SVG, digest: str, options: Options) -> None:
    scale1 = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    scale2 = scale_pattern(hex_val(digest, 1), options.scale_pattern)
    scale3 = scale_pattern(hex_val(digest, 2), options.scale_pattern)
    period = math.floor(remap(scale1, 0, 15, 100, 400))
    amplitude = math.floor(remap(scale2, 0, 15, 30, 100))
    wave_width = math.floor(remap(scale3, 0, 15, 3, 30))
    x_offset = period / 4 * 0.7

    svg.set_width(period)
    svg.set_height(wave_width * 36)

    d = (
        f"M0 {amplitude}"
        f" C {x_offset} 0, {period / 2 - x_offset} 0, {period / 2} {amplitude}"
        f" S {period - x_offset} {amplitude * 2}, {period} {amplitude}"
        f" S {period * 1.5 - x_offset} 0, {period * 1.5}, {amplitude}"
    )

    for i in range(36):
        val = hex_val(digest, i)
        styles = {
            "fill": "none",
            "stroke": fill_color(val),
            "opacity": fill_opacity(val),
            "stroke-width": f"{wave_width}px",
        }
        ty = wave_width * i - amplitude * 1.5
        transform(svg.path(d, styles), translate=(-period / 4, ty))
        transform(svg.path(d, styles), translate=(-period / 4, ty + wave_width * 36))


def geo_hexagons(svg: SVG, digest: str, options: Options) -> None:
    scale = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    side = remap(scale, 0, 15, 8, 60)
    hex_height = side * math.sqrt(3)
    hex_width = side * 2
    hexagon = build_hexagon_shape(side)
    cols, rows = 12, 6

    svg.set_width(hex_width * (cols / 2) + side * (cols / 2))
    svg.set_height(hex_height * rows)

    wrap_x = cols * side * 1.5 - hex_width / 2

    i = 0
    for y in range(rows):
        for x in range(cols):
            val = hex_val(digest, i)
            styles = _filled(val)
            dy = y * hex_height if x % 2 == 0 else y * hex_height + hex_height / 2
            tx = x * side * 1.5 - hex_width / 2

            transform(svg.polyline(hexagon, styles), translate=(tx, dy - hex_height / 2))

            if x == 0:
                transform(svg.polyline(hexagon, styles), translate=(wrap_x, dy - hex_height / 2))

            if y == 0:
                dy = rows * hex_height if x % 2 == 0 else rows * hex_height + hex_height / 2
                transform(svg.polyline(hexagon, styles), translate=(tx, dy - hex_height / 2))

            if x == 0 and y == 0:
                transform(
                    svg.polyline(hexagon, styles),
                    translate=(wrap_x, (rows - 1) * hex_height + hex_height / 2),
                )

            i += 1
            if i >= 16:
                i = 0


def geo_overlapping_rings(svg: SVG, digest: str, options: Options) -> None:
    scale = scale_pattern(hex_val(digest, 10), options.scale_pattern)
    ring = remap(scale, 0, 15, 10, 60)
    stroke_width = ring / 4
    radius = ring - stroke_width / 2
    cols, rows = 30, 20

    svg.set_width(ring * cols)
    svg.set_height(ring * rows)

    i = 0
    for y in range(rows):
        for x in range(cols):
            val = hex_val(digest, i)
            styles = _stroked(val, stroke_width)

            svg.circle(x * ring, y * ring, radius, styles)
            if x == 0:
                svg.circle(cols * ring, y * ring, radius, styles)
            if y == 0:
                svg.circle(x * ring, rows * ring, radius, styles)
            if x == 0 and y == 0:
                svg.circle(cols * ring, rows * ring, radius, styles)

            i += 1
            if i >= 16:
                i = 0


def geo_plaid(svg: SVG, digest: str, options: Options) -> None:
    height = 0
    width = 0

    # Horizontal stripes
    i = 0
    while i < 36:
        space = scale_pattern(hex_val(digest, i), options.scale_pattern // 2)
        height += space + 5

        val = hex_val(digest, i + 1)
        stripe = val + 5
        svg.rect(0, height, "100%", stripe, {"opacity": fill_opacity(val), "fill": fill_color(val)})

        height += stripe
        i += 2

    # Vertical stripes
    i = 0
    while i < 36:
        space = hex_val(digest, i)
        width += space + 5

        val = hex_val(digest, i + 1)
        stripe = val + 5
        svg.rect(width, 0, stripe, "100%", {"opacity": fill_opacity(val), "fill": fill_color(val)})

        width += stripe
        i += 2

    svg.set_width(width)
    svg.set_height(height)


def geo_triangles(svg: SVG, digest: str, options: Options) -> None:
    scale = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    side = remap(scale, 0, 15, 15, 80)
    height = side / 2 * math.sqrt(3)
    triangle = build_triangle_shape(side, height)
    tiles = 6 * options.tile_multiplier

    svg.set_width(side * tiles)
    svg.set_height(height * tiles)

    wrap_x = tiles * side * 0.5 - side / 2

    i = 0
    for y in range(tiles):
        for x in range(tiles):
            val = hex_val(digest, i % len(digest))
            styles = _filled(val)

            if y % 2 == 0:
                rotation = 180 if x % 2 == 0 else 0
            else:
                rotation = 180 if x % 2 != 0 else 0
            rotate = (rotation, side / 2, height / 2)
            tx = x * side * 0.5 - side / 2

            placements = [(tx, height * y)]
            if x == 0:
                placements.append((wrap_x, height * y))
            if y == 0:
                placements.append((tx, height * tiles))
            if x == 0 and y == 0:
                placements.append((wrap_x, height * tiles))
            if y == tiles - 1:
                placements.append((tx, -height * tiles))

            for px, py in placements:
                transform(svg.polyline(triangle, styles), translate=(px, py), rotate=rotate)

            i += 1


def geo_squares(svg: SVG, digest: str, options: Options) -> None:
    scale = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    square = remap(scale, 0, 15, 10, 60)
    cols, rows = 27, 15

    svg.set_width(square * cols)
    svg.set_height(square * rows)

    i = 0
    for y in range(rows):
        for x in range(cols):
            val = hex_val(digest, i)
            svg.rect(x * square, y * square, square, square, _filled(val))
            i += 1
            if i >= 16:
                i = 0


def geo_concentric_circles(svg: SVG, digest: str, options: Options) -> None:
    scale = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    ring = remap(scale, 0, 15, 10, 60)
    stroke_width = ring / 5
    pitch = ring + stroke_width
    cols, rows = 20, 12

    svg.set_width(pitch * cols)
    svg.set_height(pitch * rows)

    i = 0
    for y in range(rows):
        for x in range(cols):
            cx = x * ring + x * stroke_width + pitch / 2
            cy = y * ring + y * stroke_width + pitch / 2

            val = hex_val(digest, i)
            svg.circle(cx, cy, ring / 2, _stroked(val, stroke_width))

            val = hex_val(digest, 39 - i)
            svg.circle(cx, cy, ring / 4, {"fill": fill_color(val), "fill-opacity": fill_opacity(val)})

            i += 1
            if i >= 16:
                i = 0


def geo_diamonds(svg: SVG, digest: str, options: Options) -> None:
    scale1 = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    scale2 = scale_pattern(hex_val(digest, 1), options.scale_pattern)
    width = remap(scale1, 0, 15, 10, 50)
    height = remap(scale2, 0, 15, 10, 50)
    diamond = build_diamond_shape(width, height)
    cols, rows = 10, 40

    svg.set_width(width * cols)
    svg.set_height(height * rows)

    i = 0
    for y in range(rows):
        for x in range(cols):
            val = hex_val(digest, i)
            styles = _filled(val)
            dx = 0 if y % 2 == 0 else width / 2

            tx = x * width - width / 2 + dx
            ty = height / 2 * y - height / 2
            wrap_x = cols * width - width / 2 + dx
            wrap_y = height / 2 * rows - height / 2

            transform(svg.polyline(diamond, styles), translate=(tx, ty))
            if x == 0:
                transform(svg.polyline(diamond, styles), translate=(wrap_x, ty))
            if y == 0:
                transform(svg.polyline(diamond, styles), translate=(tx, wrap_y))
            if x == 0 and y == 0:
                transform(svg.polyline(diamond, styles), translate=(wrap_x, wrap_y))

            i += 1
            if i >= 16:
                i = 0


def geo_tessellation(svg: SVG, digest: str, options: Options) -> None:
    """3.4.6.4 semi-regular tessellation, built from 20 placements per tile."""
    scale = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    side = remap(scale, 0, 15, 5, 40)
    hex_height = side * math.sqrt(3)
    hex_width = side * 2
    tri_height = side / 2 * math.sqrt(3)
    triangle = build_rotated_triangle_shape(side, tri_height)
    tile_width = side * 3 + tri_height * 2
    tile_height = hex_height * 2 + side * 2
    cols, rows = 10, 5

    svg.set_width(tile_width * cols)
    svg.set_height(tile_height * rows)

    for y in range(rows):
        for x in range(cols):
            ox = x * tile_width
            oy = y * tile_height
            for i in range(20):
                val = hex_val(digest, i)
                styles = _filled(val)
                styles["stroke-width"] = 1
                _tessellation_piece(svg, i, styles, ox, oy, side, hex_width, hex_height,
                                    tri_height, triangle, tile_width, tile_height)


def _tessellation_piece(svg: SVG, i: int, styles: Styles, ox: float, oy: float,
                        side: float, hex_width: float, hex_height: float, tri_height: float,
                        triangle: List[Point], tile_width: float, tile_height: float) -> None:
    half = side / 2
    pivot = (0, half, tri_height / 2)

    if i == 0:  # corners
        svg.rect(-half + ox, -half + oy, side, side, styles)
        svg.rect(tile_width - half + ox, -half + oy, side, side, styles)
        svg.rect(-half + ox, tile_height - half + oy, side, side, styles)
        svg.rect(tile_width - half + ox, tile_height - half + oy, side, side, styles)
    elif i == 1:  # center, top square
        svg.rect(hex_width / 2 + tri_height + ox, hex_height / 2 + oy, side, side, styles)
    elif i == 2:  # side squares
        svg.rect(-half + ox, tile_height / 2 - half + oy, side, side, styles)
        svg.rect(tile_width - half + ox, tile_height / 2 - half + oy, side, side, styles)
    elif i == 3:  # center, bottom square
        svg.rect(hex_width / 2 + tri_height + ox, hex_height * 1.5 + side + oy, side, side, styles)
    elif i == 4:  # left, top and bottom triangles
        transform(svg.polyline(triangle, styles), translate=(half + ox, -half + oy), rotate=pivot)
        transform(svg.polyline(triangle, styles), translate=(half + ox, tile_height + half + oy),
                  rotate=pivot, scale=(1, -1))
    elif i == 5:  # right, top and bottom triangles
        transform(svg.polyline(triangle, styles), translate=(tile_width - half + ox, -half + oy),
                  rotate=pivot, scale=(-1, 1))
        transform(svg.polyline(triangle, styles), translate=(tile_width - half + ox, tile_height + half + oy),
                  rotate=pivot, scale=(-1, -1))
    elif i == 6:  # center, top right triangle
        transform(svg.polyline(triangle, styles), translate=(tile_width / 2 + half + ox, hex_height / 2 + oy))
    elif i == 7:  # center, top left triangle
        transform(svg.polyline(triangle, styles),
                  translate=(tile_width - tile_width / 2 - half + ox, hex_height / 2 + oy), scale=(-1, 1))
    elif i == 8:  # center, bottom right triangle
        transform(svg.polyline(triangle, styles),
                  translate=(tile_width / 2 + half + ox, tile_height - hex_height / 2 + oy), scale=(1, -1))
    elif i == 9:  # center, bottom left triangle
        transform(svg.polyline(triangle, styles),
                  translate=(tile_width - tile_width / 2 - half + ox, tile_height - hex_height / 2 + oy),
                  scale=(-1, -1))
    elif i == 10:  # left, middle triangle
        transform(svg.polyline(triangle, styles), translate=(half + ox, tile_height / 2 - half + oy))
    elif i == 11:  # right, middle triangle
        transform(svg.polyline(triangle, styles),
                  translate=(tile_width - half + ox, tile_height / 2 - half + oy), scale=(-1, 1))
    elif i == 12:  # left, top square
        transform(svg.rect(0, 0, side, side, styles), translate=(half + ox, half + oy), rotate=(-30, 0, 0))
    elif i == 13:  # right, top square
        transform(svg.rect(0, 0, side, side, styles), scale=(-1, 1),
                  translate=(-tile_width + half + ox, half + oy), rotate=(-30, 0, 0))
    elif i == 14:  # left, center-top square
        transform(svg.rect(0, 0, side, side, styles),
                  translate=(half + ox, tile_height / 2 - half - side + oy), rotate=(30, 0, side))
    elif i == 15:  # right, center-top square
        transform(svg.rect(0, 0, side, side, styles), scale=(-1, 1),
                  translate=(-tile_width + half + ox, tile_height / 2 - half - side + oy), rotate=(30, 0, side))
    elif i == 16:  # left, center-bottom square
        transform(svg.rect(0, 0, side, side, styles), scale=(1, -1),
                  translate=(half + ox, -tile_height + tile_height / 2 - half - side + oy), rotate=(30, 0, side))
    elif i == 17:  # right, center-bottom square
        transform(svg.rect(0, 0, side, side, styles), scale=(-1, -1),
                  translate=(-tile_width + half + ox, -tile_height + tile_height / 2 - half - side + oy),
                  rotate=(30, 0, side))
    elif i == 18:  # left, bottom square
        transform(svg.rect(0, 0, side, side, styles), scale=(1, -1),
                  translate=(half + ox, -tile_height + half + oy), rotate=(-30, 0, 0))
    elif i == 19:  # right, bottom square
        transform(svg.rect(0, 0, side, side, styles), scale=(-1, -1),
                  translate=(-tile_width + half + ox, -tile_height + half + oy), rotate=(-30, 0, 0))


def geo_nested_squares(svg: SVG, digest: str, options: Options) -> None:
    scale = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    block = remap(scale, 0, 15, 4, 12)
    square = block * 7

    svg.set_width((square + block) * 6 + block * 6)
    svg.set_height((square + block) * 6 + block * 6)

    i = 0
    for y in range(6):
        for x in range(6):
            left = x * square + x * block * 2 + block / 2
            top = y * square + y * block * 2 + block / 2

            val = hex_val(digest, i)
            svg.rect(left, top, square, square, _stroked(val, block))

            val = hex_val(digest, 39 - i)
            svg.rect(left + block * 2, top + block * 2, block * 3, block * 3, _stroked(val, block))

            i += 1
            if i >= 16:
                i = 0


def draw_inner_mosaic_tile(svg: SVG, x: float, y: float, size: float, vals: Tuple[int, int]) -> None:
    triangle = build_right_triangle_shape(size)

    styles = _filled(vals[0])
    transform(svg.polyline(triangle, styles), translate=(x + size, y), scale=(-1, 1))
    transform(svg.polyline(triangle, styles), translate=(x + size, y + size * 2), scale=(1, -1))

    styles = _filled(vals[1])
    transform(svg.polyline(triangle, styles), translate=(x + size, y + size * 2), scale=(-1, -1))
    transform(svg.polyline(triangle, styles), translate=(x + size, y), scale=(1, 1))


def draw_outer_mosaic_tile(svg: SVG, x: float, y: float, size: float, val: int) -> None:
    triangle = build_right_triangle_shape(size)
    styles = _filled(val)
    transform(svg.polyline(triangle, styles), translate=(x, y + size), scale=(1, -1))
    transform(svg.polyline(triangle, styles), translate=(x + size * 2, y + size), scale=(-1, -1))
    transform(svg.polyline(triangle, styles), translate=(x, y + size), scale=(1, 1))
    transform(svg.polyline(triangle, styles), translate=(x + size * 2, y + size), scale=(-1, 1))


def geo_mosaic_squares(svg: SVG, digest: str, options: Options) -> None:
    scale = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    size = remap(scale, 0, 15, 15, 50)
    tiles = 4 * options.tile_multiplier
    n = len(digest)

    svg.set_width(size * 2 * tiles)
    svg.set_height(size * 2 * tiles)

    def tile(x: float, y: float, outer: bool, i: int) -> None:
        index = i % n
        if outer:
            draw_outer_mosaic_tile(svg, x, y, size, hex_val(digest, index))
        else:
            draw_inner_mosaic_tile(svg, x, y, size, (hex_val(digest, index), hex_val(digest, (index + 1) % n)))

    i = 0
    for y in range(tiles):
        for x in range(tiles):
            tile(x * size * 2, y * size * 2, x % 2 == y % 2, i)
            i += 1

    # Extra column on the right
    for y in range(tiles):
        tile(tiles * size * 2, y * size * 2, y % 2 != 0, i)
        i += 1

    # Extra row at the bottom
    for x in range(tiles):
        tile(x * size * 2, tiles * size * 2, x % 2 != 0, i)
        i += 1

    # Bottom-right corner
    tile(tiles * size * 2, tiles * size * 2, True, i)
    i += 1

    # Extra row on top
    for x in range(tiles):
        tile(x * size * 2, -size * 2, x % 2 == 0, i)
        i += 1


def geo_chevrons(svg: SVG, digest: str, options: Options) -> None:
    scale = scale_pattern(hex_val(digest, 0), options.scale_pattern)
    width = remap(scale, 0, 15, 30, 80)
    height = remap(scale, 0, 15, 30, 80)
    chevron = build_chevron_shape(width, height)

    # Fixed canvas, independent of the chevron size.
    svg.set_width(500)
    svg.set_height(500)

    i = 0
    for y in range(6):
        for x in range(6):
            val = hex_val(digest, i)
            styles = _filled(val)
            styles["stroke-width"] = 1

            rows = [y]
            if y == 0:
                rows.append(6)
            for row in rows:
                with svg.group(styles, translate=(x * width, row * height * 0.66 - height / 2)):
                    for points in chevron:
                        svg.polyline(points)

            i += 1


GENERATORS: Dict[Generator, GeneratorFn] = {
    Generator.OCTOGONS: geo_octogons,
    Generator.OVERLAPPING_CIRCLES: geo_overlapping_circles,
    Generator.PLUS_SIGNS: geo_plus_signs,
    Generator.XES: geo_xes,
    Generator.SINE_WAVES: geo_sine_waves,
    Generator.HEXAGONS: geo_hexagons,
    Generator.OVERLAPPING_RINGS: geo_overlapping_rings,
    Generator.PLAID: geo_plaid,
    Generator.TRIANGLES: geo_triangles,
    Generator.SQUARES: geo_squares,
    Generator.CONCENTRIC_CIRCLES: geo_concentric_circles,
    Generator.DIAMONDS: geo_diamonds,
    Generator.TESSELLATION: geo_tessellation,
    Generator.NESTED_SQUARES: geo_nested_squares,
    Generator.MOSAIC_SQUARES: geo_mosaic_squares,
    Generator.CHEVRONS: geo_chevrons,
}
