"""
A small document builder on top of svgwrite.

Shapes are appended to the innermost open group (or to the drawing itself) in
call order, so the serialized markup is a pure function of the calls made.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

import svgwrite
from svgwrite.base import BaseElement

Number = Union[int, float]
Length = Union[Number, str]
Point = Tuple[Number, Number]
Styles = Dict[str, Union[Number, str]]


def transform(element: BaseElement, **operations: Sequence[Number]) -> BaseElement:
    """Apply translate/rotate/scale operations in keyword order.

    >>> transform(shape, translate=(10, 0), rotate=(45, 5, 5))

    ``rotate`` takes ``(angle, cx, cy)``; the others take ``(x, y)``.
    """
    for name, args in operations.items():
        if name == "translate":
            element.translate(*args)
        elif name == "rotate":
            angle, *center = args
            element.rotate(angle, center=tuple(center) if center else None)
        elif name == "scale":
            element.scale(*args)
        else:
            raise ValueError(f"Unknown transformation: {name!r}")
    return element


class SVG:
    """Accumulating SVG document with a mutable canvas size."""

    def __init__(self, width: Number = 100, height: Number = 100):
        self.drawing = svgwrite.Drawing(size=(width, height), debug=False)
        self.width = width
        self.height = height
        self._stack: List[BaseElement] = [self.drawing]

    def set_width(self, width: Number) -> None:
        self.width = width
        self.drawing["width"] = width

    def set_height(self, height: Number) -> None:
        self.height = height
        self.drawing["height"] = height

    def _append(self, element: BaseElement) -> BaseElement:
        self._stack[-1].add(element)
        return element

    # ---------------------------- Primitives ---------------------------------

    def rect(self, x: Length, y: Length, width: Length, height: Length,
             styles: Optional[Styles] = None) -> BaseElement:
        return self._append(self.drawing.rect(insert=(x, y), size=(width, height), **(styles or {})))

    def circle(self, cx: Number, cy: Number, r: Number, styles: Optional[Styles] = None) -> BaseElement:
        return self._append(self.drawing.circle(center=(cx, cy), r=r, **(styles or {})))

    def polyline(self, points: Sequence[Point], styles: Optional[Styles] = None) -> BaseElement:
        return self._append(self.drawing.polyline(points=list(points), **(styles or {})))

    def path(self, d: str, styles: Optional[Styles] = None) -> BaseElement:
        return self._append(self.drawing.path(d=d, **(styles or {})))

    @contextmanager
    def group(self, styles: Optional[Styles] = None, **operations: Sequence[Number]) -> Iterator[BaseElement]:
        """Open a <g>; shapes drawn inside the ``with`` block become its children."""
        g = transform(self._append(self.drawing.g(**(styles or {}))), **operations)
        self._stack.append(g)
        try:
            yield g
        finally:
            self._stack.pop()

    # ---------------------------- Output -------------------------------------

    def to_string(self) -> str:
        return self.drawing.tostring()

    def __str__(self) -> str:
        return self.to_string()
