"""
Axis-aligned bounding boxes.
"""

from typing import NamedTuple

from shapedispatch.core.registry import generic
from shapedispatch.geom.point import Point
from shapedispatch.geom.shape import Square, Circle, Translated, UnionShape


class Bounds(NamedTuple):
    """Bounding box as (x_min, x_max, y_min, y_max)."""
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def shifted(self, offset: Point) -> 'Bounds':
        return Bounds(self.x_min + offset.x, self.x_max + offset.x,
                      self.y_min + offset.y, self.y_max + offset.y)

    def envelope(self, other: 'Bounds') -> 'Bounds':
        """Smallest box containing both boxes."""
        return Bounds(min(self.x_min, other.x_min), max(self.x_max, other.x_max),
                      min(self.y_min, other.y_min), max(self.y_max, other.y_max))


@generic('shape')
def bounds(shape) -> Bounds:
    """Get bounding box of a shape."""


@bounds.register(Square)
def _bounds_square(shape: Square) -> Bounds:
    half = shape.width / 2
    return Bounds(-half, half, -half, half)


@bounds.register(Circle)
def _bounds_circle(shape: Circle) -> Bounds:
    r = shape.radius
    return Bounds(-r, r, -r, r)


@bounds.register(Translated)
def _bounds_translated(shape: Translated) -> Bounds:
    return bounds(shape.child).shifted(shape.translation)


@bounds.register(UnionShape)
def _bounds_union(shape: UnionShape) -> Bounds:
    return bounds(shape.first).envelope(bounds(shape.second))
