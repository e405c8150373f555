"""
Point containment test.

Boundaries are excluded: a point lying exactly on the edge of a square or
circle is outside.

The core implementations are array-safe: a Point whose coordinates are
numpy arrays yields a boolean mask of the same shape, while scalar
coordinates yield a plain bool.
"""

import numpy as np

from shapedispatch.core.registry import generic
from shapedispatch.geom.point import Point
from shapedispatch.geom.shape import Square, Circle, Translated, UnionShape


def _result(inside):
    """Plain bool for scalar tests, boolean array otherwise."""
    if np.ndim(inside) == 0:
        return bool(inside)
    return np.asarray(inside, dtype=bool)


@generic('shape')
def point_in(point: Point, shape) -> bool:
    """
    Test if a point lies strictly inside a shape.

    :param point: Point (or (x, y) pair) to test; coordinates may be arrays
    :param shape: Shape of any variant with a registered implementation
    :return: True if the point is inside, or a boolean mask for array coordinates
    """


@point_in.register(Square)
def _point_in_square(point, shape: Square):
    x, y = Point.coerce(point)
    half = shape.width / 2
    return _result((np.abs(x) < half) & (np.abs(y) < half))


@point_in.register(Circle)
def _point_in_circle(point, shape: Circle):
    x, y = Point.coerce(point)
    return _result(np.hypot(x, y) < shape.radius)


@point_in.register(Translated)
def _point_in_translated(point, shape: Translated):
    # Move the point into the child's frame instead of moving the child
    return point_in(Point.coerce(point) - shape.translation, shape.child)


@point_in.register(UnionShape)
def _point_in_union(point, shape: UnionShape):
    point = Point.coerce(point)
    return _result(np.logical_or(point_in(point, shape.first), point_in(point, shape.second)))
