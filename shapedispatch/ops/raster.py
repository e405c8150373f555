"""
Sampling shapes on regular grids.

These are plain functions built on the ``point_in`` and ``bounds`` generic
functions, so they work for any variant that registers both.
"""

from typing import Optional, Tuple

import numpy as np

from shapedispatch.errors import ConstructionError
from shapedispatch.geom.point import Point
from shapedispatch.ops.extent import Bounds, bounds
from shapedispatch.ops.contains import point_in


def _cell_centers(lo: float, hi: float, n: int) -> np.ndarray:
    step = (hi - lo) / n
    return lo + (np.arange(n) + 0.5) * step


def rasterize(shape, resolution: int = 101,
              region: Optional[Tuple[float, float, float, float]] = None) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Sample a shape at the centres of a ``resolution x resolution`` grid.

    :param shape: Shape to sample
    :param resolution: Number of cells along each axis
    :param region: (x_min, x_max, y_min, y_max) to sample, defaults to the shape's bounds
    :return: (X, Y, mask) arrays of shape (resolution, resolution); mask[i, j]
        is True where (X[i, j], Y[i, j]) lies inside the shape
    """
    if isinstance(resolution, bool) or not isinstance(resolution, (int, np.integer)) or resolution < 1:
        raise ConstructionError('resolution', resolution, reason='must be a positive integer')

    box = Bounds(*region) if region is not None else bounds(shape)
    if box.width <= 0 or box.height <= 0:
        raise ConstructionError('region', tuple(box), reason='must have positive width and height')

    xs = _cell_centers(box.x_min, box.x_max, resolution)
    ys = _cell_centers(box.y_min, box.y_max, resolution)
    X, Y = np.meshgrid(xs, ys)

    return X, Y, _sample(shape, X, Y)


def _sample(shape, X: np.ndarray, Y: np.ndarray) -> np.ndarray:
    """Evaluate point_in on the whole grid, falling back to one call per cell."""
    try:
        inside = point_in(Point(X, Y), shape)
    except (TypeError, ValueError):
        # implementation only handles scalar coordinates
        inside = None
    if inside is not None and np.shape(inside) == X.shape:
        return np.asarray(inside, dtype=bool)

    return np.fromiter(
        (point_in(Point(float(x), float(y)), shape) for x, y in zip(X.ravel(), Y.ravel())),
        dtype=bool, count=X.size,
    ).reshape(X.shape)


def estimate_area(shape, resolution: int = 401) -> float:
    """
    Estimate the area covered by a shape from a grid sample of its bounding box.

    Unions are measured without double counting overlaps.
    """
    box = bounds(shape)
    _, _, mask = rasterize(shape, resolution=resolution, region=tuple(box))
    return float(mask.mean() * box.width * box.height)
