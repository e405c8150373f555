import math
from dataclasses import dataclass, field

import numpy as np
import pytest
from numpy.testing import assert_allclose

from shapedispatch import (
    Bounds, Circle, ConstructionError, Point, Shape, Square, Translated, UnionShape,
    bounds, estimate_area, point_in, rasterize,
)


class TestBounds:

    def test_primitives(self):
        assert bounds(Square(2)) == Bounds(-1, 1, -1, 1)
        assert bounds(Circle(3)) == Bounds(-3, 3, -3, 3)

    def test_translated(self):
        assert bounds(Translated(Circle(1), (2, -1))) == Bounds(1, 3, -2, 0)

    def test_union_envelope(self):
        shape = UnionShape(Square(2), Translated(Circle(1), Point(4, 0)))
        box = bounds(shape)
        assert box == Bounds(-1, 5, -1, 1)
        assert box.width == 6 and box.height == 2

    def test_bounds_is_a_tuple(self):
        x_min, x_max, y_min, y_max = bounds(Square(4))
        assert (x_min, x_max, y_min, y_max) == (-2, 2, -2, 2)


class TestRasterize:

    def test_grid_shapes(self):
        X, Y, mask = rasterize(Circle(1), resolution=21)
        assert X.shape == Y.shape == mask.shape == (21, 21)
        assert mask.dtype == bool

    def test_samples_cell_centres(self):
        X, Y, _ = rasterize(Square(2), resolution=4)
        assert_allclose(X[0], [-0.75, -0.25, 0.25, 0.75])
        assert_allclose(Y[:, 0], [-0.75, -0.25, 0.25, 0.75])

    def test_mask_matches_point_in(self):
        shape = Translated(Circle(1), (0.5, 0))
        _, _, mask = rasterize(shape, resolution=11, region=(-1, 2, -1, 1))
        # centre row, right of the circle
        assert mask[5, 5]
        assert not mask[0, 0]

    def test_square_fills_its_bounds(self):
        _, _, mask = rasterize(Square(3), resolution=15)
        assert mask.all()

    @pytest.mark.parametrize("resolution", [0, -3, 2.5, True])
    def test_invalid_resolution(self, resolution):
        with pytest.raises(ConstructionError):
            rasterize(Square(1), resolution=resolution)

    def test_degenerate_region(self):
        with pytest.raises(ConstructionError):
            rasterize(Square(1), region=(0, 0, -1, 1))


class TestEstimateArea:

    def test_circle(self):
        assert estimate_area(Circle(1), resolution=301) == pytest.approx(math.pi, rel=1e-2)

    def test_square(self):
        assert estimate_area(Square(3)) == pytest.approx(9.0)

    def test_union_counts_overlap_once(self):
        # circle lies entirely inside the square
        shape = UnionShape(Square(width=2), Circle(radius=1))
        assert estimate_area(shape) == pytest.approx(4.0)

    def test_disjoint_union(self):
        shape = UnionShape(Square(1), Translated(Square(1), (3, 0)))
        assert estimate_area(shape, resolution=400) == pytest.approx(2.0, rel=2e-2)

    def test_translation_preserves_area(self):
        area = estimate_area(Circle(2), resolution=201)
        moved = estimate_area(Translated(Circle(2), (10, -3)), resolution=201)
        assert moved == pytest.approx(area, rel=1e-3)


@dataclass(frozen=True)
class CountingSquare(Shape):
    """Array-safe variant that records how often point_in runs."""
    width: float
    calls: list = field(default_factory=list, compare=False, hash=False)


@dataclass(frozen=True)
class ScalarDisc(Shape):
    """Variant whose point_in only works on scalar coordinates."""
    radius: float


@point_in.register(CountingSquare)
def _point_in_counting_square(point, shape):
    shape.calls.append(point)
    half = shape.width / 2
    return (np.abs(point.x) < half) & (np.abs(point.y) < half)


@point_in.register(ScalarDisc)
def _point_in_scalar_disc(point, shape):
    return math.hypot(point.x, point.y) < shape.radius


class TestSamplingPaths:

    def test_array_safe_variant_sampled_in_one_call(self):
        shape = CountingSquare(1)
        _, _, mask = rasterize(shape, resolution=40, region=(-1, 1, -1, 1))
        assert len(shape.calls) == 1
        assert mask.sum() == 20 * 20

    def test_core_composite_matches_per_point(self):
        shape = UnionShape(Square(2), Translated(Circle(1), (2, 0)))
        X, Y, mask = rasterize(shape, resolution=31)
        expected = [[point_in(Point(float(x), float(y)), shape) for x, y in zip(xr, yr)] for xr, yr in zip(X, Y)]
        assert mask.tolist() == expected

    def test_scalar_only_variant_falls_back_to_per_point(self):
        _, _, mask = rasterize(ScalarDisc(1), resolution=21, region=(-1, 1, -1, 1))
        assert mask.dtype == bool
        assert mask[10, 10] and not mask[0, 0]
