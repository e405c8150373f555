"""
Shrinking shapes by a factor.

The factor check is a ``before`` method on ``object``, so it guards every
variant, including ones added later, before any variant-specific code runs.
"""

import math

from shapedispatch.core.registry import generic
from shapedispatch.errors import ConstructionError
from shapedispatch.geom.shape import Square, Circle, Translated, UnionShape, require_positive


def _divide(argument: str, value: float, factor: float) -> float:
    """value / factor, rejecting factors that overflow or underflow the result."""
    result = value / factor
    if not math.isfinite(result) or result <= 0:
        raise ConstructionError(
            'factor', factor,
            reason=f"takes {argument}={value!r} out of the representable range",
        )
    return result


@generic('shape')
def shrink(shape, factor: float):
    """
    Return a new shape whose linear dimensions are divided by ``factor``.

    Translation offsets are left unchanged; only intrinsic sizes shrink.

    :param shape: Shape to shrink (never modified)
    :param factor: Strictly positive scale divisor
    :raises ConstructionError: If factor is not strictly positive, or is so
        small or large that a new dimension would be infinite or zero
    """


@shrink.before(object)
def _check_factor(shape, factor):
    require_positive('factor', factor)


@shrink.register(Square)
def _shrink_square(shape: Square, factor: float) -> Square:
    return Square(_divide('width', shape.width, factor))


@shrink.register(Circle)
def _shrink_circle(shape: Circle, factor: float) -> Circle:
    return Circle(_divide('radius', shape.radius, factor))


@shrink.register(Translated)
def _shrink_translated(shape: Translated, factor: float) -> Translated:
    return Translated(shrink(shape.child, factor), shape.translation)


@shrink.register(UnionShape)
def _shrink_union(shape: UnionShape, factor: float) -> UnionShape:
    return UnionShape(shrink(shape.first, factor), shrink(shape.second, factor))
