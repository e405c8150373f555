"""
Shape definitions.

Shapes are immutable values; they carry data only. Behaviour such as
containment or shrinking lives in generic functions (see
``shapedispatch.ops``), so new variants and new operations can both be
added without touching this module.

New variants subclass :class:`Shape` and register implementations for the
operations they should support.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Tuple, Union

from shapedispatch.errors import ConstructionError
from shapedispatch.geom.point import Point


def require_positive(argument: str, value) -> None:
    """Raise ConstructionError unless value is a strictly positive finite real."""
    if not is_finite_real(value) or value <= 0:
        raise ConstructionError(argument, value)


def is_finite_real(value) -> bool:
    return not isinstance(value, bool) and isinstance(value, numbers.Real) and math.isfinite(value)


def require_shape(argument: str, value) -> None:
    if not isinstance(value, Shape):
        raise ConstructionError(argument, value, reason='must be a Shape')


class Shape:
    """
    Base class for all shape variants.

    Subclasses are frozen dataclasses; composite variants hold references to
    their children, which may be shared freely between parents.
    """

    __slots__ = ()


@dataclass(frozen=True)
class Square(Shape):
    """Axis-aligned square of side ``width`` centred at the origin."""
    width: float

    def __post_init__(self):
        require_positive('width', self.width)


@dataclass(frozen=True)
class Circle(Shape):
    """Circle of ``radius`` centred at the origin."""
    radius: float

    def __post_init__(self):
        require_positive('radius', self.radius)


@dataclass(frozen=True)
class Translated(Shape):
    """
    A child shape moved by a translation offset.

    :param child: Shape being translated
    :param translation: Offset as a Point or an (x, y) pair
    """
    child: Shape
    translation: Union[Point, Tuple[float, float]]

    def __post_init__(self):
        require_shape('child', self.child)
        try:
            translation = Point.coerce(self.translation)
        except (TypeError, ValueError):
            raise ConstructionError('translation', self.translation, reason='must be a Point or an (x, y) pair') from None
        if not all(is_finite_real(c) for c in translation):
            raise ConstructionError('translation', self.translation, reason='must have finite real coordinates')
        # frozen dataclass, so bypass __setattr__
        object.__setattr__(self, 'translation', translation)


@dataclass(frozen=True)
class UnionShape(Shape):
    """Set union of the regions covered by two shapes (logical OR)."""
    first: Shape
    second: Shape

    def __post_init__(self):
        require_shape('first', self.first)
        require_shape('second', self.second)
