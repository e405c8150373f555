import numpy as np
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """2D point (or translation vector) with value semantics."""
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking."""
        yield self.x
        yield self.y

    def __add__(self, other):
        """Add two points."""
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        """Subtract two points."""
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        """Scale point by scalar."""
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self):
        return Point(-self.x, -self.y)

    def distance_to(self, other) -> float:
        """Calculate distance to another point."""
        return float(np.hypot(self.x - other.x, self.y - other.y))

    @classmethod
    def coerce(cls, value) -> 'Point':
        """Return value as a Point, accepting any (x, y) pair."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)


ORIGIN = Point(0.0, 0.0)
