"""
Geometric value types: points and the core shape variants.
"""

from .point import Point, ORIGIN
from .shape import Shape, Square, Circle, Translated, UnionShape, require_positive, require_shape

__all__ = [
    'Point', 'ORIGIN',
    'Shape', 'Square', 'Circle', 'Translated', 'UnionShape',
    'require_positive', 'require_shape',
]
