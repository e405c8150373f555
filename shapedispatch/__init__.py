"""
shapedispatch - extensible shape operations via multiple dispatch.

Shapes are immutable values; operations are generic functions whose
implementations are registered per (operation, variant). Either axis can be
extended from outside this package: add a Shape subclass and register it
with the existing operations, or define a new operation and register it for
the existing shapes.
"""

__version__ = '0.1.0'

from shapedispatch.errors import (
    ShapeDispatchError, ConstructionError, DispatchError, NoApplicableImplementation,
    AmbiguousDispatch, RegistrationError, UnknownOperation,
)
from shapedispatch.geom import Point, ORIGIN, Shape, Square, Circle, Translated, UnionShape
from shapedispatch.core import (
    GenericFunction, OperationRegistry, registry, generic, register, invoke, get_operation,
)
from shapedispatch.ops import point_in, shrink, Bounds, bounds, rasterize, estimate_area
from shapedispatch.viz import plot_shape

__all__ = [
    "__version__",
    # errors
    "ShapeDispatchError",
    "ConstructionError",
    "DispatchError",
    "NoApplicableImplementation",
    "AmbiguousDispatch",
    "RegistrationError",
    "UnknownOperation",
    # geometry
    "Point",
    "ORIGIN",
    "Shape",
    "Square",
    "Circle",
    "Translated",
    "UnionShape",
    # dispatch
    "GenericFunction",
    "OperationRegistry",
    "registry",
    "generic",
    "register",
    "invoke",
    "get_operation",
    # operations
    "point_in",
    "shrink",
    "Bounds",
    "bounds",
    "rasterize",
    "estimate_area",
    # visualization
    "plot_shape",
]
