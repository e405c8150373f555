"""
Operations on shapes.

Importing this package registers the implementations for the core variants.
"""

from .contains import point_in
from .scale import shrink
from .extent import Bounds, bounds
from .raster import rasterize, estimate_area

__all__ = ['point_in', 'shrink', 'Bounds', 'bounds', 'rasterize', 'estimate_area']
