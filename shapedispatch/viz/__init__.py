from .plot import plot_shape

__all__ = ['plot_shape']
