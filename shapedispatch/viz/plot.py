from typing import Optional, Tuple

from shapedispatch.ops.extent import bounds
from shapedispatch.ops.raster import rasterize


def _import_pyplot():
    try:
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise RuntimeError("Matplotlib is not available. Please install matplotlib.") from e
    return plt


def plot_shape(shape, ax=None, resolution: int = 201, padding: float = 0.1,
               save: Optional[str] = None, **imshow_kwargs) -> Tuple[object, object]:
    """
    Render the region covered by a shape.

    :param shape: Shape to draw
    :param ax: Existing matplotlib Axes, a new figure is created if None
    :param resolution: Grid cells along each axis
    :param padding: Margin around the bounding box, as a fraction of its size
    :param save: Optional path to save the figure to
    :param imshow_kwargs: Passed through to ``Axes.imshow``
    :return: (fig, ax)
    """
    plt = _import_pyplot()

    box = bounds(shape)
    dx, dy = box.width * padding, box.height * padding
    region = (box.x_min - dx, box.x_max + dx, box.y_min - dy, box.y_max + dy)
    _, _, mask = rasterize(shape, resolution=resolution, region=region)

    if ax is None:
        fig, ax = plt.subplots(figsize=(5, 5))
    else:
        fig = ax.figure

    imshow_kwargs.setdefault('cmap', 'Greys')
    ax.imshow(mask, origin='lower', extent=region, interpolation='nearest', **imshow_kwargs)
    ax.set_aspect('equal')
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_title(type(shape).__name__)

    if save:
        fig.savefig(save, bbox_inches='tight')
    return fig, ax
