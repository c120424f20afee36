from collections import namedtuple

import numpy as np


PlotRegion = namedtuple(
    "PlotRegion", "left top right bottom x_min x_max y_min y_max")
PlotRegion.__doc__ = """
    A snapshot of the plotting area of an axes.

    Pixel bounds are expressed with the origin at the top-left corner of the
    canvas (rows grow downwards).  ``x_min`` and ``x_max`` are the data values
    at the left and right edges, ``y_min`` and ``y_max`` those at the bottom
    and top edges; an inverted axis thus has ``x_min > x_max`` (or ``y_min >
    y_max``).
"""
PlotRegion.left.__doc__ = "Pixel column of the left edge."
PlotRegion.top.__doc__ = "Pixel row of the top edge."
PlotRegion.right.__doc__ = "Pixel column of the right edge."
PlotRegion.bottom.__doc__ = "Pixel row of the bottom edge."
PlotRegion.x_min.__doc__ = "Data value at the left edge."
PlotRegion.x_max.__doc__ = "Data value at the right edge."
PlotRegion.y_min.__doc__ = "Data value at the bottom edge."
PlotRegion.y_max.__doc__ = "Data value at the top edge."
PlotRegion.x_scale = property(
    lambda self: (self.right - self.left) / (self.x_max - self.x_min),
    doc="Pixels per x data unit.")
PlotRegion.y_scale = property(
    lambda self: (self.bottom - self.top) / (self.y_max - self.y_min),
    doc="Pixels per y data unit.")


def _root_figure(ax):
    # Subfigures share the canvas (and thus the pixel space) of the root.
    return ax.figure.canvas.figure


def _from_axes(cls, ax):
    """
    Snapshot the current plotting region of *ax*.

    The data bounds are expressed in the scaled space of the axes (i.e.,
    after ``ax.transScale``), in which the pixel-to-data mapping is affine.
    """
    height = _root_figure(ax).bbox.height
    bbox = ax.bbox
    (x_min, y_min), (x_max, y_max) = (
        ax.transScale.transform(ax.viewLim.get_points()))
    return cls(bbox.x0, height - bbox.y1, bbox.x1, height - bbox.y0,
               x_min, x_max, y_min, y_max)


PlotRegion.from_axes = classmethod(_from_axes)


def _clamp(value, bound_1, bound_2):
    return min(max(value, min(bound_1, bound_2)), max(bound_1, bound_2))


def pixel_to_data(region, x, y):
    """
    Convert pixel position (*x*, *y*) to data coordinates within *region*.

    Positions outside of the region are first pulled to its nearest edge, so
    that any input maps to a point of the plotted area.  The result is
    clamped to the data bounds as well, to absorb rounding errors.
    """
    x = _clamp(x, region.left, region.right)
    y = _clamp(y, region.top, region.bottom)
    x_value = region.x_min + (x - region.left) / region.x_scale
    y_value = region.y_max - (y - region.top) / region.y_scale
    return (float(_clamp(x_value, region.x_min, region.x_max)),
            float(_clamp(y_value, region.y_min, region.y_max)))


def display_to_pixel(ax, x, y):
    """
    Convert Matplotlib display coordinates to top-left based pixels.

    Display coordinates (e.g. ``MouseEvent.x``, ``MouseEvent.y``) have their
    origin at the bottom-left corner of the canvas.
    """
    return x, _root_figure(ax).bbox.height - y


def scaled_to_data(ax, x, y):
    """Map a point from the scaled space of *ax* back to data space."""
    x, y = ax.transScale.inverted().transform((x, y))
    return float(x), float(y)


def is_degenerate(region):
    """Whether *region* has no area in pixels or no extent in data."""
    return not (np.isfinite(region).all()
                and region.right != region.left
                and region.bottom != region.top
                and region.x_max != region.x_min
                and region.y_max != region.y_min)
