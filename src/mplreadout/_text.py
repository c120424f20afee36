from contextlib import suppress
import copy
import warnings

from matplotlib import cbook
from matplotlib.text import Text


_default_text_kwargs = dict(
    x=1,
    y=1.01,
    horizontalalignment="right",
    verticalalignment="bottom",
    family="monospace",
)


def format_readout(ax, x, y):
    """
    Format the readout (*x*, *y*) of *ax* as ``"x=..., y=..."``.

    The values are formatted as the axes formats them in the toolbar.
    """
    # format_xdata/format_ydata do not actually always return strs, hence the
    # explicit cast.
    return (f"x={str(ax.format_xdata(x)).rstrip()}, "
            f"y={str(ax.format_ydata(y)).rstrip()}")


class ReadoutText:
    """
    A readout observer displaying the latest readout above an axes.

    The text is placed at the top-right corner of the axes by default;
    keyword arguments are passed to `matplotlib.axes.Axes.text` (``x`` and
    ``y`` are in axes coordinates).
    """

    def __init__(self, ax, **kwargs):
        kwargs = {**copy.deepcopy(_default_text_kwargs),
                  **cbook.normalize_kwargs(kwargs, Text)}
        # Axes3D.text takes a z argument; text2D is the plain Axes.text.
        self.text = getattr(ax, "text2D", ax.text)(
            kwargs.pop("x"), kwargs.pop("y"), "",
            transform=ax.transAxes, **kwargs)

    def __call__(self, ax, x, y):
        if ax.name in ["polar", "3d"]:
            warnings.warn(f"Readout text not supported for {ax.name!r} axes")
            return
        self.text.set_text(format_readout(ax, x, y))
        ax.figure.canvas.draw_idle()

    def remove(self):
        """Remove the text artist from its axes."""
        # ValueError is raised if the artist has already been removed.
        with suppress(ValueError):
            self.text.remove()
