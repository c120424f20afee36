import importlib.metadata as _im
import json
import os

try:
    __version__ = _im.version("mplreadout")
except ImportError:
    __version__ = "0+unknown"

from ._readout import Readout, readout
from ._region import PlotRegion, display_to_pixel, pixel_to_data
from ._text import ReadoutText, format_readout


__all__ = ["Readout", "readout", "PlotRegion", "display_to_pixel",
           "pixel_to_data", "ReadoutText", "format_readout", "install"]


def install(figure):
    """
    A hook function that can be registered into ``rcParams["figure.hooks"]``.

    This hook arranges for a readout to be attached to each axes of a figure
    the first time the figure is drawn, if the :envvar:`MPLREADOUT` environment
    variable is not empty (at first-draw time).  That variable must contain a
    JSON-encoded dict of options passed to `.readout`, e.g. ``{"text": true}``.
    """

    def connect(event):
        figure.canvas.mpl_disconnect(cid)
        envopt = os.environ.get("MPLREADOUT")
        if not envopt:
            return
        options = json.loads(envopt)
        if not isinstance(options, dict):
            raise ValueError(
                f"MPLREADOUT must hold a JSON object, not {envopt!r}")
        unknown = {*options} - {"text", "text_kwargs", "enabled"}
        if unknown:
            raise ValueError("Unknown MPLREADOUT option(s): {}".format(
                ", ".join(sorted(unknown))))
        for ax in figure.axes:
            readout(ax, **options)

    cid = figure.canvas.mpl_connect("draw_event", connect)
