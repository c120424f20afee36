from contextlib import suppress
from functools import partial
import sys
import threading
import warnings
import weakref
from weakref import WeakKeyDictionary

from matplotlib.axes import Axes

from . import _region
from ._text import ReadoutText


def _is_foreign_event(event, ax):
    """
    Return whether *event* happened over some other, non-overlapping, axes.

    Events over the figure margins are not foreign: they get clamped to the
    plotting region.  Twinned axes share their area with *ax* and are thus
    not foreign either.
    """
    return (event.inaxes is not None
            and event.inaxes is not ax
            and not ax.bbox.contains(event.x, event.y))


class Readout:
    """
    An interactive readout of the data coordinates under the mouse pointer.

    Each mouse motion over the figure of the axes is converted to data
    coordinates of the axes, which are then passed to all registered
    observers, as ``observer(ax, x, y)``.
    """

    _keep_alive = WeakKeyDictionary()

    def __init__(self, ax, observers=(), *, enabled=True):
        """
        Construct a readout.

        Parameters
        ----------

        ax : Axes
            The axes whose data coordinates are read out.

        observers : List[Callable[[Axes, float, float], None]], default: ()
            Observers to register, in order.

        enabled : bool, default: True
            Whether mouse motion events trigger readouts.
        """
        if not isinstance(ax, Axes):
            raise TypeError(f"Expected an Axes, not {ax!r}")
        if ax.name != "rectilinear":
            warnings.warn(
                f"Readout on {ax.name!r} axes reports scaled coordinates "
                f"which may not be meaningful")
        # Be careful with GC.
        self._ax_ref = weakref.ref(ax)
        self._enabled = enabled
        self._observers = []
        self._lock = threading.RLock()
        for observer in observers:
            self.register(observer)
        # Matplotlib only keeps weak references to bound methods.
        type(self)._keep_alive.setdefault(ax, set()).add(self)
        canvas = ax.figure.canvas
        self._disconnectors = [
            partial(canvas.mpl_disconnect,
                    canvas.mpl_connect(
                        "motion_notify_event", self._on_motion_notify))]

    @property
    def ax(self):
        """The axes read out, or None if it has been garbage collected."""
        return self._ax_ref()

    @property
    def enabled(self):
        """Whether mouse motion events trigger readouts."""
        return self._enabled

    @enabled.setter
    def enabled(self, value):
        self._enabled = value

    @property
    def observers(self):
        """The tuple of registered observers, in registration order."""
        with self._lock:
            return tuple(self._observers)

    def register(self, observer):
        """
        Register *observer*, to be called as ``observer(ax, x, y)``.

        Registering an already registered observer does nothing (in
        particular, it keeps its original position in the notification
        order).  Membership is tested by equality, so that the same bound
        method obtained twice is only registered once.
        """
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)

    def unregister(self, observer):
        """Unregister *observer*; do nothing if it is not registered."""
        with self._lock:
            with suppress(ValueError):
                self._observers.remove(observer)

    def notify_all(self, x, y):
        """
        Call all observers with the readout (*x*, *y*), in registration order.

        An exception raised by an observer propagates immediately; the
        remaining observers are not called for this readout.
        """
        ax = self.ax
        with self._lock:
            # Observers may (un)register observers while being called.
            for observer in [*self._observers]:
                observer(ax, x, y)

    def read_at(self, x, y):
        """
        Read out the pixel position (*x*, *y*) and notify the observers.

        Pixel coordinates have their origin at the top-left corner of the
        canvas.  Returns the data coordinates passed to the observers.
        """
        ax = self.ax
        if ax is None:
            raise RuntimeError("The axes of this readout has been deleted")
        return self._read_region(ax, _region.PlotRegion.from_axes(ax), x, y)

    def _read_region(self, ax, region, x, y):
        with self._lock:
            x, y = _region.scaled_to_data(
                ax, *_region.pixel_to_data(region, x, y))
            self.notify_all(x, y)
        return x, y

    def remove(self):
        """
        Remove a readout.

        Disconnect it from the canvas, unregister all observers (removing the
        text of `ReadoutText` observers), and allow the readout to be garbage
        collected.
        """
        for disconnector in self._disconnectors:
            disconnector()
        self._disconnectors = []
        with self._lock:
            for observer in self._observers:
                if isinstance(observer, ReadoutText):
                    observer.remove()
            self._observers.clear()
        for s in type(self)._keep_alive.values():
            with suppress(KeyError):
                s.remove(self)

    def _on_motion_notify(self, event):
        # Mouse motion with a button pressed (dragging) is read out as well.
        ax = self.ax
        if (not self.enabled
                or ax is None
                or ax.figure is None  # Removed from its figure.
                or event.canvas is not ax.figure.canvas
                or _is_foreign_event(event, ax)):
            return
        region = _region.PlotRegion.from_axes(ax)
        if _region.is_degenerate(region):
            return
        self._read_region(
            ax, region, *_region.display_to_pixel(ax, event.x, event.y))


def readout(ax=None, observers=(), *, text=False, text_kwargs=None,
            enabled=True):
    """
    Create a `Readout` for an axes.

    Parameters
    ----------

    ax : Optional[Axes]
        The axes to read out.  Defaults to the current axes of
        :mod:`~matplotlib.pyplot`; this only works when pyplot is in use (it
        is never imported by this function).

    observers : List[Callable[[Axes, float, float], None]], default: ()
        Observers to register, in order.

    text : bool, default: False
        Whether to first register a `ReadoutText`, displaying the readout
        above the axes.

    text_kwargs : dict, optional
        Keyword arguments passed to the `ReadoutText` constructor.

    enabled : bool, default: True
        Whether mouse motion events trigger readouts.
    """
    if ax is None:
        # Do not import pyplot ourselves to avoid forcing the backend.
        plt = sys.modules.get("matplotlib.pyplot")
        if not plt or not plt.get_fignums():
            raise TypeError(
                "readout() requires an Axes when no pyplot figure exists")
        ax = plt.gca()
    if not isinstance(ax, Axes):
        raise TypeError(f"Expected an Axes, not {ax!r}")
    if text:
        observers = [
            ReadoutText(ax, **(text_kwargs if text_kwargs is not None
                               else {})),
            *observers]
    return Readout(ax, observers, enabled=enabled)
