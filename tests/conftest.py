from pathlib import Path

import matplotlib as mpl
from matplotlib import pyplot as plt
from mplreadout import PlotRegion
import pytest


def pytest_make_parametrize_id(config, val):
    if isinstance(val, PlotRegion):
        return "{}x{}px".format(val.right - val.left, val.bottom - val.top)
    if isinstance(val, Path):
        return val.stem


@pytest.fixture
def fig():
    fig = plt.figure(1)
    # Let observer errors propagate out of the canvas callbacks.
    fig.canvas.callbacks.exception_handler = None
    return fig


@pytest.fixture
def ax(fig):
    ax = fig.add_subplot(111)
    ax.set(xlim=(0, 1), ylim=(0, 1))
    return ax


@pytest.fixture(autouse=True)
def close_figures():
    with mpl.rc_context({"axes.unicode_minus": False}):
        try:
            yield
        finally:
            plt.close("all")
