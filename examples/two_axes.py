"""
Twinned axes
============

Each axes gets its own readout; both report when the pointer moves over the
shared area, each in its own data coordinates.
"""

import matplotlib.pyplot as plt
import numpy as np
import mplreadout

t = np.linspace(0, 10, 101)

fig, ax1 = plt.subplots()
ax1.plot(t, np.sin(t), color="C0")
ax2 = ax1.twinx()
ax2.plot(t, 100 * np.cos(t), color="C1")

mplreadout.readout(ax1, text=True, text_kwargs={"x": 0, "ha": "left"})
mplreadout.readout(ax2, text=True)

plt.show()
