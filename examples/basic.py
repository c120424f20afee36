"""
mplreadout's core functionality
===============================

... is to report the data coordinates under the mouse pointer.
"""

import matplotlib.pyplot as plt
import numpy as np
import mplreadout

data = np.outer(range(10), range(1, 5))

fig, ax = plt.subplots()
ax.plot(data)
ax.set_title("Move the mouse over the axes.")

mplreadout.readout(ax, text=True)

plt.show()
