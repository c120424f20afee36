"""
Printing readouts
=================

Any callable taking ``(ax, x, y)`` can observe a readout; here, the frequency
and power under the pointer are printed.  Positions over the figure margins
are pulled to the edges of the axes.
"""

import matplotlib.pyplot as plt
import numpy as np
import mplreadout
np.random.seed(42)

freqs = np.linspace(1420, 1421, 512)
power = np.random.exponential(size=freqs.size)
power[200] = 20

fig, ax = plt.subplots()
ax.plot(freqs, power)
ax.set(xlabel="Frequency (MHz)", ylabel="Power", yscale="log")


def print_readout(ax, x, y):
    print(f"{x:.6f} MHz, power {y:.3g}")


mplreadout.readout(ax, [print_readout])

plt.show()
