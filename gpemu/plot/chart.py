## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import sys
import numpy as np
import matplotlib.pyplot as plt
from matplotlib import interactive


class Chart:
    """Matplotlib chart for one emulator.

    Implements the chart protocol of `gpemu.core.Emulator`
    (``update_series``, ``update_tangent``, ``update_input_marker``)
    and redraws its axes after every update.

    Attributes
    ----------
    raw_points, mean_curve, upper_band, lower_band : list of (x, y)
        Last series received.
    tangent : Tangent or None
    input_marker : float or None
    """

    def __init__(
        self,
        xlabel="",
        ylabel="",
        title=None,
        begin_at_zero=False,
        isinteractive=True,
        boxoff=True,
        **kargs
    ):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = False
            if sys.flags.interactive:
                self.interpreter = True

        if isinteractive & self.interpreter:
            interactive(True)

        self.xlabel = xlabel
        self.ylabel = ylabel
        self.title = title
        self.begin_at_zero = begin_at_zero
        self.boxoff = boxoff

        self.fig = plt.figure(**kargs)
        self.ax = self.fig.add_subplot(1, 1, 1)

        self.raw_points = []
        self.mean_curve = []
        self.upper_band = []
        self.lower_band = []
        self.tangent = None
        self.input_marker = None

        self.redraw()

    # Chart protocol ---------------------------------------------------
    def update_series(self, raw_points, mean_curve, upper_band, lower_band):
        self.raw_points = list(raw_points)
        self.mean_curve = list(mean_curve)
        self.upper_band = list(upper_band)
        self.lower_band = list(lower_band)
        self.redraw()

    def update_tangent(self, tangent):
        self.tangent = tangent
        self.redraw()

    def update_input_marker(self, value):
        self.input_marker = value
        self.redraw()

    # ------------------------------------------------------------------
    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def redraw(self):
        ax = self.ax
        ax.clear()
        if self.boxoff:
            self.set_boxoff()

        if self.upper_band:
            x = np.array([p[0] for p in self.upper_band])
            upper = np.array([p[1] for p in self.upper_band])
            lower = np.array([p[1] for p in self.lower_band])
            ax.fill(
                np.hstack((x, x[::-1])),
                np.hstack((lower, upper[::-1])),
                color="#BFBFBF",
                alpha=0.8,
                linewidth=0.5,
                label="band",
            )

        if self.mean_curve:
            x, mean = zip(*self.mean_curve)
            ax.plot(x, mean, "#F2404C", linewidth=2.0, label="mean")

            if self.tangent is not None:
                xs = np.array([x[0], x[-1]])
                ax.plot(xs, self.tangent(xs), "k", linewidth=1.0, label="tangent")

        if self.raw_points:
            x, y = zip(*self.raw_points)
            ax.plot(x, y, "rs", markerfacecolor="none", markersize=6, label="data")

        if self.input_marker is not None:
            ax.axvline(self.input_marker, color="k", linestyle=(0, (5, 5)), linewidth=1)

        ax.set_xlabel(self.xlabel)
        ax.set_ylabel(self.ylabel)
        if self.title is not None:
            ax.set_title(self.title)
        if self.begin_at_zero:
            ax.set_ylim(bottom=0.0)
        self.fig.canvas.draw_idle()

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def show(self, grid=None, legend=None):
        if grid:
            self.ax.grid(True, "major", linestyle=(0, (1, 5)), linewidth=0.5)
        if legend:
            self.legend()
        plt.show()

    def close(self):
        plt.close(self.fig)
