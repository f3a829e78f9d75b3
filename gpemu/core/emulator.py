# gpemu/core/emulator.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Emulator: a GP regression kept up to date with a stream of simulation
results, plus local sensitivity (tangent) queries.

The emulator talks to an optional chart object, which only needs the
three methods below; `gpemu.plot.Chart` is a matplotlib
implementation.

    chart.update_series(raw_points, mean_curve, upper_band, lower_band)
        Each argument is a list of (x, y) pairs. All four are empty
        when there are no observations.
    chart.update_tangent(tangent)
        A `Tangent`, or None when there is nothing to show.
    chart.update_input_marker(value)
        Position of the current input marker on the x axis.
"""
import math
from enum import Enum
from typing import NamedTuple

import gpemu.num as gnp
from gpemu.config import get_logger, get_grid_size
from gpemu.kernel import rbf_kernel
from .hyperparameters import Hyperparameters
from .regression import GPRegression, Prediction
from .selection import select_hyperparameters

_logger = get_logger()


class EmulatorState(Enum):
    EMPTY = "empty"
    FITTED = "fitted"


class Tangent(NamedTuple):
    """Local line y = gradient * x + intercept."""

    gradient: float
    intercept: float

    def __call__(self, x):
        return self.gradient * x + self.intercept


def _round_half_up(v):
    return int(math.floor(v + 0.5))


class Emulator:
    """GP emulator of one simulation output as a function of one input.

    Parameters
    ----------
    chart : object, optional
        Rendering collaborator (see module docstring).
    input, output : str, optional
        Names of the simulation input and output channels.
    x, y : sequence of float, optional
        Initial observations. Call `refresh` to fit them.
    min_x, max_x : float
        Range of the query grid (defaults 0 and 100).
    hyperparameters : Hyperparameters, optional
        Defaults to ``Hyperparameters.defaults_for_range(min_x, max_x)``.
    kernel : callable, optional
        Covariance function (default `rbf_kernel`).
    show_sensitivity : bool, default=True
        Compute tangents at the input marker and on pointer queries.
    input_marker : float, optional
        Initial position of the input marker.
    input_updated : callable, optional
        Called with the selected input value on pointer selection.
    begin_at_zero : bool, default=False
        Display hint for the chart's y axis.
    grid_size : int, optional
        Number of query points (default from `gpemu.config`), >= 2.
    """

    def __init__(
        self,
        chart=None,
        input=None,
        output=None,
        x=None,
        y=None,
        min_x=0.0,
        max_x=100.0,
        hyperparameters=None,
        kernel=rbf_kernel,
        show_sensitivity=True,
        input_marker=None,
        input_updated=None,
        begin_at_zero=False,
        grid_size=None,
    ):
        if not max_x > min_x:
            raise ValueError(f"max_x ({max_x}) must be greater than min_x ({min_x})")
        self.grid_size = get_grid_size() if grid_size is None else int(grid_size)
        if self.grid_size < 2:
            raise ValueError("grid_size must be >= 2")

        self.chart = chart
        self.input = input
        self.output = output
        self.min_x = float(min_x)
        self.max_x = float(max_x)
        self.x = [] if x is None else [float(v) for v in x]
        self.y = [] if y is None else [float(v) for v in y]
        self.show_sensitivity = show_sensitivity
        self.input_marker = input_marker
        self.input_updated = input_updated
        self.begin_at_zero = begin_at_zero

        if hyperparameters is None:
            hyperparameters = Hyperparameters.defaults_for_range(min_x, max_x)
        self.regression = GPRegression(kernel, hyperparameters)

        self.x_axis = []
        self.mean = []
        self.raw_points = []
        self.mean_curve = []
        self.upper_band = []
        self.lower_band = []
        self.tangent = None
        self._tangent_index = None
        if input_marker is not None:
            self._tangent_index = self.index_for_value(input_marker)

    def __repr__(self):
        return (
            f"<gpemu.core.Emulator {self.input!r} -> {self.output!r}, "
            f"{len(self.x)} observations>"
        )

    @property
    def hyperparameters(self):
        return self.regression.hyperparameters

    @hyperparameters.setter
    def hyperparameters(self, value):
        self.regression.hyperparameters = value

    @property
    def state(self):
        if len(self.x) == 0 or len(self.y) == 0:
            return EmulatorState.EMPTY
        return EmulatorState.FITTED

    @property
    def is_fitted(self):
        """True when observations exist and prediction series are present."""
        return self.state is EmulatorState.FITTED and len(self.x_axis) > 0

    # ------------------------------------------------------------------
    # Observations
    # ------------------------------------------------------------------
    def add_observation(self, x, y):
        """Append one (x, y) observation and refit."""
        self.x.append(float(x))
        self.y.append(float(y))
        _logger.debug("%r: observation (%g, %g)", self, x, y)
        return self.refresh()

    def clear(self):
        """Remove all observations; the series become empty."""
        self.x = []
        self.y = []
        _logger.debug("%r: cleared", self)
        return self.refresh()

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------
    def refresh(self):
        """Refit on all observations and push the series to the chart.

        Returns
        -------
        Prediction
            Prediction over the query grid, empty when there are no
            observations.
        """
        if self.state is EmulatorState.EMPTY:
            self.x_axis = []
            self.mean = []
            self.raw_points = []
            self.mean_curve = []
            self.upper_band = []
            self.lower_band = []
            self.tangent = None
            self._notify_series()
            self._notify_tangent()
            return Prediction.empty()

        self.regression.set_data(self.x, self.y)
        x_axis = gnp.linspace(self.min_x, self.max_x, self.grid_size).tolist()
        prediction = self.regression.predict(x_axis)
        _logger.debug("%r: refreshed on %d grid points", self, len(x_axis))

        self.x_axis = x_axis
        self.mean = prediction.mean
        self.raw_points = list(zip(self.x, self.y))
        self.mean_curve = list(zip(x_axis, prediction.mean))
        self.upper_band = list(zip(x_axis, prediction.upper))
        self.lower_band = list(zip(x_axis, prediction.lower))
        self._notify_series()

        # last queried grid index, from the marker or the pointer
        if self.show_sensitivity and self._tangent_index is not None:
            self.tangent = self.get_tangent_at_index(self._tangent_index)
        else:
            self.tangent = None
        self._notify_tangent()

        return prediction

    # ------------------------------------------------------------------
    # Sensitivity
    # ------------------------------------------------------------------
    def get_tangent_at_index(self, index):
        """Tangent to the mean curve at grid point ``index``.

        The index is clamped to the grid. The slope is a central
        difference over the neighbouring grid points (one-sided at
        either end of the grid); the line passes through the displayed
        mean curve at ``index``.

        Returns
        -------
        Tangent or None
            None when the emulator holds no prediction.
        """
        n = len(self.x_axis)
        if n == 0 or self.state is EmulatorState.EMPTY:
            return None
        index = min(max(int(index), 0), n - 1)
        a = index - 1 if index > 0 else 0
        b = index + 1 if index < n - 1 else index

        gradient = (self.mean[b] - self.mean[a]) / (self.x_axis[b] - self.x_axis[a])
        intercept = self.mean_curve[index][1] - gradient * self.x_axis[index]
        _logger.debug("%r: tangent at index %d: slope %g", self, index, gradient)
        return Tangent(gradient, intercept)

    def index_for_value(self, value):
        """Nearest query-grid index of an input value, clamped to the grid.

        Raises
        ------
        ValueError
            If ``value`` is not a finite number.
        """
        if not math.isfinite(value):
            raise ValueError(f"input value must be finite, got {value!r}")
        n = len(self.x_axis) or self.grid_size
        index = _round_half_up(n * (value - self.min_x) / (self.max_x - self.min_x))
        return min(max(index, 0), n - 1)

    def update_input_marker(self, value):
        """Move the input marker and recompute the tangent there.

        Returns
        -------
        Tangent or None

        Raises
        ------
        ValueError
            If ``value`` is not a finite number.
        """
        index = self.index_for_value(value)
        self.input_marker = value
        self._tangent_index = index
        if self.show_sensitivity and self.is_fitted:
            self.tangent = self.get_tangent_at_index(index)
        if self.chart is not None:
            self.chart.update_input_marker(value)
        self._notify_tangent()
        return self.tangent

    def on_pointer(self, position):
        """Handle a pointer selection at a normalised x position in [0, 1].

        Recomputes the tangent under the pointer (when sensitivity is
        shown) and passes the selected input value to `input_updated`.
        Later refreshes recompute the tangent at the same grid point.

        Returns
        -------
        float or None
            The selected input value, or None for positions outside
            [0, 1].
        """
        if position < 0.0 or position > 1.0:
            return None
        new_val = _round_half_up(position * (self.max_x - self.min_x)) + self.min_x

        self._tangent_index = math.floor((len(self.x_axis) or self.grid_size) * position)
        if self.show_sensitivity and self.is_fitted:
            self.tangent = self.get_tangent_at_index(self._tangent_index)
            self._notify_tangent()

        if self.input_updated is not None:
            self.input_updated(new_val)
        return new_val

    # ------------------------------------------------------------------
    # Hyperparameters
    # ------------------------------------------------------------------
    def select_hyperparameters(self, bounds_delta=10.0, method_options=None):
        """Fit length and noise to the observations by maximum likelihood.

        Updates `hyperparameters` in place; call `refresh` afterwards.
        See `gpemu.core.selection.select_hyperparameters`.
        """
        selected = select_hyperparameters(
            self.x,
            self.y,
            self.hyperparameters,
            self.regression.kernel,
            bounds_delta=bounds_delta,
            method_options=method_options,
        )
        self.hyperparameters.length = selected.length
        self.hyperparameters.noise = selected.noise
        return self.hyperparameters

    # ------------------------------------------------------------------
    def _notify_series(self):
        if self.chart is not None:
            self.chart.update_series(
                self.raw_points, self.mean_curve, self.upper_band, self.lower_band
            )

    def _notify_tangent(self):
        if self.chart is not None:
            self.chart.update_tangent(self.tangent)
