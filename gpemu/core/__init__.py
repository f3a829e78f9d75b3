# gpemu/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Core components of the gpemu package.

This subpackage contains the regression engine, the emulator that keeps
it fitted to a stream of simulation results, and hyperparameter
selection.

Public API
----------
Hyperparameters : class
    Band scale, length scale and noise.
GPRegression : class
    Zero-mean GP regression with a pluggable kernel.
Prediction : class
    Mean, standard deviation and band at query points.
Emulator : class
    GP regression driven by observations, with tangent queries.
Tangent : class
    Local linear approximation of the mean curve.
EmulatorState : enum
    EMPTY or FITTED.
EmulatorRegistry : class
    Emulators of a simulation session.
negative_log_likelihood, select_hyperparameters : functions
    Maximum-likelihood fitting of length and noise.
"""

from .hyperparameters import Hyperparameters
from .regression import GPRegression, Prediction
from .likelihood import negative_log_likelihood
from .selection import select_hyperparameters
from .emulator import Emulator, EmulatorState, Tangent
from .registry import EmulatorRegistry

__all__ = [
    "Hyperparameters",
    "GPRegression",
    "Prediction",
    "negative_log_likelihood",
    "select_hyperparameters",
    "Emulator",
    "EmulatorState",
    "Tangent",
    "EmulatorRegistry",
]
