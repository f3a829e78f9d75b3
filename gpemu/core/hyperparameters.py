# gpemu/core/hyperparameters.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Hyperparameters of the regression engine.
"""

DEFAULT_VARIANCE = 100.0
DEFAULT_NOISE = 0.005
LENGTH_RANGE_FACTOR = 5.0


class Hyperparameters:
    """Mutable container for the three regression hyperparameters.

    Attributes
    ----------
    variance : float
        Display scale of the confidence band (the band half-width is
        the posterior standard deviation times `variance`). Not fitted.
    length : float
        Kernel length scale, > 0.
    noise : float
        Observation noise variance added to the kernel diagonal, > 0.

    Changing an attribute does not update any emulator; call its
    ``refresh()`` afterwards.
    """

    def __init__(self, variance=DEFAULT_VARIANCE, length=1.0, noise=DEFAULT_NOISE):
        self.variance = float(variance)
        self.length = float(length)
        self.noise = float(noise)

    @classmethod
    def defaults_for_range(cls, min_x, max_x, variance=None):
        """Default hyperparameters for inputs ranging over [min_x, max_x]."""
        return cls(
            variance=DEFAULT_VARIANCE if variance is None else variance,
            length=(max_x - min_x) * LENGTH_RANGE_FACTOR,
            noise=DEFAULT_NOISE,
        )

    def validate(self):
        """Raise ValueError if a value would make the kernel matrix degenerate."""
        if not self.length > 0.0:
            raise ValueError(f"length must be > 0, got {self.length}")
        if not self.noise > 0.0:
            raise ValueError(f"noise must be > 0, got {self.noise}")
        if not self.variance >= 0.0:
            raise ValueError(f"variance must be >= 0, got {self.variance}")
        return self

    def copy(self):
        return Hyperparameters(self.variance, self.length, self.noise)

    def as_dict(self):
        return {"variance": self.variance, "length": self.length, "noise": self.noise}

    def __eq__(self, other):
        if not isinstance(other, Hyperparameters):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    __hash__ = None

    def __repr__(self):
        return (
            f"Hyperparameters(variance={self.variance!r}, "
            f"length={self.length!r}, noise={self.noise!r})"
        )
