# gpemu/kernel/matern.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import sqrt
import numpy
import gpemu.num as gnp
from .utils import squared_distances


def matern32_kernel(a, b, length):
    """Matérn 3/2 kernel.

    .. math::
        k(a, b) = (1 + \\sqrt{3}\\,h) \\exp(-\\sqrt{3}\\,h),
        \\quad h = \\|a - b\\| / \\ell

    Same call signature as `rbf_kernel`, so either can be handed to
    `gpemu.core.GPRegression`.
    """
    # tiny negative squared distances can come out of the expansion
    h = gnp.sqrt(gnp.abs(squared_distances(a, b))).scale(1.0 / length)
    t = h.scale(sqrt(3.0))
    return t.map(lambda v: (1.0 + v) * numpy.exp(-v))
