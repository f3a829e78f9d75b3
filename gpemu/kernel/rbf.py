# gpemu/kernel/rbf.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpemu.num as gnp
from .utils import squared_distances


def rbf_kernel(a, b, length):
    """Radial basis function (squared exponential) kernel.

    .. math::
        k(a, b) = \\exp(-\\frac{1}{2} \\|a - b\\|^2 / \\ell)

    Parameters
    ----------
    a : Matrix, shape (n, d)
    b : Matrix, shape (m, d)
    length : float
        Length scale, > 0.

    Returns
    -------
    Matrix, shape (n, m)
        Covariance matrix, with unit diagonal when b is a.
    """
    sqdist = squared_distances(a, b)
    return gnp.exp(sqdist.scale(-0.5 / length))
