# gpemu/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance functions for the regression engine.

A kernel is any callable ``k(a, b, length) -> Matrix`` taking two
(n, d) and (m, d) input matrices and a length scale, and returning the
(n, m) covariance matrix.

Modules
-------
rbf
    Radial basis function kernel (the default).
matern
    Matérn 3/2 kernel.
utils
    Pairwise squared distances.
"""

from .rbf import rbf_kernel
from .matern import matern32_kernel
from .utils import squared_distances

__all__ = ["rbf_kernel", "matern32_kernel", "squared_distances"]
