# gpemu/kernel/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpemu.num as gnp


def squared_distances(a, b):
    """Pairwise squared Euclidean distances between the rows of a and b.

    Uses ``|a - b|² = |a|² + |b|² - 2 a·bᵀ``, which needs no per-pair
    subtraction.

    Parameters
    ----------
    a : Matrix, shape (n, d)
    b : Matrix, shape (m, d)

    Returns
    -------
    Matrix, shape (n, m)
    """
    sum_a = gnp.array(gnp.sum(gnp.pow(a, 2), 1), axis=0)
    sum_b = gnp.array(gnp.sum(gnp.pow(b, 2), 1), axis=1)
    cross = gnp.dot(a, b.T).scale(2.0)
    return gnp.subtract(gnp.add(sum_a, sum_b), cross)
