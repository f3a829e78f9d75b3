# gpemu/num/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Cholesky factorization, Gauss-Jordan inversion and linear solve.

These routines work on `Matrix` objects and are sized for the small
(at most a few hundred rows) systems met when fitting an emulator.
"""
import math

import numpy

from .matrix import Matrix
from .errors import ShapeMismatchError, SingularMatrixError, NotPositiveDefiniteError
from . import ops


def _check_square(a, what):
    if a.rows != a.cols:
        raise ShapeMismatchError(f"{what} requires a square matrix, got {a.shape}")


def cholesky(a):
    """Lower-triangular Cholesky factor L of a, with L Lᵀ = a.

    Parameters
    ----------
    a : Matrix, shape (n, n)
        Symmetric positive-definite matrix. Only the lower triangle
        is read.

    Returns
    -------
    L : Matrix, shape (n, n)

    Raises
    ------
    ShapeMismatchError
        If a is not square.
    NotPositiveDefiniteError
        If a diagonal pivot a[i, i] - sum_k L[i, k]² is not positive.

    Notes
    -----
    Row recurrence, for j < i

    .. math::
        L_{ij} = (a_{ij} - \\sum_{k<j} L_{ik} L_{jk}) / L_{jj}

    and on the diagonal

    .. math::
        L_{ii} = \\sqrt{a_{ii} - \\sum_{k<i} L_{ik}^2}
    """
    _check_square(a, "cholesky")
    n = a.rows
    L = Matrix(n, n)

    for i in range(n):
        for j in range(i + 1):
            # rows of L are zero beyond the diagonal, so the full inner
            # product equals the partial sum over k < j
            s = ops.dot(L.row(i), L.row(j), reduce=True)
            if i == j:
                d = a.get(i, i) - s
                if not d > 0.0:
                    raise NotPositiveDefiniteError(
                        f"matrix is not positive definite (pivot {d!r} at row {i})"
                    )
                L.set(i, i, math.sqrt(d))
            else:
                L.set(i, j, (a.get(i, j) - s) / L.get(j, j))

    return L


def inv(a):
    """Inverse of a square matrix by Gauss-Jordan elimination.

    The matrix is reduced to the identity while the same row
    operations are applied to an identity matrix, which ends up
    holding the inverse. A zero pivot is replaced by swapping in the
    first subsequent row with a nonzero entry in the pivot column.

    Raises
    ------
    ShapeMismatchError
        If a is not square.
    SingularMatrixError
        If no nonzero pivot can be found for some column.
    """
    _check_square(a, "inv")
    n = a.rows
    C = a.to_numpy()
    Inv = numpy.eye(n)

    for i in range(n):
        d = C[i, i]
        if d == 0.0:
            for j in range(i + 1, n):
                if C[j, i] != 0.0:
                    C[[i, j], :] = C[[j, i], :]
                    Inv[[i, j], :] = Inv[[j, i], :]
                    break
            d = C[i, i]
            if d == 0.0:
                raise SingularMatrixError(f"matrix is singular (no pivot in column {i})")

        C[i, :] /= d
        Inv[i, :] /= d

        for j in range(n):
            if j == i:
                continue
            f = C[j, i]
            if f != 0.0:
                C[j, :] -= f * C[i, :]
                Inv[j, :] -= f * Inv[i, :]

    return Matrix.from_numpy(Inv)


def solve(a, b):
    """Solve a X = b as inv(a) b."""
    return ops.dot(inv(a), b)
