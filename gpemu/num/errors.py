# gpemu/num/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Exceptions raised by the matrix and linear-algebra routines."""

from numpy.linalg import LinAlgError

_LINALG_ERROR_KEYWORDS = (
    "singular",
    "not positive definite",
    "not positive-definite",
    "cholesky",
    "not invertible",
    "linalg",
)


class IndexOutOfBoundsError(IndexError):
    """Row or column index outside a matrix."""


class ShapeMismatchError(ValueError):
    """Matrix operands with incompatible shapes."""


class SingularMatrixError(LinAlgError):
    """No nonzero pivot found during Gauss-Jordan inversion."""


class NotPositiveDefiniteError(LinAlgError):
    """Non-positive argument to the square root of a Cholesky diagonal."""


class DimensionMismatchError(ValueError):
    """Inputs and targets of unequal length."""


def is_linalg_exception(exc: Exception) -> bool:
    if isinstance(exc, LinAlgError):
        return True
    msg = str(exc).lower()
    return any(keyword in msg for keyword in _LINALG_ERROR_KEYWORDS)
