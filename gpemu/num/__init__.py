# gpemu/num/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Numerical layer of gpemu: a small dense-matrix algebra library.

Conventionally imported as ``import gpemu.num as gnp``.
"""

from .errors import (
    IndexOutOfBoundsError,
    ShapeMismatchError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    DimensionMismatchError,
    is_linalg_exception,
)
from .matrix import Matrix
from .ops import (
    eye,
    diag,
    array,
    linspace,
    sum,
    sqrt,
    abs,
    exp,
    pow,
    add,
    subtract,
    dot,
)
from . import linalg

__all__ = [
    "Matrix",
    "linalg",
    "eye",
    "diag",
    "array",
    "linspace",
    "sum",
    "sqrt",
    "abs",
    "exp",
    "pow",
    "add",
    "subtract",
    "dot",
    "IndexOutOfBoundsError",
    "ShapeMismatchError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "DimensionMismatchError",
    "is_linalg_exception",
]
