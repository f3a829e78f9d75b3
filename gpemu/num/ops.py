# gpemu/num/ops.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Construction, elementwise, reduction and broadcasting operations on
`Matrix` objects.

Functions
---------
eye(n)
    n x n identity matrix.
diag(m)
    Main diagonal of a matrix, as a 1D array.
array(values, axis=0)
    Column (axis=0) or row (axis=1) matrix from a 1D sequence.
linspace(a, b, n)
    n evenly spaced values from a to b inclusive.
sum(m, axis=None)
    Whole-matrix sum, column sums (axis=0) or row sums (axis=1).
sqrt, abs, exp, pow
    Elementwise maps.
add(*operands), subtract(*operands)
    Elementwise arithmetic with row, column and scalar broadcasting.
dot(a, b, reduce=False)
    Matrix product, or inner product of two vectors when reduce=True.
"""
import builtins
from numbers import Real

import numpy

from .matrix import Matrix, _np_dtype
from .errors import ShapeMismatchError


def eye(n):
    return Matrix(n, n, numpy.eye(n, dtype=_np_dtype))


def diag(m):
    return m.to_numpy().diagonal().copy()


def array(values, axis=0):
    """Convert a 1D sequence into a column (axis=0) or row (axis=1) matrix."""
    values = numpy.asarray(values, dtype=_np_dtype).reshape(-1)
    n = values.shape[0]
    if axis == 0:
        return Matrix(n, 1, values)
    elif axis == 1:
        return Matrix(1, n, values)
    raise ValueError("axis must be 0 (column) or 1 (row)")


def linspace(a, b, n):
    return numpy.linspace(a, b, num=n, dtype=_np_dtype)


def sum(m, axis=None):
    """Sum the elements of a matrix.

    Parameters
    ----------
    m : Matrix or iterable of floats
    axis : {None, 0, 1}
        None sums everything into a scalar; 0 sums down the columns
        (length ``cols``); 1 sums across the rows (length ``rows``).
    """
    if axis is None:
        if isinstance(m, Matrix):
            return float(numpy.sum(m.data))
        return float(builtins.sum(m))
    if axis not in (0, 1):
        raise ValueError("axis must be None, 0 or 1")
    return numpy.sum(m.to_numpy(), axis=axis)


def sqrt(m):
    return m.map(numpy.sqrt)


def abs(m):
    return m.map(numpy.abs)


def exp(m):
    return m.map(numpy.exp)


def pow(m, e):
    return m.map(lambda v: numpy.power(v, e))


# ..................................................


def _as_2d(operand):
    if isinstance(operand, Matrix):
        return operand.to_numpy()
    if isinstance(operand, Real):
        return numpy.full((1, 1), operand, dtype=_np_dtype)
    raise TypeError(f"unsupported operand type {type(operand).__name__}")


def _broadcast_shape(left, right):
    shape = []
    for a, b in zip(left, right):
        if a == b or b == 1:
            shape.append(a)
        elif a == 1:
            shape.append(b)
        else:
            raise ShapeMismatchError(f"cannot broadcast shapes {left} and {right}")
    return tuple(shape)


def _fold(op, operands):
    if len(operands) == 0:
        return 0
    res = _as_2d(operands[0])
    for operand in operands[1:]:
        other = _as_2d(operand)
        shape = _broadcast_shape(res.shape, other.shape)
        res = op(numpy.broadcast_to(res, shape), numpy.broadcast_to(other, shape))
    return Matrix.from_numpy(res)


def add(*operands):
    """Elementwise sum of matrices, row/column vectors and scalars.

    Shapes are compatible when, per dimension, the extents are equal
    or one of them is 1; the size-1 dimension is repeated. A (n, 1)
    column plus a (1, m) row therefore yields an (n, m) matrix.

    Raises
    ------
    ShapeMismatchError
        If two operands cannot be broadcast against each other.
    """
    return _fold(numpy.add, operands)


def subtract(*operands):
    """Left-to-right elementwise difference, broadcasting as in `add`."""
    return _fold(numpy.subtract, operands)


def dot(a, b, reduce=False):
    """Matrix product of a and b.

    With ``reduce=True`` both operands are treated as flat vectors of
    equal length and their inner product is returned as a float.
    """
    if reduce:
        if a.data.shape[0] != b.data.shape[0]:
            raise ShapeMismatchError(
                f"cannot take the inner product of {a.shape} and {b.shape}"
            )
        return float(numpy.dot(a.data, b.data))
    if a.cols != b.rows:
        raise ShapeMismatchError(f"cannot multiply {a.shape} by {b.shape}")
    return Matrix.from_numpy(numpy.matmul(a.to_numpy(), b.to_numpy()))
