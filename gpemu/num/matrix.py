# gpemu/num/matrix.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Dense two-dimensional matrix of 64-bit floats.

The values are kept in a flat, row-major NumPy buffer of length
``rows * cols``. Every operation that is not an explicit ``set``
returns a new matrix; a matrix never shares its buffer with another
one.
"""
import operator

import numpy

from .errors import IndexOutOfBoundsError, ShapeMismatchError

_np_dtype = numpy.float64


def _as_index(value, what):
    try:
        return operator.index(value)
    except TypeError:
        raise IndexOutOfBoundsError(
            f"{what} index must be an integer, got {value!r}"
        ) from None


class Matrix:
    """Dense row-major matrix.

    Parameters
    ----------
    rows : int
        Number of rows.
    cols : int
        Number of columns.
    data : array_like, optional
        Flat row-major values of length ``rows * cols``. Copied. If
        omitted, the matrix is filled with zeros.

    Examples
    --------
    >>> A = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    >>> A.get(1, 0)
    3.0
    >>> A.T.to_array()
    [1.0, 3.0, 2.0, 4.0]
    """

    __slots__ = ("rows", "cols", "data")

    def __init__(self, rows, cols, data=None):
        rows, cols = int(rows), int(cols)
        if rows < 0 or cols < 0:
            raise ShapeMismatchError(f"invalid matrix shape ({rows}, {cols})")
        if data is None:
            buf = numpy.zeros(rows * cols, dtype=_np_dtype)
        else:
            buf = numpy.array(data, dtype=_np_dtype).reshape(-1)
            if buf.shape[0] != rows * cols:
                raise ShapeMismatchError(
                    f"{buf.shape[0]} values cannot fill a ({rows}, {cols}) matrix"
                )
        self.rows = rows
        self.cols = cols
        self.data = buf

    @classmethod
    def from_numpy(cls, a):
        """Build a matrix from a 2D array (or a 1D array, as a column)."""
        a = numpy.asarray(a, dtype=_np_dtype)
        if a.ndim == 1:
            a = a.reshape(-1, 1)
        if a.ndim != 2:
            raise ShapeMismatchError("a Matrix can only hold 2D data")
        return cls(a.shape[0], a.shape[1], a)

    def to_numpy(self):
        """Return a (rows, cols) NumPy copy of the values."""
        return self.data.reshape(self.rows, self.cols).copy()

    @property
    def shape(self):
        return (self.rows, self.cols)

    def _check_index(self, i, j):
        i = _as_index(i, "row")
        j = _as_index(j, "column")
        if not 0 <= i < self.rows:
            raise IndexOutOfBoundsError(
                f"row index {i} out of bounds for {self.rows} rows"
            )
        if not 0 <= j < self.cols:
            raise IndexOutOfBoundsError(
                f"column index {j} out of bounds for {self.cols} columns"
            )
        return i, j

    def get(self, i, j):
        i, j = self._check_index(i, j)
        return float(self.data[i * self.cols + j])

    def set(self, i, j, value):
        i, j = self._check_index(i, j)
        self.data[i * self.cols + j] = value

    def copy(self):
        return Matrix(self.rows, self.cols, self.data)

    def scale(self, amount):
        """Return a new matrix with every element multiplied by ``amount``."""
        return Matrix(self.rows, self.cols, self.data * amount)

    def map(self, func):
        """Return a new matrix with ``func`` applied to the whole buffer.

        ``func`` receives and returns a 1D float array (NumPy ufuncs
        such as ``numpy.exp`` qualify).
        """
        out = numpy.asarray(func(self.data.copy()), dtype=_np_dtype)
        return Matrix(self.rows, self.cols, out)

    def transpose(self):
        out = self.data.reshape(self.rows, self.cols).T
        return Matrix(self.cols, self.rows, out)

    @property
    def T(self):
        return self.transpose()

    def row(self, index):
        """Return row ``index`` as a new (1, cols) matrix."""
        index = _as_index(index, "row")
        if not 0 <= index < self.rows:
            raise IndexOutOfBoundsError(
                f"row index {index} out of bounds for {self.rows} rows"
            )
        start = index * self.cols
        return Matrix(1, self.cols, self.data[start : start + self.cols])

    def to_array(self):
        """Flat row-major list of floats."""
        return self.data.tolist()

    def __iter__(self):
        return iter(self.data.tolist())

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and numpy.array_equal(self.data, other.data)

    __hash__ = None

    def __repr__(self):
        return f"Matrix({self.rows}, {self.cols}, {self.data.tolist()!r})"

    def __str__(self):
        return str(self.data.reshape(self.rows, self.cols))
