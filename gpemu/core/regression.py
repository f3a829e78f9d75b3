# gpemu/core/regression.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian process regression of a scalar output on a scalar input.
"""
from typing import List, NamedTuple

import gpemu.num as gnp
from gpemu.config import get_logger
from gpemu.kernel import rbf_kernel
from .hyperparameters import Hyperparameters
from . import likelihood

_logger = get_logger()


class Prediction(NamedTuple):
    """Posterior summaries, aligned index for index with the query inputs."""

    mean: List[float]
    variance: List[float]
    lower: List[float]
    upper: List[float]

    @classmethod
    def empty(cls):
        return cls([], [], [], [])


class GPRegression:
    """Zero-mean Gaussian process regression.

    Attributes
    ----------
    kernel : callable
        Covariance function, called as ``kernel(a, b, length)`` with
        (n, 1) and (m, 1) input matrices; returns an (n, m) matrix.
    hyperparameters : Hyperparameters
        Read at every `predict` call, so changes apply on the next
        prediction.
    x : Matrix, shape (n, 1) or None
        Fit inputs.
    y : Matrix, shape (n, 1) or None
        Fit targets.

    Examples
    --------
    >>> gpr = GPRegression(rbf_kernel, Hyperparameters(variance=2.0, length=1.0, noise=1e-6))
    >>> gpr.set_data([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
    >>> p = gpr.predict([1.0, 2.0, 3.0, 10.0])
    >>> p.mean, p.lower, p.upper  # doctest: +SKIP
    """

    def __init__(self, kernel=rbf_kernel, hyperparameters=None):
        self.kernel = kernel
        self.hyperparameters = (
            Hyperparameters() if hyperparameters is None else hyperparameters
        )
        self.x = None
        self.y = None

    def __repr__(self):
        output = str("<gpemu.core.GPRegression object> " + hex(id(self)))
        return output

    def __str__(self):
        try:
            kernel_desc = self.kernel.__name__
        except AttributeError:
            kernel_desc = str(self.kernel)
        n = 0 if self.x is None else self.x.rows
        return (
            f"GP Regression:\n"
            f"  Kernel: {kernel_desc}\n"
            f"  Hyperparameters: {self.hyperparameters}\n"
            f"  Observations: {n}"
        )

    def set_data(self, x, y):
        """Store the observations as column matrices.

        Raises
        ------
        DimensionMismatchError
            If x and y have different lengths.
        """
        if len(x) != len(y):
            raise gnp.DimensionMismatchError(
                f"regression inputs mismatch: {len(x)} inputs, {len(y)} targets"
            )
        self.x = gnp.array(x)
        self.y = gnp.array(y)

    def predict(self, x_new):
        """Posterior mean, standard deviation and display band at x_new.

        Parameters
        ----------
        x_new : sequence of float, length m
            Query inputs.

        Returns
        -------
        Prediction
            ``mean``, ``variance``, ``lower`` and ``upper``, each a list
            of m floats. ``variance`` holds the posterior standard
            deviation sqrt(|k(x*, x*) - k*ᵀ K⁻¹ k*|); the band is
            ``mean ± variance * hyperparameters.variance``.

        Raises
        ------
        RuntimeError
            If `set_data` has not been called.
        ValueError
            If the hyperparameters are invalid.
        NotPositiveDefiniteError, SingularMatrixError
            If the regularized kernel matrix cannot be factorized.
        """
        if self.x is None:
            raise RuntimeError("Call set_data(x, y) before predict().")
        hp = self.hyperparameters.validate()
        x_new = gnp.array(x_new)
        n = self.x.rows
        _logger.debug("GP predict: %d observations, %d query points", n, x_new.rows)

        K = self.kernel(self.x, self.x, hp.length)
        L = gnp.linalg.cholesky(gnp.add(K, gnp.eye(n).scale(hp.noise)))

        # mean = K_sᵀ K⁻¹ y = (L⁻¹ K_s)ᵀ (L⁻¹ y)
        K_s = self.kernel(self.x, x_new, hp.length)
        Lk = gnp.linalg.solve(L, K_s)
        mu = gnp.dot(Lk.T, gnp.linalg.solve(L, self.y))

        K_ss = self.kernel(x_new, x_new, hp.length)
        s2 = gnp.subtract(
            gnp.array(gnp.diag(K_ss), 1), gnp.array(gnp.sum(gnp.pow(Lk, 2), 0), 1)
        )
        # rounding can leave slightly negative values
        std = gnp.sqrt(gnp.abs(s2))
        band = std.scale(hp.variance)

        return Prediction(
            mean=mu.to_array(),
            variance=std.to_array(),
            lower=gnp.subtract(mu.T, band).to_array(),
            upper=gnp.add(mu.T, band).to_array(),
        )

    def negative_log_likelihood(self, hyperparameters=None):
        """Negative log marginal likelihood of the stored data."""
        if self.x is None:
            raise RuntimeError("Call set_data(x, y) before evaluating the likelihood.")
        hp = self.hyperparameters if hyperparameters is None else hyperparameters
        return likelihood.negative_log_likelihood(self.x, self.y, hp, self.kernel)
