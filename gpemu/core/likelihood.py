# gpemu/core/likelihood.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Negative log marginal likelihood of the zero-mean regression model.
"""
import math

import gpemu.num as gnp
from gpemu.kernel import rbf_kernel


def negative_log_likelihood(x, y, hyperparameters, kernel=rbf_kernel):
    """Computes the negative log-likelihood of the zero-mean GP model.

    Parameters
    ----------
    x : Matrix (n, 1) or sequence of float
        Observation inputs.
    y : Matrix (n, 1) or sequence of float
        Observed values.
    hyperparameters : Hyperparameters
        Only `length` and `noise` are used; `variance` is a display
        scale.
    kernel : callable, optional
        Covariance function (default `rbf_kernel`).

    Returns
    -------
    nll : float

    Notes
    -----
    With K = k(x, x) + noise I = L Lᵀ,

    .. math::
        \\frac{1}{2} (n \\log 2\\pi + \\log\\det K + y^T K^{-1} y)

    where log det K = 2 Σ log L_ii and yᵀK⁻¹y = |L⁻¹ y|².
    """
    if not isinstance(x, gnp.Matrix):
        x = gnp.array(x)
    if not isinstance(y, gnp.Matrix):
        y = gnp.array(y)
    if x.rows != y.rows:
        raise gnp.DimensionMismatchError(
            f"{x.rows} inputs but {y.rows} observed values"
        )
    hp = hyperparameters.validate()
    n = x.rows

    K = kernel(x, x, hp.length)
    L = gnp.linalg.cholesky(gnp.add(K, gnp.eye(n).scale(hp.noise)))
    alpha = gnp.linalg.solve(L, y)

    norm2 = gnp.sum(gnp.pow(alpha, 2))
    ldetK = 2.0 * sum(math.log(v) for v in gnp.diag(L))
    return 0.5 * (n * math.log(2.0 * math.pi) + ldetK + norm2)
