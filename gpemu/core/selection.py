# gpemu/core/selection.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Selection of the length scale and noise by maximum likelihood.

The display `variance` is never fitted; it is copied unchanged into
the selected hyperparameters.
"""
import time
import numpy as np
from scipy.optimize import minimize

import gpemu.num as gnp
from gpemu.config import get_logger
from gpemu.kernel import rbf_kernel
from .hyperparameters import Hyperparameters
from .likelihood import negative_log_likelihood

_logger = get_logger()


def select_hyperparameters(
    x,
    y,
    hyperparameters,
    kernel=rbf_kernel,
    bounds_delta=10.0,
    info=False,
    method_options=None,
):
    """Minimize the negative log-likelihood over log(length), log(noise).

    Parameters
    ----------
    x, y : sequence of float
        Observations.
    hyperparameters : Hyperparameters
        Starting point. Not modified.
    kernel : callable, optional
        Covariance function (default `rbf_kernel`).
    bounds_delta : float, default=10.0
        Half-width of the search box around the starting point, in log
        space.
    info : bool, default=False
        If True, also return the SciPy result object.
    method_options : dict, optional
        Extra options passed to SciPy ``minimize`` (L-BFGS-B).

    Returns
    -------
    selected : Hyperparameters
    info_ret : scipy.optimize.OptimizeResult, only if ``info=True``

    Notes
    -----
    Criterion evaluations that fail with a linear-algebra error (for
    instance a kernel matrix that is not numerically positive definite)
    are mapped to ``+inf`` so the search can continue; other exceptions
    are re-raised. If the optimizer ends on a point worse than the best
    one visited, the best visited point is returned.
    """
    if len(x) != len(y):
        raise gnp.DimensionMismatchError(
            f"{len(x)} inputs but {len(y)} observed values"
        )
    if len(x) == 0:
        raise ValueError("Cannot select hyperparameters without observations.")
    if method_options is None:
        method_options = {}
    tic = time.time()

    xi = gnp.array(x)
    yi = gnp.array(y)
    start = hyperparameters.validate()
    p0 = np.array([np.log(start.length), np.log(start.noise)])
    bounds = [(p - bounds_delta, p + bounds_delta) for p in p0]

    def unpack(p):
        return Hyperparameters(
            variance=start.variance, length=np.exp(p[0]), noise=np.exp(p[1])
        )

    best_params, best_criterion = p0.copy(), np.inf

    def criterion(p):
        nonlocal best_params, best_criterion
        try:
            J = negative_log_likelihood(xi, yi, unpack(p), kernel)
        except Exception as exc:
            if gnp.is_linalg_exception(exc):
                J = np.inf
            else:
                raise
        if J < best_criterion:
            best_criterion, best_params = J, p.copy()
        return J

    options = dict(ftol=1e-8, gtol=1e-6, maxiter=500)
    options.update(method_options)

    r = minimize(criterion, p0, method="L-BFGS-B", bounds=bounds, options=options)

    # ensure returning best seen
    if not r.fun <= best_criterion:
        r.x, r.fun = best_params, best_criterion
    selected = unpack(r.x)

    if not np.isfinite(r.fun):
        _logger.warning("Hyperparameter selection found no valid point; keeping start.")
        selected = start.copy()
    _logger.debug(
        "Selected %s (nll=%.6g) in %.3fs", selected, r.fun, time.time() - tic
    )

    return (selected, r) if info else selected
