"""
Select length scale and noise by maximum likelihood and compare the
fits before and after selection

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import numpy as np
import gpemu as ge
import gpemu.num as gnp


def generate_data(n=12):
    rng = np.random.default_rng(0)
    x = np.sort(rng.uniform(0.0, 10.0, n))
    y = np.sin(x) + rng.normal(scale=0.1, size=n)
    return x.tolist(), y.tolist()


def main():
    x, y = generate_data()

    emulator = ge.Emulator(
        min_x=0,
        max_x=10,
        x=x,
        y=y,
        hyperparameters=ge.Hyperparameters(variance=2.0, length=20.0, noise=0.01),
        grid_size=100,
    )
    emulator.refresh()
    nll_before = emulator.regression.negative_log_likelihood()

    emulator.select_hyperparameters()
    emulator.refresh()
    nll_after = emulator.regression.negative_log_likelihood()

    print(emulator.hyperparameters)
    print(f"negative log-likelihood: {nll_before:.4f} -> {nll_after:.4f}")

    truth = np.sin(gnp.linspace(0.0, 10.0, 100))
    rmse = np.sqrt(np.mean((np.array(emulator.mean) - truth) ** 2))
    print(f"RMSE of the mean curve: {rmse:.4f}")


if __name__ == "__main__":
    main()
