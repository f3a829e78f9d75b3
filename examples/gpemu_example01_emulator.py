"""
Fit an emulator to the runs of a toy simulation and show the tangent
at the current input value

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import numpy as np
import gpemu as ge
from gpemu.core import EmulatorRegistry
from gpemu.plot import Chart


def simulate(inputs, rng):
    """Toy simulation: mean waiting time of a fleet of size `fleet`."""
    fleet = inputs["fleet"]
    waiting = 30.0 * np.exp(-fleet / 15.0) + 2.0 + rng.normal(scale=0.3)
    return {"waiting_time": waiting}


def main():
    rng = np.random.default_rng(1234)

    chart = Chart(xlabel="fleet size", ylabel="waiting time", title="fleet vs waiting time")
    emulator = ge.Emulator(
        chart,
        input="fleet",
        output="waiting_time",
        min_x=1,
        max_x=50,
        hyperparameters=ge.Hyperparameters(variance=2.0, length=60.0, noise=0.05),
        input_marker=20,
        grid_size=200,
    )
    registry = EmulatorRegistry([emulator])

    for fleet in [2, 8, 15, 24, 35, 48]:
        inputs = {"fleet": fleet}
        registry.record_run(inputs, simulate(inputs, rng))

    registry.set_input_value("fleet", 10)
    print(emulator.tangent)

    chart.show(grid=True, legend=True)
    chart.close()


if __name__ == "__main__":
    main()
