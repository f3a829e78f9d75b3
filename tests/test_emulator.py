import math
import unittest

import numpy as np

from gpemu.core import Emulator, EmulatorState, Hyperparameters, Prediction, Tangent


class RecordingChart:
    """Chart stand-in that records what the emulator sends."""

    def __init__(self):
        self.series = None
        self.tangents = []
        self.markers = []

    def update_series(self, raw_points, mean_curve, upper_band, lower_band):
        self.series = (raw_points, mean_curve, upper_band, lower_band)

    def update_tangent(self, tangent):
        self.tangents.append(tangent)

    def update_input_marker(self, value):
        self.markers.append(value)


def make_line_emulator(chart=None, grid_size=101, **kwargs):
    emulator = Emulator(
        chart,
        input="fleet",
        output="waiting_time",
        min_x=0.0,
        max_x=10.0,
        hyperparameters=Hyperparameters(variance=2.0, length=50.0, noise=1e-6),
        grid_size=grid_size,
        **kwargs
    )
    for x in range(11):
        emulator.x.append(float(x))
        emulator.y.append(2.0 * x + 1.0)
    emulator.refresh()
    return emulator


class TestEmptyEmulator(unittest.TestCase):
    def test_refresh_without_observations_gives_empty_series(self):
        chart = RecordingChart()
        emulator = Emulator(chart)
        prediction = emulator.refresh()
        self.assertEqual(chart.series, ([], [], [], []))
        self.assertEqual(prediction, Prediction.empty())
        for seq in prediction:
            self.assertEqual(seq, [])
        self.assertIs(emulator.state, EmulatorState.EMPTY)

    def test_clear_then_refresh(self):
        chart = RecordingChart()
        emulator = Emulator(chart, grid_size=20)
        emulator.add_observation(10.0, 1.0)
        emulator.add_observation(60.0, 3.0)
        self.assertIs(emulator.state, EmulatorState.FITTED)
        emulator.clear()
        emulator.refresh()
        self.assertIs(emulator.state, EmulatorState.EMPTY)
        self.assertEqual(chart.series, ([], [], [], []))
        for seq in (emulator.raw_points, emulator.mean_curve, emulator.upper_band, emulator.lower_band):
            self.assertEqual(seq, [])
        self.assertIsNone(emulator.tangent)

    def test_tangent_queries_are_no_ops(self):
        emulator = Emulator()
        self.assertIsNone(emulator.get_tangent_at_index(0))
        self.assertIsNone(emulator.update_input_marker(50.0))
        self.assertEqual(emulator.input_marker, 50.0)

    def test_invalid_construction(self):
        with self.assertRaises(ValueError):
            Emulator(min_x=5.0, max_x=5.0)
        with self.assertRaises(ValueError):
            Emulator(grid_size=1)

    def test_default_hyperparameters(self):
        emulator = Emulator(min_x=10.0, max_x=30.0)
        self.assertEqual(emulator.hyperparameters, Hyperparameters(100.0, 100.0, 0.005))
        self.assertIs(emulator.regression.hyperparameters, emulator.hyperparameters)


class TestFittedEmulator(unittest.TestCase):
    def test_add_observation_refits(self):
        chart = RecordingChart()
        emulator = Emulator(chart, grid_size=50)
        emulator.add_observation(20.0, 5.0)
        raw, mean, upper, lower = chart.series
        self.assertEqual(raw, [(20.0, 5.0)])
        self.assertEqual(len(mean), 50)
        self.assertEqual(len(upper), 50)
        self.assertEqual(len(lower), 50)
        self.assertEqual(mean[0][0], 0.0)
        self.assertEqual(mean[-1][0], 100.0)
        for (_, m), (_, u), (_, l) in zip(mean, upper, lower):
            self.assertLessEqual(l, m)
            self.assertLessEqual(m, u)

    def test_mean_follows_a_line(self):
        emulator = make_line_emulator()
        expected = 2.0 * np.array(emulator.x_axis) + 1.0
        self.assertTrue(np.allclose(emulator.mean, expected, atol=1e-2))

    def test_tangent_in_the_middle(self):
        emulator = make_line_emulator()
        t = emulator.get_tangent_at_index(50)
        self.assertIsInstance(t, Tangent)
        self.assertAlmostEqual(t.gradient, 2.0, delta=0.05)
        expected = (emulator.mean[51] - emulator.mean[49]) / (emulator.x_axis[51] - emulator.x_axis[49])
        self.assertAlmostEqual(t.gradient, expected)
        # the line passes through the displayed curve at the index
        self.assertAlmostEqual(t(emulator.x_axis[50]), emulator.mean_curve[50][1])

    def test_tangent_at_grid_boundaries(self):
        emulator = make_line_emulator(grid_size=10)
        first = emulator.get_tangent_at_index(0)
        last = emulator.get_tangent_at_index(9)
        x, m = emulator.x_axis, emulator.mean
        self.assertAlmostEqual(first.gradient, (m[1] - m[0]) / (x[1] - x[0]))
        self.assertAlmostEqual(last.gradient, (m[9] - m[8]) / (x[9] - x[8]))

    def test_tangent_index_is_clamped(self):
        emulator = make_line_emulator(grid_size=10)
        self.assertEqual(emulator.get_tangent_at_index(10), emulator.get_tangent_at_index(9))
        self.assertEqual(emulator.get_tangent_at_index(-3), emulator.get_tangent_at_index(0))

    def test_index_for_value(self):
        emulator = make_line_emulator(grid_size=11)
        self.assertEqual(emulator.index_for_value(0.0), 0)
        self.assertEqual(emulator.index_for_value(2.3), 3)
        self.assertEqual(emulator.index_for_value(10.0), 10)
        self.assertEqual(emulator.index_for_value(-4.0), 0)

    def test_update_input_marker(self):
        chart = RecordingChart()
        emulator = make_line_emulator(chart)
        t = emulator.update_input_marker(4.0)
        self.assertEqual(chart.markers, [4.0])
        self.assertEqual(chart.tangents[-1], t)
        self.assertEqual(t, emulator.get_tangent_at_index(emulator.index_for_value(4.0)))

    def test_refresh_recomputes_tangent_at_marker(self):
        chart = RecordingChart()
        emulator = make_line_emulator(chart, input_marker=3.0)
        self.assertIsNotNone(emulator.tangent)
        self.assertIs(chart.tangents[-1], emulator.tangent)

    def test_sensitivity_disabled(self):
        emulator = make_line_emulator(show_sensitivity=False, input_marker=3.0)
        self.assertIsNone(emulator.tangent)
        self.assertIsNone(emulator.update_input_marker(5.0))

    def test_on_pointer(self):
        selected = []
        emulator = make_line_emulator(input_updated=selected.append)
        self.assertIsNone(emulator.on_pointer(1.5))
        self.assertIsNone(emulator.on_pointer(-0.1))
        self.assertEqual(selected, [])

        value = emulator.on_pointer(0.42)
        self.assertEqual(value, 4.0)
        self.assertEqual(selected, [4.0])
        self.assertEqual(
            emulator.tangent,
            emulator.get_tangent_at_index(math.floor(len(emulator.x_axis) * 0.42)),
        )
        # right edge maps onto the last grid point
        self.assertEqual(emulator.on_pointer(1.0), 10.0)
        self.assertEqual(emulator.tangent, emulator.get_tangent_at_index(100))

    def test_refresh_recomputes_tangent_at_pointer(self):
        chart = RecordingChart()
        emulator = Emulator(chart, min_x=0.0, max_x=10.0, grid_size=101)
        emulator.hyperparameters = Hyperparameters(variance=2.0, length=4.0, noise=1e-6)
        emulator.add_observation(2.0, 1.0)
        emulator.add_observation(8.0, 1.0)
        emulator.on_pointer(0.5)
        index = math.floor(len(emulator.x_axis) * 0.5)
        before = emulator.tangent

        emulator.add_observation(5.0, 10.0)
        self.assertEqual(emulator.tangent, emulator.get_tangent_at_index(index))
        self.assertNotEqual(emulator.tangent, before)
        self.assertAlmostEqual(emulator.tangent(emulator.x_axis[index]), emulator.mean[index])
        self.assertIs(chart.tangents[-1], emulator.tangent)

    def test_refresh_without_query_clears_tangent(self):
        chart = RecordingChart()
        emulator = make_line_emulator(chart)
        self.assertIsNone(emulator.tangent)
        self.assertIsNone(chart.tangents[-1])

    def test_marker_must_be_finite(self):
        emulator = make_line_emulator()
        t = emulator.update_input_marker(4.0)
        for value in (math.nan, math.inf):
            with self.assertRaises(ValueError):
                emulator.update_input_marker(value)
        self.assertEqual(emulator.input_marker, 4.0)
        self.assertEqual(emulator.tangent, t)

    def test_hyperparameter_change_needs_refresh(self):
        emulator = make_line_emulator()
        upper = list(emulator.upper_band)
        emulator.hyperparameters.variance = 10.0
        self.assertEqual(emulator.upper_band, upper)
        emulator.refresh()
        self.assertNotEqual(emulator.upper_band, upper)

    def test_select_hyperparameters(self):
        rng = np.random.default_rng(0)
        emulator = Emulator(
            min_x=0.0,
            max_x=10.0,
            hyperparameters=Hyperparameters(variance=2.0, length=20.0, noise=0.01),
            grid_size=50,
        )
        xs = np.linspace(0.0, 10.0, 15)
        for x, y in zip(xs, np.sin(xs) + rng.normal(scale=0.05, size=15)):
            emulator.x.append(float(x))
            emulator.y.append(float(y))
        before = emulator.regression
        emulator.refresh()
        nll_before = before.negative_log_likelihood()
        hp = emulator.select_hyperparameters()
        self.assertIs(hp, emulator.hyperparameters)
        self.assertEqual(hp.variance, 2.0)
        emulator.refresh()
        self.assertLess(emulator.regression.negative_log_likelihood(), nll_before)


if __name__ == "__main__":
    unittest.main()
