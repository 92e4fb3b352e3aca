import csv
import io
import tempfile
import unittest
import sys
import os
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from arraykit import walkthrough
from arraykit.benchmark import generate_input, measure_growth, measure_search, measure_sort

import numpy as np


def quiet(fn, *args, **kwargs):
    buf = io.StringIO()
    with redirect_stdout(buf):
        result = fn(*args, **kwargs)
    return result, buf.getvalue()


class TestWalkthrough(unittest.TestCase):
    def test_dynamic_array_scenario(self):
        (snapshots, position), out = quiet(walkthrough.dynamic_array_scenario)
        self.assertEqual(snapshots, [[1, 2, 3], [1, 4, 2, 3], [1, 2, 3]])
        self.assertEqual(position, 2)
        self.assertEqual(out.split(), ["1", "2", "3", "1", "4", "2", "3", "1", "2", "3", "2"])

    def test_primitive_operations(self):
        (fixed, dynamic), _ = quiet(walkthrough.initialization)
        self.assertEqual(list(fixed), dynamic)
        (first, third), out = quiet(walkthrough.accessing_elements)
        self.assertEqual((first, third), (1, 3))
        self.assertIn("The third element is: 3", out)
        self.assertEqual(quiet(walkthrough.insertion)[0], [1, 2, 10, 3, 4, 5, 6])
        self.assertEqual(quiet(walkthrough.deletion)[0], [1, 2, 4, 5])
        found, out = quiet(walkthrough.search)
        self.assertTrue(found)
        self.assertIn("Found: True", out)

    def test_run_all(self):
        _, out = quiet(walkthrough.run_all)
        self.assertIn("--- dynamic_array_scenario ---", out)


class TestBenchmark(unittest.TestCase):
    def test_generate_input(self):
        rng = np.random.default_rng(0)
        data = generate_input(20, rng)
        self.assertEqual(len(data), 20)
        self.assertTrue(all(isinstance(x, int) for x in data))
        self.assertEqual(sorted(generate_input(8, rng, distinct=True)), list(range(8)))

    def test_measure_sort_rows(self):
        rows = measure_sort([1, 16, 64], trials=2, seed=3)
        self.assertEqual([r["size"] for r in rows], [1, 16, 64])
        self.assertEqual(rows[0]["comparisons"], 0)
        self.assertEqual(rows[0]["ratio"], 0.0)
        for r in rows[1:]:
            self.assertGreater(r["comparisons"], 0)
            self.assertLessEqual(r["ratio"], 1.0)

    def test_measure_sort_rejects_zero_trials(self):
        for trials in (0, -2):
            with self.assertRaises(ValueError):
                measure_sort([4], trials=trials)

    def test_scripts_reject_zero_trials(self):
        import benchmark_sorting
        import generate_complexity_charts

        with tempfile.TemporaryDirectory() as tmp:
            runs = [
                (benchmark_sorting, ["benchmark_sorting.py", "--trials", "0",
                                     "--output", os.path.join(tmp, "out.csv")]),
                (generate_complexity_charts, ["generate_complexity_charts.py", "--trials", "0",
                                              "--out-dir", tmp]),
            ]
            for module, argv in runs:
                err = io.StringIO()
                with mock.patch.object(sys, "argv", argv), redirect_stderr(err):
                    with self.assertRaises(SystemExit) as ctx:
                        module.main()
                self.assertEqual(ctx.exception.code, 2)
                self.assertIn("--trials must be at least 1", err.getvalue())

    def test_measure_growth_amortized(self):
        rows = measure_growth(500, initial_capacity=10)
        self.assertEqual(len(rows), 500)
        self.assertEqual(rows[-1]["capacity"], 640)
        self.assertEqual(rows[-1]["growth_count"], 6)
        self.assertLess(max(r["copies_per_append"] for r in rows), 2.0)

    def test_measure_search(self):
        rows = measure_search([1, 1024])
        self.assertEqual(rows[1]["linear_probes"], 1024)
        self.assertLessEqual(rows[1]["binary_probes"], 11)

    def test_benchmark_script_writes_csv(self):
        import benchmark_sorting

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out.csv")
            argv = ["benchmark_sorting.py", "--max-size", "32", "--trials", "1",
                    "--appends", "50", "--output", path]
            with mock.patch.object(sys, "argv", argv):
                _, out = quiet(benchmark_sorting.main)
            with open(path, newline="") as f:
                rows = list(csv.DictReader(f))
        self.assertEqual([int(r["size"]) for r in rows], [1, 2, 4, 8, 16, 32])
        self.assertIn("Merge Sort:", out)

    def test_chart_script_writes_pngs(self):
        import generate_complexity_charts

        with tempfile.TemporaryDirectory() as tmp:
            argv = ["generate_complexity_charts.py", "--max-size", "16", "--trials", "1",
                    "--appends", "40", "--fib-max", "8", "--out-dir", tmp]
            with mock.patch.object(sys, "argv", argv):
                quiet(generate_complexity_charts.main)
            self.assertEqual(sorted(f for f in os.listdir(tmp) if f.endswith(".png")), [
                "1_sort_comparisons.png", "2_sort_ratio.png",
                "3_array_growth.png", "4_search_fibonacci.png",
            ])


if __name__ == '__main__':
    unittest.main()
