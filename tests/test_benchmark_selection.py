import io
import os
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from drawtable.benchmarks import benchmark_selection as bench


class BenchmarkSelectionTests(unittest.TestCase):
    def test_env_sizes_parses_and_falls_back(self):
        with patch.dict(os.environ, {"BENCH_SIZES": "5, x,0,20,"}):
            self.assertEqual(bench._env_sizes("BENCH_SIZES", [1]), [5, 20])
        with patch.dict(os.environ, {"BENCH_SIZES": "x"}):
            self.assertEqual(bench._env_sizes("BENCH_SIZES", [1]), [1])
        with patch.dict(os.environ, {"BENCH_DRAWS": "nope"}):
            self.assertEqual(bench._env_int("BENCH_DRAWS", 7), 7)

    def test_built_tables_are_deterministic(self):
        first = bench._build_table(8, seed=1)
        second = bench._build_table(8, seed=1)
        self.assertEqual(first, second)
        self.assertEqual(len(first), 8)
        self.assertTrue(all(1 <= weight <= 100 for weight in first.weights()))

    def test_main_prints_summary(self):
        buffer = io.StringIO()
        with patch.object(bench, "BENCH_SIZES", [3, 6]):
            with patch.object(bench, "BENCH_DRAWS", 50):
                with patch.object(bench, "BENCH_REPEATS", 1):
                    with redirect_stdout(buffer):
                        bench.main()
        output = buffer.getvalue()
        self.assertIn("[SUMMARY]", output)
        self.assertIn("size=3", output)
        self.assertIn("size=6", output)


if __name__ == "__main__":
    unittest.main()
