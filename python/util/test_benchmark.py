import unittest
from contextlib import redirect_stdout
from io import StringIO

import numpy as np

from benchmark import Benchmark, BenchmarkConfig


class TestBenchmark(unittest.TestCase):
    def test_run_prints_one_line_per_case(self) -> None:
        config = BenchmarkConfig(sizes=[100, 1000], quantiles=[0.0, 0.5, 1.0], n_trials=2)
        out = StringIO()
        with redirect_stdout(out):
            Benchmark(config).run()
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 6)
        self.assertTrue(lines[0].startswith("n=100 k=0:"))
        self.assertTrue(lines[-1].startswith("n=1000 k=999:"))

    def test_trial(self) -> None:
        np.random.seed(0)
        mean_calls, max_calls = Benchmark(BenchmarkConfig(n_trials=3)).trial(5000, 2500)
        assert 5000 <= mean_calls <= max_calls
        assert max_calls < 1.5 * (5000 + 2499)
