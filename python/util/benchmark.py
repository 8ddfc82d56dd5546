from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from comparators import CountingComparator
from floyd_rivest import select


def main() -> None:
    Benchmark(BenchmarkConfig()).run()


@dataclass
class BenchmarkConfig():
    sizes: List[int] = field(default_factory=lambda: [1_000, 10_000, 100_000])
    quantiles: List[float] = field(default_factory=lambda: [0.0, 0.1, 0.25, 0.5, 0.9, 1.0])
    n_trials: int = 5
    max_value: int = 2 ** 31 - 1
    seed: int = 0


@dataclass
class Benchmark():
    config: BenchmarkConfig

    def run(self) -> None:
        np.random.seed(self.config.seed)
        for n in self.config.sizes:
            for q in self.config.quantiles:
                k = min(int(q * n), n - 1)
                mean_calls, max_calls = self.trial(n, k)
                bound = n + min(k, n - 1 - k)
                print(
                    f"n={n} k={k}: mean={mean_calls:.0f} max={max_calls} comparisons, "
                    f"n + min(k, n - k)={bound} ratio={mean_calls / bound:.3f}"
                )

    def trial(self, n: int, k: int) -> Tuple[float, int]:
        counter = CountingComparator()
        calls = []
        for _ in range(self.config.n_trials):
            nums = np.random.randint(0, self.config.max_value, n).tolist()
            counter.reset()
            select(nums, k, counter)
            calls.append(counter.calls)
        return float(np.mean(calls)), int(np.max(calls))


if __name__ == "__main__":
    main()
