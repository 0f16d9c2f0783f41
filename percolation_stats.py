import argparse
import math

import numpy as np

from percolation import Percolation

CONFIDENCE_95 = 1.96


def make_rng(rng=None):
    """
    Returns a uniform integer source with an ``integers(low, high)`` method.

    None or an int seed gives a fresh numpy Generator; any other object is
    taken to be a generator already and returned as-is.
    """
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    return rng


# shortest round-trip repr; an undefined value prints as NaN
def format_double(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return repr(float(value))


class PercolationStats:
    """
    Runs 'trials' independent percolation experiments on n by n grids and
    records, for each one, the fraction of sites that were open at the
    moment the grid first percolated.
    """

    def __init__(self, n: int, trials: int, rng=None):
        if n <= 0 or trials <= 0:
            raise ValueError(
                f"grid size n and trials count must be positive integers, got n={n}, trials={trials}"
            )

        self.gridSize = n
        self.trialCount = trials
        self.rng = make_rng(rng)

        results = np.empty(trials, dtype=float)
        for i in range(trials):
            results[i] = self._run_trial()

        results.setflags(write=False)
        self.thresholds = results

    def _run_trial(self) -> float:
        simulator = Percolation(self.gridSize)
        while not simulator.percolates():
            self._open_random_site(simulator)
        return simulator.numberOfOpenSites() / (self.gridSize * self.gridSize)

    def _open_random_site(self, simulator: Percolation):
        # draw over the whole grid and redraw on open sites
        while True:
            row = int(self.rng.integers(1, self.gridSize + 1))
            col = int(self.rng.integers(1, self.gridSize + 1))
            if not simulator.isOpen(row, col):
                break
        simulator.open(row, col)

    def mean(self) -> float:
        return float(np.mean(self.thresholds))

    # sample standard deviation; NaN for a single trial
    def stddev(self) -> float:
        return float(np.std(self.thresholds, ddof=1))

    def confidenceLo(self) -> float:
        return self.mean() - CONFIDENCE_95 * self.stddev() / math.sqrt(self.trialCount)

    def confidenceHi(self) -> float:
        return self.mean() + CONFIDENCE_95 * self.stddev() / math.sqrt(self.trialCount)

    def confidenceInterval(self):
        return self.confidenceLo(), self.confidenceHi()

    def report(self):
        lo, hi = self.confidenceInterval()
        print(f"mean() = {format_double(self.mean())}")
        print(f"stddev() = {format_double(self.stddev())}")
        print(f"95% confidence interval = [{format_double(lo)}, {format_double(hi)}]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate the site percolation threshold of an N x N grid by Monte Carlo simulation."
    )

    parser.add_argument(
        'n',
        type=int,
        help="Size of the square grid (N x N)."
    )

    parser.add_argument(
        'trials',
        type=int,
        help="The number of Monte Carlo trials to perform."
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help="Seed for the random number generator."
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        stats = PercolationStats(args.n, args.trials, rng=args.seed)
    except ValueError as e:
        parser.error(str(e))

    stats.report()


if __name__ == "__main__":
    main()
