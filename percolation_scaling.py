"""
Finite-size scaling of the site percolation threshold.

Runs the Monte Carlo experiment over a range of grid sizes L and
extrapolates the infinite-lattice threshold pc(infinity) from a linear fit
of the mean thresholds against L**exponent.
"""

import argparse
from collections import namedtuple

import numpy as np
from scipy.stats import linregress

from percolation_stats import PercolationStats, make_rng

ScalingResult = namedtuple('ScalingResult', ['sizes', 'means', 'stddevs'])
Extrapolation = namedtuple('Extrapolation', ['pc_inf', 'slope', 'r_squared'])

# correlation-length exponent nu = 4/3 for 2D percolation
DEFAULT_EXPONENT = -3 / 4


def sweep(sizes, trials: int, rng=None, verbose: bool = False) -> ScalingResult:
    """
    Runs one PercolationStats experiment per grid size.

    :param sizes: Grid sizes L to simulate.
    :param trials: Monte Carlo trials per size.
    :param rng: Generator or seed shared by every size.
    :param verbose: Print a report block for each size.
    """
    sizes = np.asarray(sizes, dtype=int)
    if sizes.size == 0:
        raise ValueError("at least one grid size is required")

    rng = make_rng(rng)
    means = []
    stddevs = []

    for n_value in sizes:
        stats = PercolationStats(int(n_value), trials, rng=rng)
        means.append(stats.mean())
        stddevs.append(stats.stddev())

        if verbose:
            print("=" * 60)
            print(f"grid size n = {n_value}")
            print("=" * 60)
            stats.report()

    return ScalingResult(sizes, np.array(means), np.array(stddevs))


def extrapolate(sizes, means, exponent: float = DEFAULT_EXPONENT) -> Extrapolation:
    """
    Fits means = slope * L**exponent + pc_inf; the intercept estimates the
    threshold of the infinite lattice.
    """
    sizes = np.asarray(sizes, dtype=float)
    means = np.asarray(means, dtype=float)
    if sizes.size < 2:
        raise ValueError("extrapolation needs at least two grid sizes")

    X_scaling = sizes ** exponent
    slope, intercept, r_value, p_value, std_err = linregress(X_scaling, means)
    return Extrapolation(float(intercept), float(slope), float(r_value ** 2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a Monte Carlo finite-size scaling study of 2D site percolation."
    )

    parser.add_argument(
        '--Lmin',
        type=int,
        default=50,
        help="Minimum size of the square grid (N_min x N_min)."
    )

    parser.add_argument(
        '--Lmax',
        type=int,
        default=200,
        help="Maximum size of the square grid (N_max x N_max)."
    )

    parser.add_argument(
        '--Lstep',
        type=int,
        default=50,
        help="Step size for increasing the grid size N."
    )

    parser.add_argument(
        '--t',
        type=int,
        default=500,
        help="The number of Monte Carlo trials to perform per size."
    )

    parser.add_argument(
        '--exponent',
        type=float,
        default=DEFAULT_EXPONENT,
        help="Scaling exponent applied to L in the extrapolation fit."
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

    if args.Lstep <= 0:
        parser.error("--Lstep must be a positive integer")
    L_values = np.arange(args.Lmin, args.Lmax + 1, args.Lstep)

    print("Starting Monte Carlo Percolation Analysis...")
    print(f"System sizes (N): {args.Lmin} to {args.Lmax}, step {args.Lstep}")
    print(f"Trials per size: {args.t}")

    try:
        result = sweep(L_values, args.t, rng=args.seed, verbose=True)
    except ValueError as e:
        parser.error(str(e))

    print("\n--- Simulation Complete ---")

    if len(result.sizes) < 2:
        print("Need at least two grid sizes to extrapolate pc(infinity).")
        return

    fit = extrapolate(result.sizes, result.means, exponent=args.exponent)
    print(f"\n--- Extrapolation Results (exponent {args.exponent:.2f}) ---")
    print(f"pc(infinity) = {fit.pc_inf:.6f}, R^2 = {fit.r_squared:.4f}")
    print("-------------------------------------------------------")


if __name__ == "__main__":
    main()
