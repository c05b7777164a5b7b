import argparse
import logging
from typing import List, NamedTuple, Sequence

import numpy as np
from scipy.stats import linregress

from percolation_stats import PercolationStats

logger = logging.getLogger(__name__)


class SweepPoint(NamedTuple):
    size: int
    mean: float
    stddev: float
    confidence_lo: float
    confidence_hi: float


class Extrapolation(NamedTuple):
    pc_inf: float
    slope: float
    r_squared: float
    exponent: float


def sweep(l_values: Sequence[int], trials: int, seed=None, workers: int = 1) -> List[SweepPoint]:
    """
    Runs PercolationStats once per grid size.

    Each size gets its own child of SeedSequence(seed) so adding a size
    does not change the samples of the others.
    """
    l_values = [int(n) for n in l_values]
    children = np.random.SeedSequence(seed).spawn(len(l_values))

    points = []
    for n_value, child in zip(l_values, children):
        logger.info("simulate n = %d", n_value)
        stats = PercolationStats(n_value, trials, seed=child, workers=workers)
        lo, hi = stats.confidence_interval()
        points.append(SweepPoint(n_value, stats.mean(), stats.stddev(), lo, hi))
    return points


def extrapolate(points: Sequence[SweepPoint], exponent: float = -3/4) -> Extrapolation:
    """
    Fits mean p_c(L) against L^exponent and returns the intercept as the
    infinite-size threshold p_c(infinity).
    """
    sizes = np.asarray([p.size for p in points], dtype=float)
    if len(np.unique(sizes)) < 2:
        raise ValueError("extrapolation needs at least two distinct grid sizes")

    means = np.asarray([p.mean for p in points], dtype=float)
    x_scaling = sizes ** exponent

    slope, intercept, r_value, p_value, std_err = linregress(x_scaling, means)
    return Extrapolation(float(intercept), float(slope), float(r_value**2), exponent)


def report(points: Sequence[SweepPoint], fit: Extrapolation = None):
    print("="*60)
    print(f"{'L':>6} {'mean':>12} {'stddev':>12} {'confidenceLo':>13} {'confidenceHi':>13}")
    for p in points:
        print(f"{p.size:>6} {p.mean:>12.6f} {p.stddev:>12.6f} {p.confidence_lo:>13.6f} {p.confidence_hi:>13.6f}")
    print("="*60)

    if fit is not None:
        print(f"\n--- Extrapolation Results (exponent {fit.exponent:.2f}) ---")
        print(f"pc(infinity) = {fit.pc_inf:.6f}, R^2 = {fit.r_squared:.4f}")
        print("-------------------------------------------------------")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Run a Monte Carlo percolation threshold sweep over square grid sizes."
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
        help="The number of Monte Carlo trials to perform per grid size."
    )
    parser.add_argument('--seed', type=int, default=None, help="Seed for reproducible runs.")
    parser.add_argument('--workers', type=int, default=1, help="Number of worker processes.")
    parser.add_argument('--log-level', default="INFO", help="Logging level (DEBUG, INFO, ...).")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    if args.Lstep <= 0:
        parser.error("Lstep must be a positive integer")
    l_values = list(range(args.Lmin, args.Lmax + 1, args.Lstep))
    if not l_values:
        parser.error("no grid sizes between Lmin and Lmax")

    logger.info("system sizes (N): %d to %d, step %d; trials per size: %d",
                args.Lmin, args.Lmax, args.Lstep, args.t)

    try:
        points = sweep(l_values, args.t, seed=args.seed, workers=args.workers)
    except ValueError as e:
        logger.error("invalid arguments: %s", e)
        parser.error(str(e))

    fit = extrapolate(points) if len(l_values) >= 2 else None
    report(points, fit)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
