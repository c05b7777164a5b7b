"""
Monte Carlo estimate of the site percolation threshold of an N-by-N grid.

Each trial opens uniformly random closed sites of a fresh grid until it
percolates and records the fraction of open sites at that moment. The
samples of T trials give the mean threshold, its standard deviation and
a 95% confidence interval.

Usage:
    python percolation_stats.py 200 100 --seed 7 --workers 4
"""

import argparse
import logging
import math
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat

import numpy as np

from square_percolation import Percolation

logger = logging.getLogger(__name__)

CONFIDENCE_Z = 1.96


def run_trial(n: int, rng) -> float:
    """
    Runs a single trial on a fresh n-by-n grid.

    Args:
        n: grid size
        rng: random source with a numpy Generator style integers(low, high)

    Returns:
        fraction of sites open when the grid first percolates
    """
    simulator = Percolation(n)
    openSites = 0
    while not simulator.percolates():
        row = int(rng.integers(1, n + 1))
        col = int(rng.integers(1, n + 1))
        while simulator.isOpen(row, col):
            row = int(rng.integers(1, n + 1))
            col = int(rng.integers(1, n + 1))
        simulator.open_site(row, col)
        openSites += 1
    return openSites / (n * n)


def _seeded_trial(n: int, seed_seq: np.random.SeedSequence) -> float:
    return run_trial(n, np.random.default_rng(seed_seq))


class PercolationStats:
    """
    T independent trials on an N-by-N grid.

    Every trial draws from its own Generator spawned off
    SeedSequence(seed), so a given seed reproduces the same samples no
    matter how many worker processes run them. seed may be an int, None
    or a SeedSequence.
    """

    def __init__(self, n: int, trials: int, seed=None, workers: int = 1):
        if n <= 0 or trials <= 0:
            raise ValueError("grid size n and trials count must be positive integers")
        if workers <= 0:
            raise ValueError("workers must be a positive integer")

        self.gridSize = n
        self.trialCount = trials
        self.workers = workers

        if not isinstance(seed, np.random.SeedSequence):
            seed = np.random.SeedSequence(seed)
        children = seed.spawn(trials)
        logger.info("running %d trials on a %dx%d grid with %d worker(s)", trials, n, n, workers)

        if workers == 1:
            samples = []
            for i, seed_seq in enumerate(children):
                samples.append(_seeded_trial(n, seed_seq))
                logger.debug("trial %d/%d: p = %.6f", i + 1, trials, samples[-1])
        else:
            chunksize = max(1, trials // (workers * 4))
            with ProcessPoolExecutor(max_workers=workers) as ex:
                samples = list(ex.map(_seeded_trial, repeat(n), children, chunksize=chunksize))

        self.trialResults = np.asarray(samples, dtype=float)
        self.trialResults.setflags(write=False)

    @property
    def results(self) -> np.ndarray:
        return self.trialResults

    def mean(self) -> float:
        return float(np.mean(self.trialResults))

    def stddev(self) -> float:
        # sample standard deviation, undefined for a single trial
        if self.trialCount == 1:
            return float("nan")
        return float(np.std(self.trialResults, ddof=1))

    def _half_width(self) -> float:
        return (CONFIDENCE_Z * self.stddev()) / math.sqrt(self.trialCount)

    def confidenceLo(self) -> float:
        return self.mean() - self._half_width()

    def confidenceHi(self) -> float:
        return self.mean() + self._half_width()

    def confidence_interval(self):
        return self.confidenceLo(), self.confidenceHi()

    def report(self):
        print(f"mean          = {self.mean():.10f}")
        print(f"stddev        = {self.stddev():.10f}")
        print(f"confidenceLo  = {self.confidenceLo():.10f}")
        print(f"confidenceHi  = {self.confidenceHi():.10f}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Estimate the percolation threshold of an N-by-N grid by Monte Carlo simulation."
    )
    parser.add_argument('n', type=int, help="Size of the square grid (N x N).")
    parser.add_argument('trials', type=int, help="The number of Monte Carlo trials to perform.")
    parser.add_argument('--seed', type=int, default=None, help="Seed for reproducible runs.")
    parser.add_argument('--workers', type=int, default=1, help="Number of worker processes.")
    parser.add_argument('--log-level', default="WARNING", help="Logging level (DEBUG, INFO, ...).")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        stats = PercolationStats(args.n, args.trials, seed=args.seed, workers=args.workers)
    except ValueError as e:
        logger.error("invalid arguments: %s", e)
        parser.error(str(e))

    stats.report()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
