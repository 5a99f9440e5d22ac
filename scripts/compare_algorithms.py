"""Compare comparison and swap counts of every algorithm across input kinds.

Runs each registered algorithm on the same random, reversed and nearly
sorted arrays (fixed seed) and prints one table per input kind.
"""

from __future__ import annotations

import argparse
import logging

from sortviz.api import compare_algorithms
from sortviz.data_gen import generate
from sortviz import constants

logging.basicConfig(level=logging.INFO, format="%(message)s")
logging.getLogger("sortviz").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Compare sorting algorithm statistics")
    parser.add_argument("--size", "-n", type=int, default=constants.DEFAULT_ARRAY_SIZE)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    for kind in constants.DATA_KINDS:
        values = generate(kind, args.size, seed=args.seed)
        results = compare_algorithms(values)
        logger.info("═══ %s (n=%d) ═══", kind, args.size)
        logger.info("  %-10s %12s %8s %8s", "algorithm", "comparisons", "swaps", "steps")
        for key, stats in results.items():
            logger.info(
                "  %-10s %12d %8d %8d", key, stats.comparisons, stats.swaps, stats.steps
            )
        logger.info("")


if __name__ == "__main__":
    main()
