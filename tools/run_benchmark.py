#!/usr/bin/env python3
"""
Search Benchmark Runner

Runs the tic-tac-toe benchmark positions with several search algorithms and
compares correctness and node counts.

Usage:
    python tools/run_benchmark.py [--algorithms minimax,alphabeta] [--verbose]
"""

import sys
import argparse
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from gametree.search.config import ALGORITHMS
from gametree.utils.benchmark import run_suite


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run_benchmark(algorithms: list[str], verbose: bool = False):
    """
    Run the benchmark suite and print a summary table.

    Args:
        algorithms: Algorithms to compare
        verbose: If True, log every position result
    """
    print("=" * 80)
    print("SEARCH BENCHMARK - gametree")
    print("=" * 80)
    print(f"Algorithms: {', '.join(algorithms)}")
    print("=" * 80)

    summary = run_suite(algorithms=algorithms, verbose=verbose)

    print()
    print(f"{'Algorithm':<12} {'Correct':<12} {'%':<8} {'Nodes':<12} {'Time':<10}")
    print("-" * 80)
    for algorithm, stats in summary.items():
        print(
            f"{algorithm:<12} {stats['score']}/{stats['total']:<10} "
            f"{stats['percentage']:<7.1f}% {stats['total_nodes']:<12,} "
            f"{format_time(stats['total_time']):<10}"
        )
    print("=" * 80)

    failed = [
        (algorithm, r)
        for algorithm, stats in summary.items()
        for r in stats['results']
        if not r.correct
    ]
    if failed:
        print("\nFailed positions:")
        for algorithm, r in failed:
            print(
                f"  [{algorithm}] {r.position.id}: expected {r.position.best_moves} "
                f"(score {r.position.expected_score}), got {r.found_move} (score {r.score})"
            )

    return summary


def main():
    parser = argparse.ArgumentParser(
        description="Compare search algorithms on tic-tac-toe positions"
    )
    parser.add_argument(
        "--algorithms",
        type=str,
        default="minimax,alphabeta",
        help="Comma-separated list of algorithms (default: minimax,alphabeta)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    algorithms = [a.strip().lower() for a in args.algorithms.split(",") if a.strip()]
    unknown = [a for a in algorithms if a not in ALGORITHMS]
    if unknown:
        logger.error(f"Unknown algorithms: {', '.join(unknown)}")
        sys.exit(1)

    try:
        summary = run_benchmark(algorithms, verbose=args.verbose)
    except KeyboardInterrupt:
        logger.warning("\n\nBenchmark interrupted by user")
        sys.exit(1)

    if any(stats['score'] != stats['total'] for stats in summary.values()):
        sys.exit(1)


if __name__ == "__main__":
    main()
