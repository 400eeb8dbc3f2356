"""
Utilities Module

This module provides benchmarking helpers for the search engine.

Key Components:
    - TICTACTOE_POSITIONS: Positions with known best moves
    - run_position / run_suite: Compare algorithms on correctness and nodes
"""

from gametree.utils.benchmark import (
    BenchmarkPosition,
    BenchmarkResult,
    TICTACTOE_POSITIONS,
    run_position,
    run_suite,
)

__all__ = [
    'BenchmarkPosition',
    'BenchmarkResult',
    'TICTACTOE_POSITIONS',
    'run_position',
    'run_suite',
]
