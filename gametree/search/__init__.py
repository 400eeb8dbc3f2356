"""
Search Module

This module implements the game-agnostic search algorithms. The primary
algorithm is minimax with alpha-beta pruning, enhanced with a transposition
table that caches results and supplies move-ordering hints.

Key Components:
    - calc_best_move: Root-level search function
    - alpha_beta: Fail-soft alpha-beta search (default)
    - minimax / negamax: Unpruned reference algorithms
    - TranspositionTable / SearchStats: Per-search cache and node counter
    - order_moves: Hint move first ordering
    - SearchConfig: Algorithm and logging options

"""

from gametree.search.config import SearchConfig
from gametree.search.minimax import (
    SearchResult,
    alpha_beta,
    calc_best_move,
    minimax,
    negamax,
    principal_variation,
)
from gametree.search.ordering import order_moves
from gametree.search.transposition import SearchStats, TranspositionTable, TTEntry

__all__ = [
    'calc_best_move',
    'alpha_beta',
    'minimax',
    'negamax',
    'principal_variation',
    'order_moves',
    'SearchConfig',
    'SearchResult',
    'SearchStats',
    'TranspositionTable',
    'TTEntry',
]
