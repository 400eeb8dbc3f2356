"""
Minimax Search with Alpha-Beta Pruning

This module implements the search algorithms of the engine. All of them walk
the game tree depth-first over a single mutable game state (make_move →
recurse → take_back) and share one transposition table per top-level search.

Algorithms:
    - minimax: Plain minimax, explores every legal move (reference baseline)
    - negamax: Symmetric formulation on side-relative scores
    - alpha_beta: Fail-soft alpha-beta with transposition table (default)

Score Convention:
    minimax and alpha_beta use the absolute scale of ZeroSumGame.evaluate()
    (positive = maximizing side). negamax uses evaluate_relative() (positive =
    side to move), so its table must never be mixed with the other two.

Algorithm Complexity:
    - Minimax: O(b^d) where b=branching factor, d=depth
    - Alpha-Beta: O(b^(d/2)) with perfect move ordering

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Negamax: https://www.chessprogramming.org/Negamax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
    - Fail-Soft: https://www.chessprogramming.org/Fail-Soft
"""

import logging
from typing import List, NamedTuple, Optional, Tuple

from gametree.game.base import Move, ZeroSumGame
from gametree.search.config import SearchConfig
from gametree.search.ordering import order_moves
from gametree.search.transposition import SearchStats, TranspositionTable, TTEntry

logger = logging.getLogger(__name__)

INFINITY = float("inf")


class SearchResult(NamedTuple):
    """
    Result of a best-move search.

    Attributes:
        best_move: Best move at the root (None if the root is terminal or depth is 0)
        score: Root score on the absolute scale
        nodes: Number of nodes visited
        pv: Principal variation, starting with best_move
        entry: Raw transposition entry of the root. For negamax its score is
            relative to the side to move, unlike score
    """

    best_move: Optional[Move]
    score: float
    nodes: int
    pv: List[Move]
    entry: Optional[TTEntry]


def _open_node(
    game: ZeroSumGame,
    stats: SearchStats,
    depth: int,
    relative: bool = False,
) -> Tuple[str, float, Optional[List[Move]]]:
    """
    Steps shared by every algorithm before the children of a node are searched.

    Counts the node, probes the table, then resolves terminal positions,
    frontier nodes and positions without legal moves.

    Args:
        game: Current game state
        stats: Shared search state
        depth: Remaining search depth
        relative: Evaluate relative to the side to move (negamax)

    Returns:
        Tuple of (key, score, moves)
            - key: Hash key of the position
            - score: Value of the node if it was resolved here
            - moves: Ordered moves to search, None if the node is resolved
    """
    stats.nodes += 1
    key = game.hash_key()

    cached_score, hint = stats.table.probe(key, depth)
    if cached_score is not None:
        return key, cached_score, None

    is_exact, score = game.evaluate_relative() if relative else game.evaluate()

    if is_exact:
        stats.store(key, TTEntry(score, depth, is_terminal=True))
        return key, score, None

    # Frontier: keep the heuristic as a depth 0 value, deeper searches replace it
    if depth <= 0:
        stats.store(key, TTEntry(score, 0))
        return key, score, None

    moves = list(game.legal_moves())
    if stats.trace:
        logger.debug(f"key: {key}, depth: {depth}, moves: {moves}")

    # No moves although the evaluator did not call the game over (stalemate)
    if not moves:
        stats.store(key, TTEntry(score, depth, is_terminal=True))
        return key, score, None

    return key, score, order_moves(moves, hint)


def minimax(game: ZeroSumGame, stats: SearchStats, depth: int) -> float:
    """
    Minimax search without pruning.

    Every legal move is explored at every node. Used as the baseline to
    validate alpha_beta scores and node counts.

    Args:
        game: Current game state (unchanged when the call returns)
        stats: Shared search state of this top-level search
        depth: Remaining search depth

    Returns:
        float: Minimax value of the position on the absolute scale
    """
    key, score, moves = _open_node(game, stats, depth)
    if moves is None:
        return score

    maximizing = game.is_max_player_turn()
    best_score = -INFINITY if maximizing else INFINITY
    best_move = moves[0]

    for move in moves:
        game.make_move(move)
        child_score = minimax(game, stats, depth - 1)
        game.take_back()

        if stats.trace:
            logger.debug(f"key: {key}, child: {move}, score: {child_score}, best: {best_score}")

        if maximizing:
            if child_score > best_score:
                best_score = child_score
                best_move = move
        else:
            if child_score < best_score:
                best_score = child_score
                best_move = move

    stats.store(key, TTEntry(best_score, depth, best_move))
    return best_score


def negamax(game: ZeroSumGame, stats: SearchStats, depth: int) -> float:
    """
    Negamax search without pruning.

    Scores are relative to the side to move, so a child's score is negated
    and every node maximizes. Gives the same decisions as minimax.

    Args:
        game: Current game state (unchanged when the call returns)
        stats: Search state used ONLY for negamax (relative scores)
        depth: Remaining search depth

    Returns:
        float: Value of the position for the side to move
    """
    key, score, moves = _open_node(game, stats, depth, relative=True)
    if moves is None:
        return score

    best_score = -INFINITY
    best_move = moves[0]

    for move in moves:
        game.make_move(move)
        child_score = -negamax(game, stats, depth - 1)
        game.take_back()

        if child_score > best_score:
            best_score = child_score
            best_move = move

    stats.store(key, TTEntry(best_score, depth, best_move))
    return best_score


def alpha_beta(
    game: ZeroSumGame,
    stats: SearchStats,
    depth: int,
    alpha: float = -INFINITY,
    beta: float = INFINITY,
) -> float:
    """
    Fail-soft alpha-beta search with transposition table.

    Args:
        game: Current game state (unchanged when the call returns)
        stats: Shared search state of this top-level search
        depth: Remaining search depth
        alpha: Score the maximizer is already guaranteed elsewhere
        beta: Score the minimizer is already guaranteed elsewhere

    Returns:
        float: Value of the position. A node cut off before its last move
        returns only a bound and is stored bound-only.

    Algorithm:
        1. Probe the table (terminal / deep enough exact entry → return)
        2. Resolve terminal, frontier and no-move nodes
        3. Search the hint move first, then the rest in generator order
        4. Each improvement of the best score narrows the window handed to
           the next sibling
        5. Stop as soon as the best score leaves the window (cutoff)
        6. Store the node, flagged bound-only if the cutoff skipped siblings
    """
    key, score, moves = _open_node(game, stats, depth)
    if moves is None:
        return score

    maximizing = game.is_max_player_turn()
    best_score = -INFINITY if maximizing else INFINITY
    best_move = moves[0]
    is_cut_node = False

    for i, move in enumerate(moves):
        game.make_move(move)
        child_score = alpha_beta(game, stats, depth - 1, alpha, beta)
        game.take_back()

        if stats.trace:
            logger.debug(
                f"key: {key}, child: {move}, score: {child_score}, "
                f"window: [{alpha}, {beta}]"
            )

        if maximizing:
            if child_score > best_score:
                best_score = child_score
                best_move = move
                alpha = max(alpha, best_score)
                if best_score >= beta:
                    is_cut_node = i != len(moves) - 1
                    if stats.trace and is_cut_node:
                        logger.debug(f"beta cut: key: {key}, child: {move}, best: {best_score}, beta: {beta}")
                    break
        else:
            if child_score < best_score:
                best_score = child_score
                best_move = move
                beta = min(beta, best_score)
                if best_score <= alpha:
                    is_cut_node = i != len(moves) - 1
                    if stats.trace and is_cut_node:
                        logger.debug(f"alpha cut: key: {key}, child: {move}, best: {best_score}, alpha: {alpha}")
                    break

    # Only a cutoff before the last move leaves siblings unexplored
    stats.store(key, TTEntry(best_score, depth, best_move, is_bound_only=is_cut_node))
    return best_score


def principal_variation(
    game: ZeroSumGame,
    table: TranspositionTable,
    max_length: int = 32,
) -> List[Move]:
    """
    Extract the principal variation from the transposition table.

    Follows the best move of exact entries from the current position. The game
    is restored before returning.

    Args:
        game: Root position of the search
        table: Table filled by the search
        max_length: Maximum number of moves returned

    Returns:
        List of moves, best move of the root first
    """
    pv: List[Move] = []
    seen = set()

    try:
        while len(pv) < max_length:
            key = game.hash_key()
            if key in seen:
                break
            seen.add(key)

            entry = table.lookup(key)
            if (
                entry is None
                or entry.is_terminal
                or entry.is_bound_only
                or entry.depth == 0
                or entry.best_move is None
            ):
                break

            if not game.make_move(entry.best_move):
                break
            pv.append(entry.best_move)
    finally:
        for _ in pv:
            game.take_back()

    return pv


def calc_best_move(
    game: ZeroSumGame,
    depth: int,
    config: Optional[SearchConfig] = None,
) -> SearchResult:
    """
    Find the best move in the current position.

    A fresh transposition table is used for every call, so results never
    depend on earlier searches.

    Args:
        game: Current game state (unchanged when the call returns)
        depth: Search depth in plies
        config: Search configuration (alpha-beta without tracing if None)

    Returns:
        SearchResult of (best_move, score, nodes, pv, entry)

    Raises:
        ValueError: If depth is negative
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    if config is None:
        config = SearchConfig()

    stats = SearchStats(trace=config.trace, dump_table=config.dump_table)

    if config.algorithm == "minimax":
        minimax(game, stats, depth)
    elif config.algorithm == "negamax":
        negamax(game, stats, depth)
    else:
        alpha_beta(game, stats, depth, -INFINITY, INFINITY)

    entry = stats.table.lookup(game.hash_key())
    score = entry.score
    if config.algorithm == "negamax" and not game.is_max_player_turn():
        score = -score

    if entry.is_terminal or entry.depth == 0:
        best_move = None
        pv = []
    else:
        best_move = entry.best_move
        pv = principal_variation(game, stats.table, config.pv_length)

    logger.debug(
        f"{config.algorithm} depth {depth}: best move {best_move}, score {score}, "
        f"nodes {stats.nodes}, table {stats.table.get_stats()}"
    )

    return SearchResult(best_move, score, stats.nodes, pv, entry)
