"""
Search Benchmarking

This module provides a small test suite of tic-tac-toe positions with known
best moves and compares the search algorithms on them.

Evaluation Metrics:
    - Correct Moves: Positions where the algorithm found an expected move
    - Nodes Searched: Recursive calls made (alpha-beta should need fewer)
    - Time per Position: Wall-clock search time
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from tqdm import tqdm

from gametree.games.tictactoe import TicTacToe
from gametree.search.config import SearchConfig
from gametree.search.minimax import calc_best_move

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkPosition:
    """
    A tic-tac-toe position with expected result.

    Attributes:
        rows: Board as three row strings ("X", "O", ".")
        x_to_move: Side to move
        best_moves: Acceptable best cells (None = any move)
        expected_score: Expected root score (None = not checked)
        depth: Search depth (None = search to the end of the game)
        description: Human-readable description of the position
        id: Position identifier (e.g., "TTT.01")
    """
    rows: Tuple[str, str, str]
    x_to_move: bool = True
    best_moves: Optional[List[int]] = None
    expected_score: Optional[float] = None
    depth: Optional[int] = None
    description: str = ""
    id: str = ""

    def create_game(self) -> TicTacToe:
        return TicTacToe.from_rows(*self.rows, x_to_move=self.x_to_move)


@dataclass
class BenchmarkResult:
    """
    Result of searching a single position with one algorithm.

    Attributes:
        position: The benchmark position
        algorithm: Search algorithm used
        found_move: Cell the engine chose (None if no move)
        score: Root score
        correct: Whether move and score match the expectation
        time_taken: Time spent searching (seconds)
        nodes_searched: Number of nodes visited
        depth: Search depth used
    """
    position: BenchmarkPosition
    algorithm: str
    found_move: Optional[int]
    score: float
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    depth: int = 0


TICTACTOE_POSITIONS = [
    BenchmarkPosition(
        id="TTT.01",
        rows=("XX.", "XO.", "O.O"),
        x_to_move=True,
        best_moves=[2],
        expected_score=1.0,
        description="X completes the top row",
    ),
    BenchmarkPosition(
        id="TTT.02",
        rows=("XO.", "XX.", "O.O"),
        x_to_move=True,
        best_moves=[5],
        expected_score=1.0,
        description="X completes the middle row",
    ),
    BenchmarkPosition(
        id="TTT.03",
        rows=("X..", "...", "..."),
        x_to_move=False,
        best_moves=[4],
        expected_score=0.0,
        description="O must take the center against a corner opening",
    ),
    BenchmarkPosition(
        id="TTT.04",
        rows=("...", ".X.", "..."),
        x_to_move=False,
        best_moves=[0, 2, 6, 8],
        expected_score=0.0,
        description="O must take a corner against a center opening",
    ),
    BenchmarkPosition(
        id="TTT.05",
        rows=("...", "...", "..."),
        x_to_move=True,
        expected_score=0.0,
        description="Empty board is a draw",
    ),
]


def run_position(
    position: BenchmarkPosition,
    algorithm: str = "alphabeta",
    verbose: bool = False,
) -> BenchmarkResult:
    """
    Search a single benchmark position.

    Args:
        position: Position to search
        algorithm: 'alphabeta', 'minimax' or 'negamax'
        verbose: If True, log the outcome at INFO level

    Returns:
        BenchmarkResult with the engine's move and whether it was correct
    """
    game = position.create_game()
    depth = position.depth if position.depth is not None else len(game.legal_moves())
    config = SearchConfig(algorithm=algorithm)

    start_time = time.time()
    result = calc_best_move(game, depth, config)
    time_taken = time.time() - start_time

    found_move = result.best_move.target if result.best_move is not None else None
    correct = True
    if position.best_moves is not None:
        correct = found_move in position.best_moves
    if position.expected_score is not None:
        correct = correct and result.score == position.expected_score

    if verbose:
        logger.info(
            f"{position.id} [{algorithm}]: move {found_move}, score {result.score}, "
            f"nodes {result.nodes:,}, {'CORRECT' if correct else 'WRONG'}"
        )

    return BenchmarkResult(
        position=position,
        algorithm=algorithm,
        found_move=found_move,
        score=result.score,
        correct=correct,
        time_taken=time_taken,
        nodes_searched=result.nodes,
        depth=depth,
    )


def run_suite(
    positions: Optional[Sequence[BenchmarkPosition]] = None,
    algorithms: Sequence[str] = ("minimax", "alphabeta"),
    verbose: bool = False,
    show_progress: bool = True,
) -> Dict[str, Dict[str, Any]]:
    """
    Run every position with every algorithm.

    Args:
        positions: Positions to search (default: TICTACTOE_POSITIONS)
        algorithms: Algorithms to compare
        verbose: If True, log every result
        show_progress: Display a tqdm progress bar

    Returns:
        Dictionary keyed by algorithm, each with:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - total_nodes: Nodes searched over the suite
            - total_time: Time spent over the suite
            - results: List of BenchmarkResult objects
    """
    if positions is None:
        positions = TICTACTOE_POSITIONS

    summary: Dict[str, Dict[str, Any]] = {}
    jobs = [(algorithm, position) for algorithm in algorithms for position in positions]

    for algorithm, position in tqdm(jobs, desc="Searching", disable=not show_progress):
        result = run_position(position, algorithm, verbose=verbose)
        stats = summary.setdefault(algorithm, {'results': []})
        stats['results'].append(result)

    for algorithm, stats in summary.items():
        results = stats['results']
        correct_count = sum(1 for r in results if r.correct)
        stats['score'] = correct_count
        stats['total'] = len(results)
        stats['percentage'] = correct_count / len(results) * 100 if results else 0
        stats['total_nodes'] = sum(r.nodes_searched for r in results)
        stats['total_time'] = sum(r.time_taken for r in results)

        logger.debug(
            f"{algorithm}: {correct_count}/{len(results)} correct, "
            f"{stats['total_nodes']:,} nodes"
        )

    return summary
