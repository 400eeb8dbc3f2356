"""
Tic-Tac-Toe

Reference implementation of the ZeroSumGame interface on a 3x3 board.

Board Representation:
    numpy int8 array of 9 cells, row-major (cell 0 = top left):
        +1 = X, -1 = O, 0 = empty
    X always moves first and is the maximizing side.

Evaluation:
    +1 if X has three in a row, -1 if O has, 0 for a draw (all exact).
    Unfinished positions evaluate to 0 (not exact).
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from gametree.game.base import ZeroSumGame
from gametree.search.config import SearchConfig
from gametree.search.minimax import calc_best_move

WIDTH = 3
HEIGHT = 3

X = 1
O = -1
EMPTY = 0

PIECE_SYMBOLS = {X: "X", O: "O", EMPTY: "."}

# Every line of three cells: rows, columns, diagonals
WIN_LINES = np.array([
    [0, 1, 2],
    [3, 4, 5],
    [6, 7, 8],
    [0, 3, 6],
    [1, 4, 7],
    [2, 5, 8],
    [0, 4, 8],
    [2, 4, 6],
])


class Result(Enum):
    """Result of the game from the point of view of X (first player)."""
    X_WIN = "XWin"
    DRAW = "XDraw"
    X_LOSS = "XLoss"
    PLAYING = "Playing"


@dataclass(frozen=True)
class TicTacToeMove:
    """Placing the side to move's piece on a cell."""
    target: int

    def __str__(self) -> str:
        return str(self.target)


class TicTacToe(ZeroSumGame):
    """
    Tic-tac-toe game state with move history.

    Attributes:
        squares: Cells of the board (see module docstring)
        is_x_turn: True if X is to move
        history: Moves played, for take_back()
    """

    def __init__(self):
        self.squares = np.zeros(WIDTH * HEIGHT, dtype=np.int8)
        self.is_x_turn = True
        self.history: List[TicTacToeMove] = []

    @classmethod
    def from_rows(cls, *rows: str, x_to_move: bool = True) -> "TicTacToe":
        """
        Build a position from row strings.

        Args:
            rows: Three strings of three characters, "X", "O" or "." / "_"
            x_to_move: Side to move

        Returns:
            TicTacToe: The position (with an empty history)

        Raises:
            ValueError: If the board text is malformed

        Example:
            >>> TicTacToe.from_rows("XX.", "XO.", "O.O")
        """
        if len(rows) != HEIGHT or any(len(row) != WIDTH for row in rows):
            raise ValueError(f"expected {HEIGHT} rows of {WIDTH} cells, got {rows}")

        board = cls()
        for i, char in enumerate("".join(rows).upper()):
            if char == "X":
                board.squares[i] = X
            elif char == "O":
                board.squares[i] = O
            elif char in "._ ":
                board.squares[i] = EMPTY
            else:
                raise ValueError(f"invalid cell {char!r} at index {i}")
        board.is_x_turn = x_to_move
        return board

    def check_result(self) -> Result:
        """Return the result of the game so far."""
        line_sums = self.squares[WIN_LINES].sum(axis=1)
        if (line_sums == 3 * X).any():
            return Result.X_WIN
        if (line_sums == 3 * O).any():
            return Result.X_LOSS
        if not (self.squares == EMPTY).any():
            return Result.DRAW
        return Result.PLAYING

    def legal_moves(self) -> List[TicTacToeMove]:
        """Empty cells in index order (none once the game is decided)."""
        if self.check_result() != Result.PLAYING:
            return []
        return [TicTacToeMove(int(i)) for i in np.flatnonzero(self.squares == EMPTY)]

    def make_move(self, move: TicTacToeMove) -> bool:
        if not isinstance(move, TicTacToeMove):
            return False
        if not 0 <= move.target < WIDTH * HEIGHT or self.squares[move.target] != EMPTY:
            return False

        self.squares[move.target] = X if self.is_x_turn else O
        self.is_x_turn = not self.is_x_turn
        self.history.append(move)
        return True

    def take_back(self) -> None:
        if not self.history:
            return
        last_move = self.history.pop()
        self.squares[last_move.target] = EMPTY
        self.is_x_turn = not self.is_x_turn

    def evaluate(self) -> Tuple[bool, float]:
        result = self.check_result()
        if result == Result.X_WIN:
            return True, 1.0
        if result == Result.X_LOSS:
            return True, -1.0
        if result == Result.DRAW:
            return True, 0.0
        return False, 0.0

    def is_max_player_turn(self) -> bool:
        return self.is_x_turn

    def hash_key(self) -> str:
        one_line = str(self).replace("\n", "|")
        turn = PIECE_SYMBOLS[X] if self.is_x_turn else PIECE_SYMBOLS[O]
        return f"{one_line}|t{turn}"

    def calc_best_move(self, config: Optional[SearchConfig] = None) -> Optional[TicTacToeMove]:
        """
        Search the whole remaining game tree for the best move.

        Returns:
            Best move, or None if the game is over
        """
        depth = len(self.legal_moves())
        return calc_best_move(self, depth, config).best_move

    def calc_random_move(self, rng: Optional[random.Random] = None) -> TicTacToeMove:
        """
        Pick a uniformly random legal move.

        Raises:
            ValueError: If no legal moves are available
        """
        legal = self.legal_moves()
        if not legal:
            raise ValueError("No legal moves available")
        return (rng or random).choice(legal)

    def __str__(self) -> str:
        rows = []
        for row in range(HEIGHT):
            cells = self.squares[row * WIDTH:(row + 1) * WIDTH]
            rows.append(" ".join(PIECE_SYMBOLS[int(cell)] for cell in cells))
        return "\n".join(rows)
