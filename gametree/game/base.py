"""
Abstract Zero-Sum Game Interface

This module defines the abstract base class every game must implement to be
searched by the engine. The search algorithms never look inside a board or a
move: they only go through the methods below, so any two-player, zero-sum,
perfect-information game can be plugged in.

Key Principles:
    1. The game state is mutable: make_move() and take_back() work in place
    2. take_back() must restore the exact state before the last make_move()
    3. evaluate() returns scores on ONE fixed scale (positive = maximizer)
    4. hash_key() must differ for positions with different continuations

Moves:
    Moves are opaque objects. The engine only compares two moves with ``==``,
    so a move type must return False (or NotImplemented) when compared with a
    move of another type instead of raising. Frozen dataclasses and
    ``chess.Move`` both behave this way.

Move Ordering:
    legal_moves() should return promising moves first. The engine only
    promotes the previously best move to the front, so the quality of the
    generator's own ordering directly affects how much alpha-beta prunes.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Tuple

# Opaque move type supplied by the game
Move = Any


class ZeroSumGame(ABC):
    """
    Abstract base class for a searchable two-player game.

    Methods:
        legal_moves(): Ordered list of legal moves
        make_move(move): Apply a move in place
        take_back(): Undo the most recent move
        evaluate(): (is_exact, score) on the absolute scale
        is_max_player_turn(): Whether the maximizing side is to move
        hash_key(): Unique key for (board, side to move)
    """

    @abstractmethod
    def legal_moves(self) -> List[Move]:
        """
        Return the currently legal moves, best candidates first.

        Returns:
            List of moves (empty if the side to move has no moves)
        """
        pass

    @abstractmethod
    def make_move(self, move: Move) -> bool:
        """
        Apply a move to the game state.

        Args:
            move: Move to play

        Returns:
            bool: False if the move is not legal (state unchanged)
        """
        pass

    @abstractmethod
    def take_back(self) -> None:
        """Undo the most recently applied move."""
        pass

    @abstractmethod
    def evaluate(self) -> Tuple[bool, float]:
        """
        Evaluate the current position.

        Returns:
            Tuple of (is_exact, score)
                - is_exact: True if the game is over (win, loss or draw)
                - score: Evaluation, positive favours the maximizing side
        """
        pass

    @abstractmethod
    def is_max_player_turn(self) -> bool:
        """Return True if the side to move prefers the highest score."""
        pass

    @abstractmethod
    def hash_key(self) -> str:
        """Return a key uniquely identifying the position and side to move."""
        pass

    def evaluate_relative(self) -> Tuple[bool, float]:
        """
        Evaluate the position relative to the side to move.

        Used by negamax. The default implementation negates evaluate() when
        the minimizing side is to move; games with a native side-relative
        evaluator can override it.

        Returns:
            Tuple of (is_exact, score), positive favours the side to move
        """
        is_exact, score = self.evaluate()
        if self.is_max_player_turn():
            return is_exact, score
        return is_exact, -score

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.hash_key()!r})"
