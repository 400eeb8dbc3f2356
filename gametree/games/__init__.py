"""
Games Module

Concrete games implementing the ZeroSumGame interface. They are reference
collaborators of the engine: used by the tests, the benchmark suite and as
examples for writing new games.

Key Components:
    - TicTacToe: 3x3 tic-tac-toe, small enough to search exhaustively
    - ChessGame: python-chess adapter with material evaluation
"""

from gametree.games.tictactoe import TicTacToe, TicTacToeMove, Result
from gametree.games.chess_game import ChessGame, MATE_SCORE

__all__ = ['TicTacToe', 'TicTacToeMove', 'Result', 'ChessGame', 'MATE_SCORE']
