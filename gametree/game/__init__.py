"""
Game Module

This module defines the contract between the search engine and the games it
searches. The engine is game-agnostic: any game implementing ZeroSumGame can
be searched without modifying the algorithms.

Key Components:
    - ZeroSumGame (ABC): Abstract base class defining the game interface
    - Move: Opaque move type (compared with ==)

Data Flow:
    game.hash_key()  → str (transposition table key)
    game.evaluate()  → (is_exact, score)
                        Positive = maximizing side advantage
                        Negative = minimizing side advantage
"""

from gametree.game.base import ZeroSumGame, Move

__all__ = ['ZeroSumGame', 'Move']
