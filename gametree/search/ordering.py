"""
Move Ordering

Alpha-beta prunes the most when the best move is searched first. The engine
itself only knows one thing about move quality: the best move found by an
earlier, shallower search of the same position (stored in the transposition
table). That move is tried first; everything else keeps the order produced by
the game's legal move generator.

References:
    - Move Ordering: https://www.chessprogramming.org/Move_Ordering
    - Hash Move: https://www.chessprogramming.org/Hash_Move
"""

from typing import List, Optional

from gametree.game.base import Move


def order_moves(moves: List[Move], hint: Optional[Move] = None) -> List[Move]:
    """
    Promote the hint move to the front of the list, in place.

    Only the hint is moved (swapped with the first move). No other sorting is
    done, so good ordering of the remaining moves is up to the game.

    Args:
        moves: Legal moves of the node (modified in place)
        hint: Best move of a previous search of this position, if any

    Returns:
        The same list, for convenience
    """
    if hint is None:
        return moves

    for i, move in enumerate(moves):
        if move == hint:
            moves[0], moves[i] = moves[i], moves[0]
            break

    return moves
