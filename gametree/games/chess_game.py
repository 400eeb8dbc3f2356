"""
Chess Adapter

Wraps a python-chess Board in the ZeroSumGame interface so the generic engine
can search chess positions.

Evaluation:
    - Material only, in centipawns from White's perspective
    - Checkmate: ±MATE_SCORE (exact)
    - Stalemate / insufficient material: 0 (exact)

    Mate scores do not depend on the distance from the root: terminal entries
    are reused at any depth by the transposition table, so a path-dependent
    score would make them inconsistent. Repetition and fifty-move draws are
    not detected for the same reason (the hash does not cover move history).

Move Ordering:
    The engine only promotes the hash move, so legal_moves() orders the rest:
    captures by MVV-LVA, promotions, checks, castling, then quiet moves.

References:
    - Simplified Evaluation Function: https://www.chessprogramming.org/Simplified_Evaluation_Function
    - MVV-LVA: https://www.chessprogramming.org/MVV-LVA
"""

from typing import List, Optional, Tuple

import chess
import chess.polyglot

from gametree.game.base import ZeroSumGame

MATE_SCORE = 50000  # Score for checkmate

PIECE_VALUES = {
    chess.PAWN: 100,
    chess.KNIGHT: 320,
    chess.BISHOP: 330,
    chess.ROOK: 500,
    chess.QUEEN: 900,
    chess.KING: 0,
}


def get_piece_value(piece_type: int) -> int:
    """
    Get approximate piece value for move ordering.

    Kings count as very valuable aggressors so they capture last.
    """
    if piece_type == chess.KING:
        return 20000
    return PIECE_VALUES.get(piece_type, 0)


def material_balance(board: chess.Board) -> int:
    """Material of White minus material of Black, in centipawns."""
    score = 0
    for piece_type, value in PIECE_VALUES.items():
        score += value * len(board.pieces(piece_type, chess.WHITE))
        score -= value * len(board.pieces(piece_type, chess.BLACK))
    return score


class ChessGame(ZeroSumGame):
    """
    Chess position searched by the engine. White is the maximizing side.

    Attributes:
        board: Underlying python-chess board (mutated in place by the search)
    """

    def __init__(self, board: Optional[chess.Board] = None):
        self.board = board if board is not None else chess.Board()

    @classmethod
    def from_fen(cls, fen: str) -> "ChessGame":
        return cls(chess.Board(fen))

    def move_score(self, move: chess.Move) -> int:
        """
        Assign a score to a move for ordering purposes.
        Higher score = searched earlier.
        """
        board = self.board
        score = 0

        # Captures: Score by MVV-LVA
        if board.is_capture(move):
            captured_piece = board.piece_at(move.to_square)
            # En passant captures land on an empty square
            victim_value = get_piece_value(captured_piece.piece_type) if captured_piece else 100

            attacker_piece = board.piece_at(move.from_square)
            attacker_value = get_piece_value(attacker_piece.piece_type) if attacker_piece else 100

            score = 10000 + (victim_value - attacker_value // 10)

        if move.promotion:
            score += 8000

        if board.gives_check(move):
            score += 5000

        if board.is_castling(move):
            score += 3000

        return score

    def legal_moves(self) -> List[chess.Move]:
        return sorted(self.board.legal_moves, key=self.move_score, reverse=True)

    def make_move(self, move: chess.Move) -> bool:
        if not isinstance(move, chess.Move) or not self.board.is_legal(move):
            return False
        self.board.push(move)
        return True

    def take_back(self) -> None:
        if self.board.move_stack:
            self.board.pop()

    def evaluate(self) -> Tuple[bool, float]:
        board = self.board

        if board.is_checkmate():
            # The side to move is mated
            if board.turn == chess.WHITE:
                return True, float(-MATE_SCORE)
            return True, float(MATE_SCORE)

        if board.is_stalemate() or board.is_insufficient_material():
            return True, 0.0

        return False, float(material_balance(board))

    def is_max_player_turn(self) -> bool:
        return self.board.turn == chess.WHITE

    def hash_key(self) -> str:
        return format(chess.polyglot.zobrist_hash(self.board), "016x")

    def __str__(self) -> str:
        return str(self.board)
