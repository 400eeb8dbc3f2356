"""
Search configuration.
"""

from dataclasses import dataclass

ALGORITHMS = ('alphabeta', 'minimax', 'negamax')


@dataclass
class SearchConfig:
    """Configuration for one best-move search.

    The search depth is not part of the configuration: it is passed to
    calc_best_move() directly since callers usually derive it per position.
    """

    algorithm: str = "alphabeta"
    """Search algorithm: 'alphabeta', 'minimax' or 'negamax'"""

    # Logging
    trace: bool = False
    """Log every visited node at DEBUG level"""

    dump_table: bool = False
    """Log the whole transposition table after every store (tiny trees only)"""

    # Output
    pv_length: int = 32
    """Maximum number of moves extracted for the principal variation"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.algorithm = self.algorithm.lower()

        if self.algorithm not in ALGORITHMS:
            raise ValueError(
                f"algorithm should be one of {', '.join(ALGORITHMS)}, got {self.algorithm}"
            )

        if self.pv_length < 0:
            raise ValueError(f"pv_length must be non-negative, got {self.pv_length}")

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"SearchConfig(algorithm={self.algorithm}, trace={self.trace}, "
            f"dump_table={self.dump_table}, pv_length={self.pv_length})"
        )
