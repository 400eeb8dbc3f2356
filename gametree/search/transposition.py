"""
Transposition Table

This module implements the transposition table (TT) - a hash table that caches
search results so positions reached through different move orders are not
searched twice. Cached best moves are also reused as move-ordering hints when
a position is searched again at a greater depth.

Entry Kinds:
    - Terminal: Proven game-over score, valid at any depth
    - Exact: Full minimax value of the node at the stored depth
    - Bound only: Search stopped early (or failed outside its window), the
      score is only a bound and must never be returned as the node's value

The table lives for exactly one top-level search and is owned by a
SearchStats instance, so independent searches never share state.

References:
    - Transposition Table: https://www.chessprogramming.org/Transposition_Table
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from gametree.game.base import Move

logger = logging.getLogger(__name__)


class TTEntry:
    """
    Entry in the transposition table.

    Attributes:
        score: Search value on the algorithm's scale
        depth: Remaining depth that produced score (meaningless if terminal)
        best_move: Move that produced score (meaningless if terminal or depth 0)
        is_terminal: Proven game-over score
        is_bound_only: Score is a bound, not the exact value of the node
    """

    __slots__ = ('score', 'depth', 'best_move', 'is_terminal', 'is_bound_only')

    def __init__(
        self,
        score: float,
        depth: int = 0,
        best_move: Optional[Move] = None,
        is_terminal: bool = False,
        is_bound_only: bool = False,
    ):
        self.score = score
        self.depth = depth
        self.best_move = best_move
        self.is_terminal = is_terminal
        self.is_bound_only = is_bound_only

    def __eq__(self, other) -> bool:
        if not isinstance(other, TTEntry):
            return NotImplemented
        return (
            self.score == other.score
            and self.depth == other.depth
            and self.best_move == other.best_move
            and self.is_terminal == other.is_terminal
            and self.is_bound_only == other.is_bound_only
        )

    def __repr__(self) -> str:
        return (
            f"TTEntry(score={self.score}, depth={self.depth}, "
            f"move={self.best_move}, terminal={self.is_terminal}, "
            f"bound={self.is_bound_only})"
        )


class TranspositionTable:
    """
    Transposition table mapping position keys to search results.

    Entries are always overwritten on store and never evicted: the table only
    lives for one top-level search.

    Attributes:
        table: Dictionary mapping hash key → TTEntry
        hits: Probes that returned a score
        misses: Probes that returned no score
        hints: Probes that handed out a move-ordering hint
    """

    def __init__(self):
        self.table: Dict[str, TTEntry] = {}
        self.hits = 0
        self.misses = 0
        self.hints = 0

    def store(self, key: str, entry: TTEntry) -> None:
        """
        Store the search result of a position, replacing any previous entry.

        Args:
            key: Hash key of the position
            entry: Result to cache
        """
        self.table[key] = entry

    def lookup(self, key: str) -> Optional[TTEntry]:
        """Return the raw entry for a key without applying the probe policy."""
        return self.table.get(key)

    def probe(self, key: str, depth: int) -> Tuple[Optional[float], Optional[Move]]:
        """
        Look up a position before searching it.

        Policy:
            1. Terminal entry → its score (never stale)
            2. Exact entry searched at least as deep → its score
            3. Exact but shallower entry → its best move as ordering hint
            4. Bound-only entry or no entry → nothing

        Args:
            key: Hash key of the position
            depth: Remaining depth the caller is about to search

        Returns:
            Tuple of (score, hint), score is None if the node must be searched
        """
        entry = self.table.get(key)
        if entry is None:
            self.misses += 1
            return None, None

        if entry.is_terminal:
            self.hits += 1
            return entry.score, None

        if entry.is_bound_only:
            self.misses += 1
            return None, None

        if entry.depth >= depth:
            self.hits += 1
            return entry.score, None

        self.misses += 1
        if entry.best_move is not None:
            self.hints += 1
        return None, entry.best_move

    def clear(self):
        """Clear all entries from the transposition table."""

        self.table.clear()
        self.hits = 0
        self.misses = 0
        self.hints = 0

    def get_stats(self) -> Dict[str, int | float]:
        """Get statistics about transposition table usage."""

        total_probes = self.hits + self.misses
        hit_rate = (self.hits / total_probes * 100) if total_probes > 0 else 0

        return {
            'entries': len(self.table),
            'hits': self.hits,
            'misses': self.misses,
            'hints': self.hints,
            'hit_rate': hit_rate,
        }

    def dump(self) -> None:
        """Log every row of the table at DEBUG level."""
        for key, entry in self.table.items():
            logger.debug(f"__posTableRow {key}: {entry!r}")

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, key: str) -> bool:
        return key in self.table

    def __repr__(self) -> str:
        stats = self.get_stats()
        return (
            f"TranspositionTable(entries={stats['entries']}, "
            f"hit_rate={stats['hit_rate']:.1f}%)"
        )


@dataclass
class SearchStats:
    """
    Mutable state shared by every node of one top-level search.

    Attributes:
        table: Transposition table of this search
        nodes: Number of recursive calls made (cache hits included)
        trace: Log every node at DEBUG level
        dump_table: Log the whole table after every store (tiny trees only)
    """

    table: TranspositionTable = field(default_factory=TranspositionTable)
    nodes: int = 0
    trace: bool = False
    dump_table: bool = False

    def store(self, key: str, entry: TTEntry) -> None:
        """Store a node result, tracing it if requested."""
        self.table.store(key, entry)
        if self.trace:
            logger.debug(f"stored: key: {key}, entry: {entry!r}")
        if self.dump_table:
            self.table.dump()
