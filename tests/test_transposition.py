"""
Unit Tests for the Transposition Table

Tests for the probe-before-search policy and table bookkeeping.
"""

import pytest
from gametree.search import SearchStats, TranspositionTable, TTEntry


class TestTranspositionTable:
    """Tests for TranspositionTable."""

    @pytest.fixture
    def tt(self):
        return TranspositionTable()

    def test_store_and_lookup(self, tt):
        """Test basic store and lookup operations."""

        tt.store("k", TTEntry(1.5, depth=3, best_move="m"))

        entry = tt.lookup("k")

        assert entry is not None, "Should find stored entry"
        assert entry.score == 1.5
        assert entry.depth == 3
        assert entry.best_move == "m"
        assert not entry.is_terminal
        assert not entry.is_bound_only

    def test_store_overwrites(self, tt):
        """Test that a later store always replaces the earlier entry."""

        tt.store("k", TTEntry(1.0, depth=5, best_move="a"))
        tt.store("k", TTEntry(2.0, depth=2, best_move="b"))

        assert tt.lookup("k") == TTEntry(2.0, depth=2, best_move="b")
        assert len(tt) == 1

    def test_probe_missing(self, tt):
        assert tt.probe("nothing", 3) == (None, None)
        assert tt.misses == 1

    def test_probe_terminal_at_any_depth(self, tt):
        """Terminal scores never go stale."""

        tt.store("k", TTEntry(-1.0, depth=0, is_terminal=True))

        assert tt.probe("k", 0) == (-1.0, None)
        assert tt.probe("k", 99) == (-1.0, None)
        assert tt.hits == 2

    def test_probe_exact_deep_enough(self, tt):
        tt.store("k", TTEntry(0.5, depth=4, best_move="m"))

        assert tt.probe("k", 4) == (0.5, None)
        assert tt.probe("k", 2) == (0.5, None)

    def test_probe_exact_too_shallow_gives_hint(self, tt):
        """A shallower exact entry only supplies its best move."""

        tt.store("k", TTEntry(0.5, depth=2, best_move="m"))

        assert tt.probe("k", 3) == (None, "m")
        assert tt.hints == 1
        assert tt.misses == 1

    def test_probe_frontier_entry(self, tt):
        """Depth 0 entries answer depth 0 probes and give no hint otherwise."""

        tt.store("k", TTEntry(0.25, depth=0))

        assert tt.probe("k", 0) == (0.25, None)
        assert tt.probe("k", 1) == (None, None)
        assert tt.hints == 0

    def test_bound_only_never_used(self, tt):
        """Bound-only entries give neither score nor hint, even when deep enough."""

        tt.store("k", TTEntry(3.0, depth=10, best_move="m", is_bound_only=True))

        assert tt.probe("k", 1) == (None, None)
        assert tt.probe("k", 10) == (None, None)
        assert tt.probe("k", 11) == (None, None)
        assert tt.hits == 0

    def test_contains(self, tt):
        tt.store("k", TTEntry(0.0))

        assert "k" in tt
        assert "other" not in tt

    def test_clear_table(self, tt):
        """Test that clearing table removes all entries and counters."""

        for i in range(10):
            tt.store(str(i), TTEntry(float(i), depth=5))
        tt.probe("0", 1)
        tt.probe("missing", 1)

        assert len(tt) == 10, "Should have 10 entries"

        tt.clear()

        assert len(tt) == 0, "Table should be empty after clear"
        assert tt.hits == 0, "Hits should be reset"
        assert tt.misses == 0, "Misses should be reset"

    def test_get_stats(self, tt):
        tt.store("k", TTEntry(1.0, depth=2))
        tt.probe("k", 1)
        tt.probe("missing", 1)

        stats = tt.get_stats()

        assert stats['entries'] == 1
        assert stats['hits'] == 1
        assert stats['misses'] == 1
        assert stats['hit_rate'] == 50.0
        assert "entries=1" in repr(tt)


class TestTTEntry:
    """Tests for TTEntry."""

    def test_equality(self):
        assert TTEntry(1.0, 2, "m") == TTEntry(1.0, 2, "m")
        assert TTEntry(1.0, 2, "m") != TTEntry(1.0, 2, "n")
        assert TTEntry(1.0) != "not an entry"


class TestSearchStats:
    """Tests for SearchStats."""

    def test_fresh_stats_are_independent(self):
        """Every SearchStats owns its own table."""

        stats1 = SearchStats()
        stats2 = SearchStats()
        stats1.store("k", TTEntry(1.0))

        assert "k" in stats1.table
        assert "k" not in stats2.table
        assert stats1.nodes == 0
