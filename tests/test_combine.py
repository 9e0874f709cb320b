import pytest

from lazyiter import ChainCursor, InterleaveCursor, ZipCursor


class TestChain:
    """Test sequential traversal across sources"""

    def test_chain_preserves_order(self):
        """Elements of A come before elements of B"""
        assert list(ChainCursor([1, 2], (3, 4), iter([5]))) == [1, 2, 3, 4, 5]

    def test_empty_chain(self):
        """Zero sources is valid and immediately exhausted"""
        cursor = ChainCursor()
        assert cursor.valid() is False
        assert list(cursor) == []

    def test_empty_sources_are_skipped(self):
        """Exhausted sources in the middle are passed over"""
        assert list(ChainCursor([], [1], [], [], [2, 3], [])) == [1, 2, 3]

    def test_keys_come_from_upstreams(self):
        """Keys are the active upstream's keys"""
        assert list(ChainCursor(["a"], {"k": "b"}).items()) == [(0, "a"), ("k", "b")]

    def test_reset_replays_every_source(self):
        """reset() rewinds all replayable sources"""
        cursor = ChainCursor([1, 2], [3])
        assert list(cursor) == [1, 2, 3]
        assert list(cursor) == [1, 2, 3]

    def test_replayable_only_when_all_sources_are(self, one_shot):
        """The capability flag reflects every upstream"""
        assert ChainCursor([1], [2]).replayable is True
        assert ChainCursor([1], one_shot([2])).replayable is False


class TestZip:
    """Test synchronized traversal"""

    def test_shortest_source_wins(self):
        """Length equals the shortest source"""
        assert list(ZipCursor([1, 2, 3], ["a", "b"])) == [(1, "a"), (2, "b")]

    def test_three_sources(self):
        """Tuples hold one value per source, in source order"""
        assert list(ZipCursor("ab", [1, 2], (True, False))) == [("a", 1, True), ("b", 2, False)]

    def test_keys_are_a_counter(self):
        assert [key for key, _ in ZipCursor(["x", "y"], ["z", "w"]).items()] == [0, 1]

    def test_fewer_than_two_sources_rejected(self):
        """Zip needs at least two sources"""
        with pytest.raises(ValueError):
            ZipCursor([1, 2])
        with pytest.raises(ValueError):
            ZipCursor()

    def test_no_resynchronization_after_exhaustion(self):
        """Once one source ends, the zip stays exhausted"""
        cursor = ZipCursor([1], [1, 2, 3])
        cursor.advance()
        assert cursor.valid() is False
        cursor.advance()
        assert cursor.valid() is False
        assert cursor.current() is None


class TestInterleave:
    """Test round-robin traversal"""

    def test_equal_lengths(self):
        assert list(InterleaveCursor([1, 3, 5], [2, 4, 6])) == [1, 2, 3, 4, 5, 6]

    def test_shorter_source_drops_out(self):
        """The longer source keeps going alone"""
        assert list(InterleaveCursor([1], [2, 3, 4])) == [1, 2, 3, 4]

    def test_first_source_empty(self):
        """An empty first source is skipped from the start"""
        assert list(InterleaveCursor([], [1, 2], ["a"])) == [1, "a", 2]

    def test_keys_are_source_positions(self):
        """Key is the position of the source a value came from"""
        items = list(InterleaveCursor(["a", "b"], ["c"]).items())
        assert items == [(0, "a"), (1, "c"), (0, "b")]

    def test_all_empty(self):
        assert list(InterleaveCursor([], [])) == []

    def test_zero_sources_rejected(self):
        with pytest.raises(ValueError):
            InterleaveCursor()

    def test_reset_restarts_round_robin(self):
        cursor = InterleaveCursor([1, 3], [2])
        assert list(cursor) == [1, 2, 3]
        assert list(cursor) == [1, 2, 3], "Second traversal should match the first"
