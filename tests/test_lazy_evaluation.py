import pytest

from lazyiter import Cursor, LazyCollection


class TestLazyEvaluation:
    """Test that the facade defers all work until iteration"""

    def test_deferred_execution(self):
        """Operations are not executed while the pipeline is defined"""
        call_count = 0

        def track_calls(x):
            nonlocal call_count
            call_count += 1
            return x * 2

        lazy_col = LazyCollection(range(10)).map(track_calls).window(2).unique()
        assert call_count == 0, "Operations should not execute during definition"

        result = lazy_col.take(3).to_list()
        assert result == [[0, 2], [2, 4], [4, 6]], f"Unexpected result: {result}"
        assert call_count == 4, f"Expected 4 calls for three windows of two, got {call_count}"

    def test_to_cursor_builds_without_pulling(self):
        """Building the cursor pipeline does not touch the source"""
        pulled = []

        def producer():
            for value in range(5):
                pulled.append(value)
                yield value

        cursor = LazyCollection(producer()).chunk(2).to_cursor()
        assert isinstance(cursor, Cursor)
        assert pulled == [], "Building the pipeline must not pull values"
        assert cursor.current() == [0, 1]

    def test_multiple_consumption(self):
        """Collections over replayable sources can be consumed repeatedly"""
        lazy_col = LazyCollection(range(5)).map(lambda x: x * 2).interleave([-1, -2])

        assert lazy_col.to_list() == lazy_col.to_list() == [0, -1, 2, -2, 4, 6, 8]

    def test_generator_source_is_single_pass(self):
        """A generator source is drained by the first traversal"""
        def limited_generator():
            yield 1
            yield 2
            yield 3

        lazy_col = LazyCollection(limited_generator())
        assert lazy_col.to_list() == [1, 2, 3]
        assert lazy_col.to_list() == [], "Second consumption should be empty"

    def test_cache_replays_generator(self):
        """cache() lets a generator-backed pipeline be traversed again"""
        evaluated = []

        def expensive(x):
            evaluated.append(x)
            return x * x

        def numbers():
            yield from range(4)

        cached = LazyCollection(numbers()).map(expensive).cache()
        assert cached.to_list() == [0, 1, 4, 9]
        assert cached.to_list() == [0, 1, 4, 9]
        assert evaluated == [0, 1, 2, 3], f"Values should be computed once, got {evaluated}"

    def test_infinite_source_with_take(self):
        def infinite_counter():
            i = 0
            while True:
                yield i
                i += 1

        result = LazyCollection(infinite_counter()).filter(lambda x: x % 3 == 0).take(4).to_list()
        assert result == [0, 3, 6, 9]

    def test_invalid_configuration_fails_at_definition(self):
        """Argument errors are raised when the operator is added, not on iteration"""
        with pytest.raises(ValueError):
            LazyCollection([1, 2]).window(0)
        with pytest.raises(ValueError):
            LazyCollection([1, 2]).zip()
        with pytest.raises(ValueError):
            LazyCollection([1, 2]).repeat(-3)

    def test_callback_exceptions_propagate(self):
        def failing_function(x):
            if x == 3:
                raise ValueError("Test exception")
            return x * 2

        lazy_col = LazyCollection(range(5)).map(failing_function)
        with pytest.raises(ValueError, match="Test exception"):
            lazy_col.to_list()
