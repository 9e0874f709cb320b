import pytest

from lazyiter import LazyCollection


class TestReductions:
    """Test reduction operations (sum, count, etc.)"""

    def test_sum_and_count(self):
        assert LazyCollection(range(1, 6)).sum() == 15
        assert LazyCollection(range(20)).filter(lambda x: x % 3 == 0).count() == 7

    def test_reduce(self):
        assert LazyCollection(range(1, 5)).reduce(lambda a, b: a * b) == 24
        assert LazyCollection([]).reduce(lambda a, b: a + b, 10) == 10

    def test_reduce_with_none_initial(self):
        """None is a real initial value, not a missing one"""
        pairs = LazyCollection([1, 2]).reduce(lambda acc, x: (acc, x), None)
        assert pairs == ((None, 1), 2)
        assert LazyCollection([]).reduce(lambda a, b: a + b, None) is None

    def test_reduce_empty_without_initial(self):
        with pytest.raises(TypeError):
            LazyCollection([]).reduce(lambda a, b: a + b)

    def test_first_and_last(self):
        lazy_col = LazyCollection(["x", "y", "z"])
        assert lazy_col.first() == "x"
        assert lazy_col.last() == "z"
        assert LazyCollection([]).first("none") == "none"

    def test_first_stops_early(self):
        """first() pulls a single element from an infinite source"""
        def infinite_counter():
            i = 0
            while True:
                yield i
                i += 1

        assert LazyCollection(infinite_counter()).map(lambda x: x + 1).first() == 1

    def test_count_windows(self):
        assert LazyCollection(range(10)).window(4).count() == 7

    def test_reduction_on_empty_collection(self):
        empty = LazyCollection([])
        assert empty.sum() == 0
        assert empty.count() == 0
        assert empty.to_list() == []
