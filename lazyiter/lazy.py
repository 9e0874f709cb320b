"""
Fluent facade over the cursor adapters.
"""

from functools import reduce as builtin_reduce

from .bounded import LimitCursor, RepeatableCursor
from .combine import ChainCursor, InterleaveCursor, ZipCursor
from .cursor import to_cursor
from .filters import FilterCursor, UniqueCursor
from .grouping import ChunkCursor, ConsecutiveGroupCursor, GroupByCursor
from .models import RepeatConfig, WindowConfig
from .replay import CachingIterable
from .transform import ClosureCursor, TrimCursor
from .window import SlidingWindowCursor

_MISSING = object()


class LazyCollection:
    """
    A chainable, lazy collection. Transformations are stored and turned into
    a cursor pipeline only when you iterate. Optionally caches realized
    results so later passes replay them.
    """
    def __init__(self, source, ops=None, cache_enabled=False):
        self._source = source
        self._ops = ops or []          # sequence of ("op_name", arg)
        self._cache_enabled = cache_enabled
        self._cache = None             # CachingIterable once the first pass starts

    # --------- chainable operators (lazy) ----------
    def map(self, fn):
        return self._with_op(("map", fn))

    def filter(self, pred):
        return self._with_op(("filter", pred))

    def skip(self, n):
        return self._with_op(("skip", int(n)))

    def take(self, n):
        return self._with_op(("take", int(n)))

    def batch(self, size):
        return self._with_op(("batch", int(size)))

    def chunk(self, size):
        """Alias for batch() - groups elements into lists of the given size"""
        return self.batch(size)

    def window(self, size):
        """Overlapping windows of exactly ``size`` elements"""
        config = WindowConfig(size=size)
        return self._with_op(("window", config.size))

    def unique(self, strict=True):
        return self._with_op(("unique", strict))

    def group_consecutive(self, same_group=None):
        """Runs of neighbours; equal neighbours by default"""
        return self._with_op(("group_consecutive", same_group or (lambda a, b: a == b)))

    def chain(self, *others):
        return self._with_op(("chain", others))

    def zip(self, *others):
        if not others:
            raise ValueError("zip() needs at least one other source")
        return self._with_op(("zip", others))

    def interleave(self, *others):
        return self._with_op(("interleave", others))

    def repeat(self, limit, offset=0):
        config = RepeatConfig(limit=limit, offset=offset)
        return self._with_op(("repeat", (config.limit, config.offset)))

    def trim(self, characters=None):
        return self._with_op(("trim", characters))

    def paginate(self, page_size):
        """
        Pages of up to ``page_size`` elements, read in a single pass so
        one-shot sources lose nothing between pages.
        """
        return iter(ChunkCursor(self.to_cursor(), page_size))

    def cache(self, enabled=True):
        return LazyCollection(self._source, list(self._ops), enabled)

    # --------- forcing evaluation ----------
    def to_cursor(self):
        """Build the adapter pipeline without pulling anything from the source"""
        cursor = to_cursor(self._source)
        for op, arg in self._ops:
            cursor = self._apply(cursor, op, arg)
        return cursor

    def to_list(self):
        return list(self)

    # --------- reducing operations (force evaluation) ----------
    def reduce(self, fn, initial=_MISSING):
        """Apply a function of two arguments cumulatively to items, from left to right"""
        if initial is _MISSING:
            return builtin_reduce(fn, self)
        return builtin_reduce(fn, self, initial)

    def sum(self, start=0):
        total = start
        for item in self:
            total += item
        return total

    def count(self):
        count = 0
        for _ in self:
            count += 1
        return count

    def first(self, default=None):
        """Return the first element, or default if empty"""
        for item in self:
            return item
        return default

    def last(self, default=None):
        last_item = default
        for item in self:
            last_item = item
        return last_item

    def group_by(self, key_fn):
        """Group elements by the result of key_fn, in first-encounter order"""
        return dict(GroupByCursor(self.to_cursor(), lambda value, key: key_fn(value)).groups)

    # --------- iterator protocol ----------
    def __iter__(self):
        if not self._cache_enabled:
            return iter(self.to_cursor())
        if self._cache is None:
            self._cache = CachingIterable(lambda: iter(self.to_cursor()))
        return iter(self._cache)

    # --------- helpers ----------
    @staticmethod
    def _apply(cursor, op, arg):
        if op == "map":
            fn = arg
            return ClosureCursor(cursor, lambda value, key: fn(value))
        elif op == "filter":
            pred = arg
            return FilterCursor(cursor, lambda value, key: pred(value))
        elif op == "skip":
            return LimitCursor(cursor, offset=arg)
        elif op == "take":
            return LimitCursor(cursor, limit=arg)
        elif op == "batch":
            return ChunkCursor(cursor, arg)
        elif op == "window":
            return SlidingWindowCursor(cursor, arg)
        elif op == "unique":
            return UniqueCursor(cursor, arg)
        elif op == "group_consecutive":
            return ConsecutiveGroupCursor(cursor, arg)
        elif op == "chain":
            return ChainCursor(cursor, *arg)
        elif op == "zip":
            return ZipCursor(cursor, *arg)
        elif op == "interleave":
            return InterleaveCursor(cursor, *arg)
        elif op == "repeat":
            limit, offset = arg
            return RepeatableCursor(cursor, limit, offset)
        elif op == "trim":
            return TrimCursor(cursor, arg)
        raise ValueError(f"Unknown op: {op}")

    def _with_op(self, op_tuple):
        return LazyCollection(self._source, self._ops + [op_tuple], self._cache_enabled)
