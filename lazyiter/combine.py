"""
Adapters that traverse several upstream sources together.
"""

from typing import Any, List, Set

from .cursor import Cursor, to_cursor


class _MultiCursor(Cursor):

    def __init__(self, sources):
        self._cursors: List[Cursor] = [to_cursor(source) for source in sources]

    @property
    def replayable(self):
        return all(cursor.replayable for cursor in self._cursors)


class ChainCursor(_MultiCursor):
    """
    Sequential traversal: every element of the first source, then the second,
    and so on. Upstream keys are passed through unchanged.

        >>> list(ChainCursor([1, 2], iter([3, 4])))
        [1, 2, 3, 4]
    """

    def __init__(self, *sources: Any):
        super().__init__(sources)
        self._index = 0

    def reset(self):
        for cursor in self._cursors:
            cursor.reset()
        self._index = 0

    def valid(self):
        # exhausted upstreams are skipped for good
        while self._index < len(self._cursors):
            if self._cursors[self._index].valid():
                return True
            self._index += 1
        return False

    def current(self):
        return self._cursors[self._index].current() if self.valid() else None

    def key(self):
        return self._cursors[self._index].key() if self.valid() else None

    def advance(self):
        if self.valid():
            self._cursors[self._index].advance()


class ZipCursor(_MultiCursor):
    """
    Synchronized traversal producing tuples; stops with the shortest source.

        >>> list(ZipCursor([1, 2, 3], "ab"))
        [(1, 'a'), (2, 'b')]
    """

    def __init__(self, *sources: Any):
        if len(sources) < 2:
            raise ValueError("At least two sources are required")
        super().__init__(sources)
        self._index = 0

    def reset(self):
        for cursor in self._cursors:
            cursor.reset()
        self._index = 0

    def valid(self):
        return all(cursor.valid() for cursor in self._cursors)

    def current(self):
        if not self.valid():
            return None
        return tuple(cursor.current() for cursor in self._cursors)

    def key(self):
        return self._index if self.valid() else None

    def advance(self):
        for cursor in self._cursors:
            cursor.advance()
        self._index += 1


class InterleaveCursor(_MultiCursor):
    """
    Round-robin traversal. Shorter sources drop out and the rest keep
    alternating until every source is exhausted. The key is the position of
    the source the current value came from.

        >>> list(InterleaveCursor([1], [2, 3, 4]))
        [1, 2, 3, 4]
    """

    def __init__(self, *sources: Any):
        if not sources:
            raise ValueError("At least one source must be provided")
        super().__init__(sources)
        self._index = 0
        self._exhausted: Set[int] = set()

    def reset(self):
        for cursor in self._cursors:
            cursor.reset()
        self._index = 0
        self._exhausted = set()

    def _live(self, index: int) -> bool:
        if index in self._exhausted:
            return False
        if self._cursors[index].valid():
            return True
        self._exhausted.add(index)
        return False

    def _settle(self) -> bool:
        """Move the active index to the next source that still has elements."""
        count = len(self._cursors)
        for _ in range(count):
            if self._live(self._index):
                return True
            self._index = (self._index + 1) % count
        return False

    def valid(self):
        return self._settle()

    def current(self):
        return self._cursors[self._index].current() if self._settle() else None

    def key(self):
        return self._index if self._settle() else None

    def advance(self):
        if not self._settle():
            return
        self._cursors[self._index].advance()
        self._index = (self._index + 1) % len(self._cursors)
        self._settle()
