"""
Adapters that keep part of the traversal in memory: overlapping windows and
bidirectional peeking.
"""

from collections import deque
from typing import Any, Deque, List, Tuple

from .cursor import CursorWrapper
from .models import WindowConfig


class SlidingWindowCursor(CursorWrapper):
    """
    Overlapping windows of exactly ``size`` elements, one per upstream step.

        >>> list(SlidingWindowCursor([1, 2, 3, 4, 5], 3))
        [[1, 2, 3], [2, 3, 4], [3, 4, 5]]

    A source shorter than the window produces nothing. Keys count windows
    from zero regardless of upstream keys.
    """

    def __init__(self, source: Any, size: int):
        self.config = WindowConfig(size=size)
        super().__init__(source)
        self._window: Deque[Any] = deque()
        self._index = 0

    @property
    def size(self) -> int:
        return self.config.size

    def reset(self):
        self._inner.reset()
        self._window.clear()
        self._index = 0

    def valid(self):
        while len(self._window) < self.size and self._inner.valid():
            self._window.append(self._inner.current())
            self._inner.advance()
        return len(self._window) == self.size

    def current(self):
        return list(self._window) if self.valid() else None

    def key(self):
        return self._index if self.valid() else None

    def advance(self):
        if self.valid():
            self._window.popleft()
            self._index += 1


class LookaheadCursor(CursorWrapper):
    """
    Cursor that can peek at upcoming and already visited elements.

    Every element pulled from upstream lands in an arena shared by the main
    position and the peek reads, so peeking never moves the traversal and
    the upstream is consumed exactly once per pass.

        >>> cursor = LookaheadCursor(["A", "B", "C", "D"])
        >>> cursor.advance()
        >>> cursor.current(), cursor.look_ahead(), cursor.look_ahead(2), cursor.look_behind()
        ('B', 'C', ['C', 'D'], 'A')
    """

    def __init__(self, source: Any):
        super().__init__(source)
        self._arena: List[Tuple[Any, Any]] = []
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def _fill(self, index: int) -> bool:
        """Pull from upstream until the arena holds ``index``."""
        while len(self._arena) <= index and self._inner.valid():
            self._arena.append((self._inner.key(), self._inner.current()))
            self._inner.advance()
        return index < len(self._arena)

    def reset(self):
        self._inner.reset()
        self._arena = []
        self._position = 0

    def valid(self):
        return self._fill(self._position)

    def current(self):
        return self._arena[self._position][1] if self.valid() else None

    def key(self):
        return self._arena[self._position][0] if self.valid() else None

    def advance(self):
        if self.valid():
            self._position += 1

    def look_ahead(self, count: int = 1):
        """
        Values following the current one.

        Returns the next value (or None) when ``count`` is 1, otherwise a list
        of up to ``count`` upcoming values.
        """
        if count < 1:
            raise ValueError("Look-ahead count must be at least 1")
        start = self._position + 1
        self._fill(start + count - 1)
        values = [value for _, value in self._arena[start:start + count]]
        if count == 1:
            return values[0] if values else None
        return values

    def look_behind(self, count: int = 1):
        """
        Values preceding the current one, oldest first.

        Returns None (or an empty list when ``count`` > 1) if fewer than
        ``count`` elements were visited.
        """
        if count < 1:
            raise ValueError("Look-behind count must be at least 1")
        start = self._position - count
        if start < 0:
            return None if count == 1 else []
        values = [value for _, value in self._arena[start:self._position]]
        return values[0] if count == 1 else values
