"""
Adapters that collect upstream elements into lists: fixed-size batches,
runs of related neighbours, and keyed buckets.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from .cursor import CursorWrapper
from .models import ChunkConfig

logger = logging.getLogger(__name__)


class ChunkCursor(CursorWrapper):
    """
    Groups elements into lists of ``size``. The final batch holds whatever is
    left over; an empty source produces no batches. Sizes below 1 become 1.

        >>> list(ChunkCursor(range(1, 8), 3))
        [[1, 2, 3], [4, 5, 6], [7]]
    """

    def __init__(self, source: Any, size: int):
        super().__init__(source)
        self.config = ChunkConfig(size=size)
        self._batch: List[Any] = []
        self._filled = False
        self._index = 0

    @property
    def size(self) -> int:
        return self.config.size

    def _fill(self):
        if self._filled:
            return
        self._filled = True
        self._batch = []
        while len(self._batch) < self.size and self._inner.valid():
            self._batch.append(self._inner.current())
            self._inner.advance()

    def reset(self):
        self._inner.reset()
        self._batch = []
        self._filled = False
        self._index = 0

    def valid(self):
        self._fill()
        return bool(self._batch)

    def current(self):
        return list(self._batch) if self.valid() else None

    def key(self):
        return self._index if self.valid() else None

    def advance(self):
        if self.valid():
            self._index += 1
            self._filled = False
            self._batch = []


class ConsecutiveGroupCursor(CursorWrapper):
    """
    Groups runs of neighbouring elements. ``same_group(previous, current)``
    decides whether ``current`` joins the run that ends with ``previous``;
    a False answer closes the run and leaves ``current`` for the next group.

        >>> list(ConsecutiveGroupCursor([1, 1, 2, 2, 2, 3], lambda a, b: a == b))
        [[1, 1], [2, 2, 2], [3]]

    The upstream must be replayable for a second traversal to see anything.
    """

    def __init__(self, source: Any, same_group: Callable[[Any, Any], bool]):
        super().__init__(source)
        self._same_group = same_group
        self._buffer: List[Any] = []
        self._seeded = False
        self._index = 0

    def _accumulate(self):
        self._seeded = True
        self._buffer = []
        while self._inner.valid():
            value = self._inner.current()
            if self._buffer and not self._same_group(self._buffer[-1], value):
                break
            self._buffer.append(value)
            self._inner.advance()

    def reset(self):
        if self._seeded and not self._inner.replayable:
            logger.warning("Regrouping a single-pass source; the new traversal starts where the last one stopped")
        self._inner.reset()
        self._index = 0
        self._accumulate()

    def valid(self):
        if not self._seeded:
            self._accumulate()
        return bool(self._buffer)

    def current(self):
        return list(self._buffer) if self.valid() else None

    def key(self):
        return self._index if self.valid() else None

    def advance(self):
        if self.valid():
            self._index += 1
            self._accumulate()


class GroupByCursor(CursorWrapper):
    """
    Buckets every upstream element under ``key_func(value, key)``.

    Grouping is eager: the first access drains the whole upstream into an
    ordered mapping, after which the upstream is not touched again until
    ``reset()``. Groups come out in first-encounter order and each group
    keeps source order.
    """

    def __init__(self, source: Any, key_func: Callable[[Any, Any], Any]):
        super().__init__(source)
        self._key_func = key_func
        self._groups: Optional[Dict[Any, List[Any]]] = None
        self._keys: List[Any] = []
        self._position = 0

    def _materialize(self):
        if self._groups is not None:
            return
        groups: Dict[Any, List[Any]] = {}
        while self._inner.valid():
            value = self._inner.current()
            groups.setdefault(self._key_func(value, self._inner.key()), []).append(value)
            self._inner.advance()
        self._groups = groups
        self._keys = list(groups)
        self._position = 0
        logger.debug(f"Grouped upstream into {len(groups)} buckets")

    @property
    def groups(self) -> Dict[Any, List[Any]]:
        """The materialized mapping of group key to values."""
        self._materialize()
        return self._groups

    def reset(self):
        if self._groups is not None and not self._inner.replayable:
            logger.warning("Regrouping a single-pass source; groups will only hold the remaining elements")
        self._inner.reset()
        self._groups = None
        self._materialize()

    def valid(self):
        self._materialize()
        return self._position < len(self._keys)

    def current(self):
        return self._groups[self._keys[self._position]] if self.valid() else None

    def key(self):
        return self._keys[self._position] if self.valid() else None

    def advance(self):
        if self.valid():
            self._position += 1
