"""
Cyclic and bounded adapters, and the arithmetic range generator.
"""

import logging
import math
from typing import Any, Optional

from .cursor import Cursor, CursorWrapper, to_cursor
from .models import RangeConfig, RepeatConfig

logger = logging.getLogger(__name__)


class InfiniteCursor(CursorWrapper):
    """
    Restarts the upstream whenever it runs out. An upstream that is still
    empty right after a restart ends the traversal, so empty and exhausted
    single-pass sources do not loop forever.
    """

    def advance(self):
        if not self._inner.valid():
            return
        self._inner.advance()
        if not self._inner.valid():
            self._inner.reset()


class LimitCursor(CursorWrapper):
    """
    Window of at most ``limit`` elements that starts ``offset`` elements into
    the upstream. ``limit=None`` means no upper bound. Negative values are
    treated as zero.
    """

    def __init__(self, source: Any, offset: int = 0, limit: Optional[int] = None):
        super().__init__(source)
        self.offset = max(0, offset)
        self.limit = None if limit is None else max(0, limit)
        self._seeked = False
        self._emitted = 0

    def _seek(self):
        if self._seeked:
            return
        self._seeked = True
        skipped = 0
        while skipped < self.offset and self._inner.valid():
            self._inner.advance()
            skipped += 1

    def reset(self):
        self._inner.reset()
        self._seeked = False
        self._emitted = 0

    def valid(self):
        if self.limit is not None and self._emitted >= self.limit:
            return False
        self._seek()
        return self._inner.valid()

    def current(self):
        return self._inner.current() if self.valid() else None

    def key(self):
        return self._inner.key() if self.valid() else None

    def advance(self):
        if self.valid():
            self._inner.advance()
            self._emitted += 1


class RepeatableCursor(LimitCursor):
    """
    Repeats a finite source endlessly and exposes ``limit`` elements of the
    repetition, starting at ``offset``.

        >>> list(RepeatableCursor([1, 2, 3], limit=7, offset=1))
        [2, 3, 1, 2, 3, 1, 2]

    The source is restarted on every cycle and must therefore be replayable.
    """

    def __init__(self, source: Any, limit: int, offset: int = 0):
        self.config = RepeatConfig(limit=limit, offset=offset)
        upstream = to_cursor(source)
        if not upstream.replayable:
            logger.warning("Repeating a single-pass source; it will not restart after the first cycle")
        super().__init__(InfiniteCursor(upstream), self.config.offset, self.config.limit)

    def count(self) -> int:
        """The configured bound, not a measured length."""
        return self.config.limit

    def __len__(self):
        return self.count()


class RangeCursor(Cursor):
    """
    Arithmetic sequence from ``start`` towards ``end`` (inclusive when hit
    exactly). ``step`` is always positive; a ``start`` above ``end`` counts
    down.

        >>> list(RangeCursor(0, 5, 1.5))
        [0, 1.5, 3.0, 4.5]
        >>> list(RangeCursor(5, 0, 1.5))
        [5, 3.5, 2.0, 0.5]
    """

    def __init__(self, start, end, step=1):
        self.config = RangeConfig(start=start, end=end, step=step)
        self._step = -self.config.step if self.config.descending else self.config.step
        self._current = self.config.start
        self._index = 0

    @property
    def step(self):
        return self._step

    def reset(self):
        self._current = self.config.start
        self._index = 0

    def valid(self):
        if self._step > 0:
            return self._current <= self.config.end
        return self._current >= self.config.end

    def current(self):
        return self._current if self.valid() else None

    def key(self):
        return self._index if self.valid() else None

    def advance(self):
        if self.valid():
            self._current += self._step
            self._index += 1

    def count(self) -> int:
        start, end = self.config.start, self.config.end
        if (self._step > 0 and end < start) or (self._step < 0 and end > start):
            return 0
        return math.floor(abs(end - start) / abs(self._step)) + 1

    def __len__(self):
        return self.count()
