"""
Cursor protocol and the source normalizer.

Every adapter in this package is a Cursor: a pull-based, resettable view over
one or more upstream sources. A Cursor is also a regular Python iterable, so
``for value in cursor`` and ``list(cursor)`` work on any adapter.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, List, Optional, Tuple

logger = logging.getLogger(__name__)


class Cursor(ABC):
    """
    Pull-based iteration contract.

    ``valid()`` must be answerable any number of times without changing what
    ``current()`` returns. ``current()`` and ``key()`` return None once the
    cursor is exhausted instead of raising.
    """

    @abstractmethod
    def reset(self) -> None:
        """Return the cursor to its initial state."""

    @abstractmethod
    def valid(self) -> bool:
        """Report whether a current element exists."""

    @abstractmethod
    def current(self) -> Any:
        """Value at the current position, or None when exhausted."""

    @abstractmethod
    def key(self) -> Any:
        """Key at the current position, or None when exhausted."""

    @abstractmethod
    def advance(self) -> None:
        """Move to the next element."""

    @property
    def replayable(self) -> bool:
        return True

    # --------- python iteration ----------
    def __iter__(self) -> Iterator[Any]:
        self.reset()
        while self.valid():
            yield self.current()
            self.advance()

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Traverse from the start yielding (key, value) pairs."""
        self.reset()
        while self.valid():
            yield self.key(), self.current()
            self.advance()

    def to_list(self) -> List[Any]:
        return list(self)


class SequenceCursor(Cursor):
    """Index-ordered cursor over an in-memory sequence."""

    def __init__(self, data: Sequence):
        self._data = data
        self._index = 0

    def reset(self):
        self._index = 0

    def valid(self):
        return self._index < len(self._data)

    def current(self):
        return self._data[self._index] if self.valid() else None

    def key(self):
        return self._index if self.valid() else None

    def advance(self):
        if self.valid():
            self._index += 1


class MappingCursor(Cursor):
    """Cursor over a mapping, keyed by the mapping's own keys."""

    def __init__(self, data: Mapping):
        self._data = data
        self._keys: Optional[List[Any]] = None
        self._index = 0

    def _snapshot(self):
        # keys are captured at traversal start so the mapping may change between resets
        if self._keys is None:
            self._keys = list(self._data.keys())
        return self._keys

    def reset(self):
        self._keys = None
        self._index = 0

    def valid(self):
        return self._index < len(self._snapshot())

    def current(self):
        return self._data[self._keys[self._index]] if self.valid() else None

    def key(self):
        return self._keys[self._index] if self.valid() else None

    def advance(self):
        if self.valid():
            self._index += 1


class IteratorCursor(Cursor):
    """
    Cursor over a single-pass producer such as a generator.

    Elements are pulled one at a time, only when validity is asked for, and
    never copied. The producer cannot be restarted: ``reset()`` keeps the
    current position, so a second traversal of an exhausted producer yields
    nothing.
    """

    _EMPTY = object()

    def __init__(self, iterator: Iterator):
        self._iterator = iterator
        self._value: Any = self._EMPTY
        self._index = -1
        self._started = False
        self._pending = True
        self._exhausted = False

    @property
    def replayable(self):
        return False

    def _pull(self):
        try:
            self._value = next(self._iterator)
        except StopIteration:
            self._value = self._EMPTY
            self._exhausted = True
        except Exception:
            # the previous value must never come back as the next element
            self._value = self._EMPTY
            self._exhausted = True
            raise
        else:
            self._index += 1
        finally:
            self._pending = False

    def reset(self):
        if self._started:
            logger.debug("reset() on a single-pass producer keeps its position")

    def valid(self):
        self._started = True
        if self._pending and not self._exhausted:
            self._pull()
        return not self._exhausted

    def current(self):
        return self._value if self.valid() else None

    def key(self):
        return self._index if self.valid() else None

    def advance(self):
        if self.valid():
            self._pending = True


class IterableCursor(IteratorCursor):
    """Cursor over a re-iterable object; every reset asks it for a fresh iterator."""

    def __init__(self, iterable: Iterable):
        self._iterable = iterable
        super().__init__(None)

    @property
    def replayable(self):
        return True

    def reset(self):
        self._iterator = None
        self._value = self._EMPTY
        self._index = -1
        self._pending = True
        self._exhausted = False

    def _pull(self):
        if self._iterator is None:
            self._iterator = iter(self._iterable)
        super()._pull()


def to_cursor(source: Any) -> Cursor:
    """Normalize any supported source into a Cursor without consuming it."""
    if isinstance(source, Cursor):
        return source
    if isinstance(source, Mapping):
        return MappingCursor(source)
    if isinstance(source, Sequence):
        return SequenceCursor(source)
    if isinstance(source, Iterator):
        return IteratorCursor(source)
    if isinstance(source, Iterable):
        return IterableCursor(source)
    raise TypeError(f"Cannot build a cursor from {type(source).__name__!r}")


class CursorWrapper(Cursor):
    """Base for adapters over a single upstream; delegates everything by default."""

    def __init__(self, source: Any):
        self._inner = to_cursor(source)

    @property
    def inner(self) -> Cursor:
        return self._inner

    @property
    def replayable(self):
        return self._inner.replayable

    def reset(self):
        self._inner.reset()

    def valid(self):
        return self._inner.valid()

    def current(self):
        return self._inner.current()

    def key(self):
        return self._inner.key()

    def advance(self):
        self._inner.advance()
