"""
Replay layers that turn single-pass producers into sources that can be
traversed any number of times.

``CachingIterable`` records every value the producer yields the first time
round; later traversals read the recording. ``RewindableCursor`` puts a
Cursor face on top of it so that ``reset()`` starts a new traversal.
"""

import logging
from collections.abc import Iterator
from typing import Any, Callable, Iterable, List, Optional, Union

from .cursor import Cursor, IteratorCursor

logger = logging.getLogger(__name__)

Producer = Union[Iterable[Any], Callable[[], Iterable[Any]]]


class FactoryIterable:
    """
    Iterable backed by a zero-argument factory. Each ``iter()`` calls the
    factory again and iterates whatever it returns.
    """

    def __init__(self, factory: Callable[[], Iterable[Any]]):
        if not callable(factory):
            raise TypeError("factory must be callable")
        self._factory = factory

    def __iter__(self):
        logger.debug(f"Invoking producer factory {getattr(self._factory, '__name__', self._factory)!r}")
        return iter(self._factory())


class CachingIterable:
    """
    Full-materializing cache in front of a producer.

    ``producer`` is a generator (or any iterator/iterable) or a zero-argument
    callable returning one. The factory is called at most once, when the
    first value is needed. Traversals walk the cache by index and only pull
    from the producer when they run past its end, so a half-finished first
    pass is completed, not truncated, by the next one.
    """

    def __init__(self, producer: Producer):
        if callable(producer) and not isinstance(producer, Iterator):
            self._source: Any = FactoryIterable(producer)
        else:
            self._source = producer
        self._iterator: Optional[Iterator] = None
        self._cache: List[Any] = []
        self._exhausted = False

    @property
    def warm(self) -> bool:
        """True once the producer has been drained completely."""
        return self._exhausted

    @property
    def cache(self) -> List[Any]:
        return list(self._cache)

    def _pull(self) -> bool:
        if self._exhausted:
            return False
        if self._iterator is None:
            self._iterator = iter(self._source)
        try:
            self._cache.append(next(self._iterator))
        except StopIteration:
            self._exhausted = True
            self._iterator = None
            logger.debug(f"Producer drained, {len(self._cache)} values cached")
            return False
        return True

    def __iter__(self):
        index = 0
        while index < len(self._cache) or self._pull():
            yield self._cache[index]
            index += 1

    def __len__(self):
        # forces the cache warm
        while self._pull():
            pass
        return len(self._cache)


class RewindableCursor(Cursor):
    """
    Cursor over a generator (or generator factory) that can be reset.

    The first traversal drives the producer while warming the cache; every
    ``reset()`` afterwards replays the cached values in the same order.
    """

    def __init__(self, producer: Producer):
        self._aggregate = producer if isinstance(producer, CachingIterable) else CachingIterable(producer)
        self._cursor: Optional[IteratorCursor] = None

    @property
    def aggregate(self) -> CachingIterable:
        return self._aggregate

    def _active(self) -> IteratorCursor:
        if self._cursor is None:
            self._cursor = IteratorCursor(iter(self._aggregate))
        return self._cursor

    def reset(self):
        self._cursor = IteratorCursor(iter(self._aggregate))

    def valid(self):
        return self._active().valid()

    def current(self):
        return self._active().current()

    def key(self):
        return self._active().key()

    def advance(self):
        self._active().advance()
