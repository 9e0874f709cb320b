"""
Adapters that drop upstream elements.
"""

import re
from typing import Any, Callable, Dict, List, Union

from .cursor import CursorWrapper
from .models import Equality, UniqueConfig


_NUMERIC = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def _loose(value: Any) -> Any:
    # bools compare as ints and decimal or exponent strings as numbers
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str) and _NUMERIC.fullmatch(value.strip()):
        return float(value.strip())
    return value


class _SeenValues:
    """Insertion-ordered record of values, hashed when possible."""

    def __init__(self, strict: bool):
        self._strict = strict
        self._hashed: Dict[Any, Any] = {}
        self._unhashable: List[Any] = []

    def _marker(self, value):
        if self._strict:
            return type(value), value
        return _loose(value)

    def __contains__(self, value) -> bool:
        marker = self._marker(value)
        try:
            return marker in self._hashed
        except TypeError:
            return any(self._same(seen, value) for seen in self._unhashable)

    def _same(self, seen, value) -> bool:
        if self._strict and type(seen) is not type(value):
            return False
        return self._marker(seen) == self._marker(value)

    def add(self, value):
        marker = self._marker(value)
        try:
            self._hashed[marker] = value
        except TypeError:
            self._unhashable.append(value)

    def __len__(self):
        return len(self._hashed) + len(self._unhashable)


class UniqueCursor(CursorWrapper):
    """
    Keeps the first occurrence of every value and drops later repeats,
    together with their keys.

        >>> list(UniqueCursor([1, 2, 2, 3, 1]))
        [1, 2, 3]

    With ``strict=False`` values are compared loosely, so ``1``, ``1.0``,
    ``True`` and ``"1"`` count as the same value.
    """

    def __init__(self, source: Any, strict: Union[bool, Equality] = True):
        super().__init__(source)
        if isinstance(strict, bool):
            strict = Equality.STRICT if strict else Equality.LOOSE
        self.config = UniqueConfig(equality=strict)
        self._seen = _SeenValues(self.config.strict)
        self._accepted = False

    def reset(self):
        self._inner.reset()
        self._seen = _SeenValues(self.config.strict)
        self._accepted = False

    def valid(self):
        if self._accepted:
            return self._inner.valid()
        while self._inner.valid():
            value = self._inner.current()
            if value not in self._seen:
                self._seen.add(value)
                self._accepted = True
                return True
            self._inner.advance()
        return False

    def current(self):
        return self._inner.current() if self.valid() else None

    def key(self):
        return self._inner.key() if self.valid() else None

    def advance(self):
        if self.valid():
            self._accepted = False
            self._inner.advance()


class FilterCursor(CursorWrapper):
    """Passes through elements for which ``predicate(value, key)`` is truthy."""

    def __init__(self, source: Any, predicate: Callable[[Any, Any], bool]):
        super().__init__(source)
        self._predicate = predicate
        self._matched = False

    def reset(self):
        self._inner.reset()
        self._matched = False

    def valid(self):
        # the predicate runs once per upstream element
        while not self._matched and self._inner.valid():
            if self._predicate(self._inner.current(), self._inner.key()):
                self._matched = True
            else:
                self._inner.advance()
        return self._matched and self._inner.valid()

    def current(self):
        return self._inner.current() if self.valid() else None

    def key(self):
        return self._inner.key() if self.valid() else None

    def advance(self):
        if self.valid():
            self._matched = False
            self._inner.advance()
