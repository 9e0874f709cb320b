"""
Elementwise transformations.
"""

from typing import Any, Callable, Optional

from .cursor import CursorWrapper


class ClosureCursor(CursorWrapper):
    """
    Applies ``func(value, key)`` to every value as it is read. Keys,
    validity and advancing are those of the upstream.

        >>> list(ClosureCursor({"a": 1, "b": 2}, lambda value, key: f"{key}={value}"))
        ['a=1', 'b=2']
    """

    def __init__(self, source: Any, func: Callable[[Any, Any], Any]):
        super().__init__(source)
        self._func = func

    def current(self):
        if not self._inner.valid():
            return None
        return self._func(self._inner.current(), self._inner.key())


class TrimCursor(ClosureCursor):
    """Strips leading and trailing ``characters`` from every string value."""

    DEFAULT_CHARACTERS = " \n\r\t\v\x00"

    def __init__(self, source: Any, characters: Optional[str] = DEFAULT_CHARACTERS):
        chars = self.DEFAULT_CHARACTERS if characters is None else characters
        super().__init__(source, lambda value, key: value.strip(chars) if isinstance(value, str) else value)
        self.characters = chars
