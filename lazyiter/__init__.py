"""
Composable, lazy sequence adapters built on a resettable cursor protocol.
"""

from .bounded import InfiniteCursor, LimitCursor, RangeCursor, RepeatableCursor
from .combine import ChainCursor, InterleaveCursor, ZipCursor
from .cursor import (
    Cursor,
    CursorWrapper,
    IterableCursor,
    IteratorCursor,
    MappingCursor,
    SequenceCursor,
    to_cursor,
)
from .filters import FilterCursor, UniqueCursor
from .grouping import ChunkCursor, ConsecutiveGroupCursor, GroupByCursor
from .lazy import LazyCollection
from .models import ChunkConfig, Equality, RangeConfig, RepeatConfig, UniqueConfig, WindowConfig
from .replay import CachingIterable, FactoryIterable, RewindableCursor
from .transform import ClosureCursor, TrimCursor
from .window import LookaheadCursor, SlidingWindowCursor

__all__ = [
    "CachingIterable",
    "ChainCursor",
    "ChunkConfig",
    "ChunkCursor",
    "ClosureCursor",
    "ConsecutiveGroupCursor",
    "Cursor",
    "CursorWrapper",
    "Equality",
    "FactoryIterable",
    "FilterCursor",
    "GroupByCursor",
    "InfiniteCursor",
    "InterleaveCursor",
    "IterableCursor",
    "IteratorCursor",
    "LazyCollection",
    "LimitCursor",
    "LookaheadCursor",
    "MappingCursor",
    "RangeConfig",
    "RangeCursor",
    "RepeatConfig",
    "RepeatableCursor",
    "RewindableCursor",
    "SequenceCursor",
    "SlidingWindowCursor",
    "TrimCursor",
    "UniqueConfig",
    "UniqueCursor",
    "WindowConfig",
    "ZipCursor",
    "to_cursor",
]
