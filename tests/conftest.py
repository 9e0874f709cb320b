"""
Configuration for pytest: import path setup and producer fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so `lazyiter` imports without installing
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))


class CountingFactory:
    """Zero-argument generator factory that records how often it was invoked."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0
        self.pulled = 0

    def __call__(self):
        self.calls += 1
        return self._generate()

    def _generate(self):
        for value in self.values:
            self.pulled += 1
            yield value


@pytest.fixture
def counting_factory():
    """Build a CountingFactory over the given values."""
    return CountingFactory


@pytest.fixture
def one_shot():
    """Build a single-pass generator over the given values."""
    def _make(values):
        return (value for value in values)
    return _make
