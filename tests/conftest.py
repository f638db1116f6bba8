import pytest
from memtree import MemoryTree


@pytest.fixture
def mtree() -> MemoryTree:
    """A fresh tree positioned at its root."""
    return MemoryTree()
