"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["memtree._pytest_plugin"]

This makes the ``mtree`` fixture automatically available::

    def test_something(mtree):
        mtree.create_file("a.txt")
        mtree.write_file("a.txt", "hello")
"""

import pytest

from ._tree import MemoryTree


@pytest.fixture
def mtree() -> MemoryTree:
    """A fresh :class:`MemoryTree` positioned at its root.

    Provides an independent instance per test (function scope).
    """
    return MemoryTree()
