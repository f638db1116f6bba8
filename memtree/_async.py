"""Async wrapper around MemoryTree.

All operations are delegated to :func:`asyncio.to_thread`, so the
underlying synchronous locks are never held on the event-loop thread.
"""

from __future__ import annotations

import asyncio

from ._result import MTResult
from ._tree import MemoryTree
from ._typing import MTStats


class AsyncMemoryTree:
    """Thin async facade over :class:`MemoryTree`.

    Pass an existing tree to share it between sync and async callers;
    otherwise a fresh one is created.
    """

    def __init__(self, tree: MemoryTree | None = None) -> None:
        self._sync = tree if tree is not None else MemoryTree()

    @property
    def sync(self) -> MemoryTree:
        return self._sync

    async def create_file(self, name: str) -> MTResult:
        return await asyncio.to_thread(self._sync.create_file, name)

    async def read_file(self, name: str) -> MTResult:
        return await asyncio.to_thread(self._sync.read_file, name)

    async def write_file(self, name: str, content: str) -> MTResult:
        return await asyncio.to_thread(self._sync.write_file, name, content)

    async def delete_file(self, name: str) -> MTResult:
        return await asyncio.to_thread(self._sync.delete_file, name)

    async def create_directory(self, name: str) -> MTResult:
        return await asyncio.to_thread(self._sync.create_directory, name)

    async def change_directory(self, name: str) -> MTResult:
        return await asyncio.to_thread(self._sync.change_directory, name)

    async def go_to_parent(self) -> MTResult:
        return await asyncio.to_thread(self._sync.go_to_parent)

    async def go_to_root(self) -> MTResult:
        return await asyncio.to_thread(self._sync.go_to_root)

    async def list_files(self) -> list[str]:
        return await asyncio.to_thread(self._sync.list_files)

    async def list_directories(self) -> list[str]:
        return await asyncio.to_thread(self._sync.list_directories)

    async def pwd(self) -> str:
        return await asyncio.to_thread(self._sync.pwd)

    async def stats(self) -> MTStats:
        return await asyncio.to_thread(self._sync.stats)
