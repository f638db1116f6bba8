from __future__ import annotations

import logging
from collections.abc import Callable

from ._exceptions import MTAlreadyExistsError, MTDanglingParentError, MTNotFoundError
from ._lock import ReadWriteLock
from ._node import NamespaceNode
from ._result import MTResult, MTStatus
from ._typing import MTStats

logger = logging.getLogger(__name__)

ROOT_NAME = "/"


def _require_str(value: object, what: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be str, not {type(value).__name__}")


# ---------------------------------------------------------------------------
#  MemoryTree
# ---------------------------------------------------------------------------


class MemoryTree:
    """In-memory directory tree with a single current position.

    Every file and directory operation addresses a bare name inside the
    current directory.  Two lock tiers are used:

    * each :class:`NamespaceNode` guards its own mappings, so operations in
      different directories never contend;
    * ``_position_lock`` guards ``_current``.  Navigation takes it
      exclusively; every other operation takes it shared just long enough
      to read ``_current`` and then works under the node's own lock.

    The position lock is always taken before a node lock, never after.
    """

    def __init__(self) -> None:
        self._root = NamespaceNode(ROOT_NAME)
        self._current: NamespaceNode = self._root
        self._position_lock = ReadWriteLock()

    # -- helpers --

    def _current_node(self) -> NamespaceNode:
        with self._position_lock.read_locked():
            return self._current

    def _forward(self, action: str, name: str, op: Callable[[NamespaceNode], object]) -> MTResult:
        node = self._current_node()
        try:
            op(node)
        except MTAlreadyExistsError:
            return MTResult(MTStatus.ALREADY_EXISTS, name)
        except MTNotFoundError:
            return MTResult(MTStatus.NOT_FOUND, name)
        logger.debug("%s %r in %r", action, name, node.name)
        return MTResult.success(name)

    # -- public API: files --

    def create_file(self, name: str) -> MTResult:
        _require_str(name, "name")
        return self._forward("created file", name, lambda node: node.create_entry(name))

    def read_file(self, name: str) -> MTResult:
        _require_str(name, "name")
        node = self._current_node()
        try:
            content = node.read_entry(name)
        except MTNotFoundError:
            return MTResult(MTStatus.NOT_FOUND, name)
        return MTResult.success(name, content)

    def write_file(self, name: str, content: str) -> MTResult:
        _require_str(name, "name")
        _require_str(content, "content")
        return self._forward("wrote file", name, lambda node: node.write_entry(name, content))

    def delete_file(self, name: str) -> MTResult:
        _require_str(name, "name")
        return self._forward("deleted file", name, lambda node: node.delete_entry(name))

    # -- public API: directories --

    def create_directory(self, name: str) -> MTResult:
        _require_str(name, "name")
        return self._forward("created directory", name, lambda node: node.create_child(name))

    def change_directory(self, name: str) -> MTResult:
        _require_str(name, "name")
        with self._position_lock.write_locked():
            try:
                child = self._current.lookup_child(name)
            except MTNotFoundError:
                return MTResult(MTStatus.NOT_FOUND, name)
            self._current = child
        logger.debug("changed into %r", name)
        return MTResult.success(name)

    def go_to_parent(self) -> MTResult:
        with self._position_lock.write_locked():
            current = self._current
            if current.is_root:
                return MTResult(MTStatus.ALREADY_AT_ROOT)
            try:
                self._current = self._resolve_parent(current)
            except MTDanglingParentError:
                logger.warning("parent of %r no longer exists", current.name)
                return MTResult(MTStatus.DANGLING_PARENT, current.name)
            name = self._current.name
        logger.debug("moved to parent %r", name)
        return MTResult.success(name)

    def go_to_root(self) -> MTResult:
        with self._position_lock.write_locked():
            self._current = self._root
        logger.debug("moved to root")
        return MTResult.success(ROOT_NAME)

    @staticmethod
    def _resolve_parent(node: NamespaceNode) -> NamespaceNode:
        parent = node.resolve_parent()
        if parent is None:
            raise MTDanglingParentError(node.name)
        return parent

    # -- public API: inspection --

    @property
    def root(self) -> NamespaceNode:
        return self._root

    @property
    def current(self) -> NamespaceNode:
        return self._current_node()

    def list_files(self) -> list[str]:
        return self._current_node().list_entries()

    def list_directories(self) -> list[str]:
        return self._current_node().list_children()

    def pwd(self) -> str:
        """Return the slash-joined names from the root to the current directory."""
        with self._position_lock.read_locked():
            node: NamespaceNode | None = self._current
            parts: list[str] = []
            while node is not None and not node.is_root:
                parts.append(node.name)
                node = node.resolve_parent()
        return ROOT_NAME + "/".join(reversed(parts))

    def stats(self) -> MTStats:
        """Count files and directories in the whole tree.

        Each directory is snapshotted under its own lock in turn, so the
        totals are not atomic with respect to concurrent creates elsewhere.
        """
        file_count = 0
        dir_count = 0
        pending = [self._root]
        while pending:
            node = pending.pop()
            dir_count += 1
            file_count += len(node.list_entries())
            pending.extend(node.child_nodes())
        return MTStats(file_count=file_count, dir_count=dir_count)
