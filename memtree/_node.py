from __future__ import annotations

import threading
import weakref

from ._exceptions import MTAlreadyExistsError, MTNotFoundError

# ---------------------------------------------------------------------------
#  Entry
# ---------------------------------------------------------------------------


class Entry:
    __slots__ = ("_name", "content")

    def __init__(self, name: str) -> None:
        self._name: str = name
        self.content: str = ""

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Entry({self._name!r})"


# ---------------------------------------------------------------------------
#  Namespace Node
# ---------------------------------------------------------------------------


class NamespaceNode:
    """A directory: two independent name mappings plus a parent back-reference.

    ``children`` and ``entries`` are owned by this node and guarded by its
    own lock.  The parent is held through a :func:`weakref.ref`, so a child
    never keeps its parent alive; ownership flows strictly downwards from
    the root.  A directory and a file may share a name because they live in
    separate mappings.
    """

    __slots__ = ("_name", "children", "entries", "_parent_ref", "_lock", "__weakref__")

    def __init__(self, name: str, parent: NamespaceNode | None = None) -> None:
        self._name: str = name
        self.children: dict[str, NamespaceNode] = {}
        self.entries: dict[str, Entry] = {}
        self._parent_ref: weakref.ref[NamespaceNode] | None = (
            weakref.ref(parent) if parent is not None else None
        )
        self._lock: threading.Lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_root(self) -> bool:
        return self._parent_ref is None

    def resolve_parent(self) -> NamespaceNode | None:
        """Return the live parent, or ``None`` for the root or a dead reference."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    # -- entries --

    def create_entry(self, name: str) -> Entry:
        with self._lock:
            if name in self.entries:
                raise MTAlreadyExistsError(name, "file")
            entry = Entry(name)
            self.entries[name] = entry
            return entry

    def read_entry(self, name: str) -> str:
        with self._lock:
            entry = self.entries.get(name)
            if entry is None:
                raise MTNotFoundError(name, "file")
            return entry.content

    def write_entry(self, name: str, content: str) -> None:
        with self._lock:
            entry = self.entries.get(name)
            if entry is None:
                raise MTNotFoundError(name, "file")
            entry.content = content

    def delete_entry(self, name: str) -> None:
        with self._lock:
            if name not in self.entries:
                raise MTNotFoundError(name, "file")
            del self.entries[name]

    def list_entries(self) -> list[str]:
        with self._lock:
            return list(self.entries.keys())

    # -- children --

    def create_child(self, name: str) -> NamespaceNode:
        with self._lock:
            if name in self.children:
                raise MTAlreadyExistsError(name, "directory")
            child = NamespaceNode(name, parent=self)
            self.children[name] = child
            return child

    def lookup_child(self, name: str) -> NamespaceNode:
        with self._lock:
            child = self.children.get(name)
            if child is None:
                raise MTNotFoundError(name, "directory")
            return child

    def list_children(self) -> list[str]:
        with self._lock:
            return list(self.children.keys())

    def child_nodes(self) -> list[NamespaceNode]:
        with self._lock:
            return list(self.children.values())

    def __repr__(self) -> str:
        return f"NamespaceNode({self._name!r})"
