from typing import TYPE_CHECKING

from ._exceptions import (
    MTAlreadyExistsError,
    MTDanglingParentError,
    MTError,
    MTNotFoundError,
)
from ._node import Entry, NamespaceNode
from ._result import MTResult, MTStatus
from ._tree import MemoryTree
from ._typing import MTStats

if TYPE_CHECKING:
    from ._async import AsyncMemoryTree


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "AsyncMemoryTree":
        from ._async import AsyncMemoryTree

        globals()["AsyncMemoryTree"] = AsyncMemoryTree
        return AsyncMemoryTree
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "MemoryTree",
    "NamespaceNode",
    "Entry",
    "MTResult",
    "MTStatus",
    "MTStats",
    "MTError",
    "MTAlreadyExistsError",
    "MTNotFoundError",
    "MTDanglingParentError",
    "AsyncMemoryTree",
]
__version__ = "0.1.0"
