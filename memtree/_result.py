from __future__ import annotations

import enum
from dataclasses import dataclass


class MTStatus(enum.Enum):
    SUCCESS = "success"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    ALREADY_AT_ROOT = "already_at_root"
    DANGLING_PARENT = "dangling_parent"


@dataclass(frozen=True)
class MTResult:
    """Outcome of one :class:`~memtree.MemoryTree` operation.

    ``content`` is only set for a successful read.  ``ALREADY_AT_ROOT`` is
    informational: it is not ``ok`` but callers should present it as a
    notice rather than an error.
    """

    status: MTStatus
    name: str | None = None
    content: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is MTStatus.SUCCESS

    @classmethod
    def success(cls, name: str | None = None, content: str | None = None) -> MTResult:
        return cls(MTStatus.SUCCESS, name, content)
