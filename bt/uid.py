"""
Unique ID generation for created blocks.

IDs are locally unique (a process-wide counter) unless a coordinator is
attached, in which case the coordinator turns each local counter value into a
globally unique string (collaborative mode).
"""

from __future__ import annotations

from typing import Optional, Protocol


class UidCoordinator(Protocol):
    def gen_uid(self, local_uid: str) -> str:
        """Return a globally unique ID for the given local counter value."""
        ...


class UidGenerator:
    """Not thread-safe: callers serialize access, like for the block registry."""

    def __init__(self, coordinator: Optional[UidCoordinator] = None):
        self._counter = 0
        self.coordinator = coordinator

    def gen_uid(self) -> str:
        self._counter += 1
        uid = str(self._counter)
        if self.coordinator is not None:
            return self.coordinator.gen_uid(uid)
        return uid

    @property
    def counter(self) -> int:
        return self._counter


__all__ = ["UidCoordinator", "UidGenerator"]
