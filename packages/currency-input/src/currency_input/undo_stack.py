"""Bounded undo history of field snapshots."""

from __future__ import annotations

import copy
from typing import Generic, TypeVar

S = TypeVar("S")

DEFAULT_UNDO_LIMIT = 100


class UndoStack(Generic[S]):
    """LIFO of deep-copied snapshots, dropping the oldest past *limit*."""

    def __init__(self, limit: int = DEFAULT_UNDO_LIMIT) -> None:
        self._stack: list[S] = []
        self._limit = limit

    def push(self, state: S) -> None:
        self._stack.append(copy.deepcopy(state))
        if len(self._stack) > self._limit:
            del self._stack[0]

    def pop(self) -> S | None:
        # Popped snapshots are already detached, no re-cloning
        return self._stack.pop() if self._stack else None

    def clear(self) -> None:
        self._stack.clear()

    @property
    def length(self) -> int:
        return len(self._stack)
