from __future__ import annotations

import collections
import threading
from collections.abc import Iterable, Iterator
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class BoundedLog(Generic[T]):
    """Fixed-capacity, newest-first log. Appending past capacity evicts the oldest item."""

    def __init__(self, capacity: int = 12) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: Deque[T] = collections.deque(maxlen=capacity)
        self._lock = threading.Lock()

    def push(self, item: T) -> None:
        with self._lock:
            self._items.appendleft(item)

    def prepend(self, items: Iterable[T]) -> None:
        """Place *items* at the front as one block, keeping their order."""
        with self._lock:
            for item in reversed(list(items)):
                self._items.appendleft(item)

    def snapshot(self) -> list[T]:
        with self._lock:
            return list(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())


__all__ = ["BoundedLog"]
