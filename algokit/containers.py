"""Small container types: an LRU cache, a two-stack queue and a locked mapping."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache:
    """A fixed-capacity cache that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it recently used, or -1 if absent."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest key when full."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)


class MyQueue:
    """A FIFO queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def push(self, x: int) -> None:
        """Add ``x`` to the back of the queue."""
        self._inbox.append(x)

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def pop(self) -> int:
        """Remove and return the front element."""
        self._refill()
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the front element without removing it."""
        self._refill()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return not self._inbox and not self._outbox


class SyncMap(Generic[K, V]):
    """A mapping whose reads and writes are guarded by a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[K, V] = {}

    def __getitem__(self, key: K) -> V:
        with self._lock:
            return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        with self._lock:
            self._data[key] = value

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value for ``key``, or ``default`` if it is absent."""
        with self._lock:
            return self._data.get(key, default)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)