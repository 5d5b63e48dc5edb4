"""Container helpers: a min-priority queue and list, dict and set builders."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T")


@dataclass(frozen=True)
class _Descending:
    """Wraps an item so that larger items sort first among equal priorities."""

    value: str

    def __lt__(self, other: _Descending) -> bool:
        return self.value > other.value


class PriorityQueue:
    """Min-heap of string items keyed by integer priority.

    Lower priorities are popped first. Among equal priorities the item
    that sorts last is popped first.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, _Descending]] = []

    def push(self, priority: int, item: str) -> None:
        """Add ``item`` with ``priority``."""
        heapq.heappush(self._heap, (priority, _Descending(str(item))))

    def pop(self) -> tuple[int, str] | None:
        """Remove and return ``(priority, item)`` with the lowest priority, or None."""
        if not self._heap:
            return None
        priority, wrapped = heapq.heappop(self._heap)
        return priority, wrapped.value

    def is_empty(self) -> bool:
        """True if the queue holds no items."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


def dict_from_pairs(pairs: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Build a dict from ``(key, value)`` pairs; the last value for a key wins."""
    return dict(pairs)


def dict_zip(keys: Iterable[K], values: Iterable[V]) -> dict[K, V]:
    """Build a dict from parallel keys and values; surplus items are ignored."""
    return dict(zip(keys, values))


def set_remove(s: set[T], item: T) -> bool:
    """Remove ``item`` from ``s``; True if it was present."""
    if item in s:
        s.remove(item)
        return True
    return False


def unique(items: Iterable[T]) -> list[T]:
    """Items in first-seen order with duplicates dropped."""
    return list(dict.fromkeys(items))


def index_of(items: Sequence[T], item: T) -> int:
    """Position of the first item equal to ``item``, or -1."""
    return next((i for i, x in enumerate(items) if x == item), -1)


def remove_at(items: list[T], index: int) -> T:
    """Remove and return the item at ``index``; negative counts from the end, clamped to 0."""
    position = max(len(items) + index, 0) if index < 0 else index
    if position >= len(items):
        raise IndexError(f"removal index {index} out of range for length {len(items)}")
    return items.pop(position)


def flatten(lists: Iterable[Iterable[T]]) -> list[T]:
    """Concatenate the inner iterables into one list."""
    return [x for inner in lists for x in inner]


def count_if(items: Iterable[T], predicate: Callable[[T], Any]) -> int:
    """Number of items for which ``predicate`` is true."""
    return sum(1 for x in items if predicate(x))