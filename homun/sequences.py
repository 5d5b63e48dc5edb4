"""Indexing, slicing, concatenation and membership in Homun's semantics."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

# Sentinel for "slice to the end" when no explicit end is given.
END = 2**63 - 1


def index(seq: Sequence[T] | Mapping[Any, T], key: Any) -> T:
    """Look up ``key``: a key for mappings, a position (negative from the end) otherwise."""
    if isinstance(seq, Mapping):
        return seq[key]
    length = len(seq)
    position = length + key if key < 0 else key
    if not 0 <= position < length:
        raise IndexError(f"index {key} out of range for length {length}")
    return seq[position]


def slice_of(
    seq: Sequence[T], start: int | None = 0, end: int | None = END, step: int = 1
) -> list[T]:
    """Slice ``seq`` as ``seq[start:end:step]`` does in Homun.

    Indices are clamped to the sequence. With a negative step the range
    between the two bounds is walked backwards from its upper end.
    """
    start = 0 if start is None else start
    end = END if end is None else end
    length = len(seq)

    def norm(i: int) -> int:
        i = length + i if i < 0 else i
        return max(0, min(i, length))

    if step > 0:
        return [seq[i] for i in range(norm(start), norm(end), step)]
    if step < 0:
        low = 0 if end == END else norm(end)
        high = length if start == 0 else norm(start)
        return [seq[i] for i in range(high - 1, low - 1, step)]
    return []


def concat(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Return a new list holding the items of ``a`` followed by those of ``b``."""
    return [*a, *b]


def contains(collection: Any, item: Any) -> bool:
    """Membership: element of a list or set, key of a dict, substring of a string."""
    return item in collection


def clamp(x, lo, hi):
    """Return ``lo`` if ``x`` < ``lo``, ``hi`` if ``x`` > ``hi``, else ``x``."""
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x