"""
Sequence helpers: fixed-size chunking and order-preserving de-duplication.

Both functions accept any iterable and always return NEW lists.
The input is consumed once and never modified.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, List, Set, TypeVar

from .errors import InvalidArgumentError


T = TypeVar("T")


def chunk(items: Iterable[T], size: int) -> List[List[T]]:
    """
    Split items into consecutive chunks of `size` elements.

    Every chunk has exactly `size` elements except possibly the last,
    which holds the remainder. Concatenating the chunks in order
    reproduces the input.

    Example:
        chunk(["john doe", "jane smith", "bob johnson", "alice brown"], 2)
        -> [["john doe", "jane smith"], ["bob johnson", "alice brown"]]

        chunk([1, 2, 3], 2) -> [[1, 2], [3]]
        chunk([], 3)        -> []

    Args:
        items: Any iterable
        size: Positive chunk length

    Returns:
        List of chunks (each a new list)

    Raises:
        InvalidArgumentError: If size is not a positive int
    """
    # bool is an int subclass; chunk(items, True) is almost certainly a bug
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidArgumentError(f"chunk size must be an int, got {type(size).__name__}")
    if size <= 0:
        raise InvalidArgumentError(f"chunk size must be positive, got {size}")

    chunks: List[List[T]] = []
    current: List[T] = []
    for item in items:
        current.append(item)
        if len(current) == size:
            chunks.append(current)
            current = []
    if current:
        chunks.append(current)
    return chunks


def unique(items: Iterable[T]) -> List[T]:
    """
    Return each distinct value once, in order of first occurrence.

    Example:
        unique([1, 2, 2, 3, 4, 4, 5]) -> [1, 2, 3, 4, 5]

    Equality is value equality (==). Hashable values are tracked in a set;
    unhashable values (lists, dicts) fall back to a linear scan.
    """
    result: List[T] = []
    seen: Set[Hashable] = set()
    seen_unhashable: List[Any] = []

    for item in items:
        try:
            if item in seen:
                continue
            seen.add(item)
        except TypeError:
            if item in seen_unhashable:
                continue
            seen_unhashable.append(item)
        result.append(item)
    return result


__all__ = ["chunk", "unique"]
