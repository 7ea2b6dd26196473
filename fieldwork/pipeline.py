from __future__ import annotations

import itertools
from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

from fieldwork.records import get_field

T = TypeVar("T")

KeySelector = Callable[[Any], Any] | str | None


def _key_function(key: KeySelector) -> Callable[[Any], Any]:
    if key is None:
        return lambda item: item
    if isinstance(key, str):
        return lambda item: get_field(item, key)
    return key


def unique(items: Iterable[T], key: KeySelector = None) -> list[T]:
    """Returns the first item of each distinct key, in order of first occurrence.

    `key` is either a callable, or a field name looked up in each item.
    Without a key, items are compared by value.

    >>> unique(['a', 'c', 'b', 'b', 'c', 'z'])
    ['a', 'c', 'b', 'z']
    """
    key_of = _key_function(key)
    seen: set[Hashable] = set()
    seen_unhashable: list = []
    collected = []
    for item in items:
        item_key = key_of(item)
        try:
            if item_key in seen:
                continue
            seen.add(item_key)
        except TypeError:
            # Unhashable keys (dicts, lists) fall back to linear lookup
            if item_key in seen_unhashable:
                continue
            seen_unhashable.append(item_key)
        collected.append(item)
    return collected


def first(items: Iterable[T], n: int = 1) -> T | list[T] | None:
    if n == 1:
        return next(iter(items), None)
    return list(itertools.islice(items, max(n, 0)))


def last(items: Iterable[T], n: int = 1) -> T | list[T] | None:
    collected = list(items)
    if n == 1:
        return collected[-1] if collected else None
    if n <= 0:
        return []
    return collected[-n:]


def any_(items: Iterable[T], predicate: Callable[[T], Any] = bool) -> bool:
    return any(predicate(item) for item in items)


def all_(items: Iterable[T], predicate: Callable[[T], Any] = bool) -> bool:
    return all(predicate(item) for item in items)


def median(numbers: Iterable[float]) -> float:
    """
    >>> median([5, 1, 20, 4, 4])
    4
    >>> median([1, 2, 3, 4])
    2.5
    """
    ordered = sorted(numbers)
    if not ordered:
        raise ValueError("median() of an empty sequence")
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[middle]
    return (ordered[middle - 1] + ordered[middle]) / 2
