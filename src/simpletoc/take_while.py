"""Prefix scan helper used by the tree builder."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def take_while(predicate: Callable[[T], object], items: Iterable[T]) -> list[T]:
    """Return the longest prefix of ``items`` for which ``predicate`` holds.

    Scanning stops at the first item for which ``predicate`` returns a falsy
    value; that item and everything after it are left out.

    Example:
        >>> take_while(lambda n: n < 3, [1, 2, 3, 1])
        [1, 2]
    """
    prefix: list[T] = []
    for item in items:
        if not predicate(item):
            break
        prefix.append(item)
    return prefix
