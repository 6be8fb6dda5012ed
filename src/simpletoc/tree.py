"""Build a heading tree from a flat, document-ordered sequence."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Generic, Iterable, Sequence, TypeVar

from simpletoc.take_while import take_while

logger = logging.getLogger(__name__)

T = TypeVar("T")

Compare = Callable[[T, T], bool]


@dataclass
class Node(Generic[T]):
    """A heading item and the forest nested beneath it.

    Attributes:
        value: The heading item (a ``bs4`` tag or a Markdown heading line).
        children: Direct children in document order. Empty for a leaf.
    """

    value: T
    children: list[Node[T]] = field(default_factory=list)


def build_tree(items: Sequence[T], is_child_of: Compare) -> list[Node[T]]:
    """Group a flat sequence of headings into a forest.

    Each item becomes the anchor for the run of following items for which
    ``is_child_of(anchor, item)`` holds. Every candidate is compared against
    the same anchor, never against its left neighbour. The run is built into
    the anchor's children with the same relation; whatever follows the run
    continues as the anchor's siblings.

    Args:
        items: Headings in document order.
        is_child_of: ``(current, next) -> bool``; true when ``next`` nests
            under ``current``.

    Returns:
        The top-level nodes. An empty sequence gives an empty forest.

    Example:
        >>> forest = build_tree([5, 3, 2, 5, 4], lambda cur, nxt: nxt < cur)
        >>> [(node.value, len(node.children)) for node in forest]
        [(5, 1), (5, 1)]
    """
    forest = _build(list(items), is_child_of)
    logger.debug("Built %d top-level nodes from %d headings", len(forest), len(items))
    return forest


def _build(items: list[T], is_child_of: Compare) -> list[Node[T]]:
    forest: list[Node[T]] = []
    # Siblings are consumed in a loop; recursion only follows nesting depth.
    while items:
        current, rest = items[0], items[1:]
        children = take_while(partial(is_child_of, current), rest)
        forest.append(Node(current, _build(children, is_child_of)))
        items = rest[len(children):]
    return forest


def flatten(forest: Iterable[Node[T]]) -> list[T]:
    """Return the heading items of ``forest`` in pre-order."""
    flat: list[T] = []
    for node in forest:
        flat.append(node.value)
        flat.extend(flatten(node.children))
    return flat
