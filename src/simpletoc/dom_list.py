"""Render a heading tree as a nested HTML list of anchors."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from simpletoc.config import DEFAULT_CLASS_NAME, DEFAULT_LIST_TYPE
from simpletoc.tree import Node

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc


_WHITESPACE_RE = re.compile(r"\s+")


def default_get_id(element: Tag, children: list[Node[Tag]]) -> str:
    """Return the element's id, or derive one from its text.

    The derived id is the lower-cased text with every whitespace run replaced
    by a hyphen, so ``<h1>This is a Heading</h1>`` gives ``this-is-a-heading``.
    """
    existing = element.get("id")
    if existing:
        return existing
    return _WHITESPACE_RE.sub("-", element.get_text().lower())


def default_get_anchor(soup: BeautifulSoup, element: Tag, children: list[Node[Tag]]) -> Tag:
    """Create an ``<a>`` pointing at the element's id, labelled with its text."""
    anchor = soup.new_tag("a", href="#" + (element.get("id") or ""))
    anchor.string = element.get_text()
    return anchor


@dataclass
class DomListOptions:
    """Options for rendering an HTML list.

    Attributes:
        type: Tag name of every list container.
        class_name: Class or classes set on every list container, at every depth.
        get_id: ``(element, children) -> str``; id assigned to each heading.
        get_anchor: ``(soup, element, children) -> Tag``; link placed in each
            list item. Called after the heading's id has been assigned.
    """

    type: str = DEFAULT_LIST_TYPE
    class_name: str | list[str] = DEFAULT_CLASS_NAME
    get_id: Callable[[Tag, list[Node[Tag]]], str] = default_get_id
    get_anchor: Callable[[BeautifulSoup, Tag, list[Node[Tag]]], Tag] = default_get_anchor

    @property
    def classes(self) -> list[str]:
        if isinstance(self.class_name, str):
            return self.class_name.split()
        return list(self.class_name)


def render_dom_list(
    forest: list[Node[Tag]],
    soup: BeautifulSoup,
    options: DomListOptions | None = None,
) -> Tag:
    """Create a nested list of anchors pointing at the headings in ``forest``.

    ``soup`` is only used as the factory for new tags; the returned list is not
    attached anywhere.

    After this call every heading in ``forest`` carries the id produced by
    ``options.get_id``, which is written onto the heading element itself.

    Example:
        A forest of ``<h1 id="1">First</h1>`` holding ``<h2 id="2">Second</h2>``
        renders as::

            <ol class="simpletoc"><li><a href="#1">First</a>
            <ol class="simpletoc"><li><a href="#2">Second</a></li></ol></li></ol>
    """
    return _render(forest, soup, options or DomListOptions())


def _render(forest: list[Node[Tag]], soup: BeautifulSoup, options: DomListOptions) -> Tag:
    container = soup.new_tag(options.type)
    classes = options.classes
    if classes:
        container["class"] = classes

    for node in forest:
        item = soup.new_tag("li")
        node.value["id"] = options.get_id(node.value, node.children)
        item.append(options.get_anchor(soup, node.value, node.children))
        if node.children:
            item.append(_render(node.children, soup, options))
        container.append(item)

    return container
