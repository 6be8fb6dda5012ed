"""Convert heading trees into serializable table of contents entries."""

from __future__ import annotations

import re
from typing import Callable, TypeVar

from simpletoc.config import SIMPLETOC_HTML_PARSER
from simpletoc.dom_toc import DomTocOptions, dom_forest
from simpletoc.md_toc import MdTocOptions, md_forest
from simpletoc.schemas import TocEntry
from simpletoc.tree import Node

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

T = TypeVar("T")

_HEADING_TAG_RE = re.compile(r"^h([1-6])$")
_HASHES_RE = re.compile(r"^(#+)")


def forest_to_entries(
    forest: list[Node[T]],
    *,
    get_title: Callable[[T], str],
    get_anchor: Callable[[T, list[Node[T]]], str],
    get_level: Callable[[T], int | None] | None = None,
) -> list[TocEntry]:
    """Map every node of ``forest`` to a :class:`TocEntry`, keeping the nesting.

    Nodes with an empty value are dropped together with their children.
    """
    entries: list[TocEntry] = []
    for node in forest:
        if not node.value:
            continue
        entries.append(
            TocEntry(
                title=get_title(node.value),
                anchor=get_anchor(node.value, node.children),
                level=get_level(node.value) if get_level else None,
                children=forest_to_entries(
                    node.children,
                    get_title=get_title,
                    get_anchor=get_anchor,
                    get_level=get_level,
                ),
            )
        )
    return entries


def md_entries(text: str, options: MdTocOptions | None = None) -> list[TocEntry]:
    """Build table of contents entries for a Markdown document."""
    opts = options or MdTocOptions()
    return forest_to_entries(
        md_forest(text, opts),
        get_title=opts.get_text,
        get_anchor=lambda line, _children: opts.get_ref(opts.get_text(line)),
        get_level=_markdown_level,
    )


def html_entries(document: BeautifulSoup | str, options: DomTocOptions | None = None) -> list[TocEntry]:
    """Build table of contents entries for an HTML document.

    Anchors come from ``options.get_id``; unlike :func:`simpletoc.dom_toc.dom_toc`
    the headings are left untouched.
    """
    opts = options or DomTocOptions()
    soup = BeautifulSoup(document, SIMPLETOC_HTML_PARSER) if isinstance(document, str) else document
    return forest_to_entries(
        dom_forest(soup, opts),
        get_title=lambda element: element.get_text(),
        get_anchor=opts.get_id,
        get_level=_html_level,
    )


def _markdown_level(line: str) -> int | None:
    match = _HASHES_RE.match(line)
    if not match or len(match.group(1)) > 6:
        return None
    return len(match.group(1))


def _html_level(element: Tag) -> int | None:
    match = _HEADING_TAG_RE.match(element.name)
    return int(match.group(1)) if match else None
