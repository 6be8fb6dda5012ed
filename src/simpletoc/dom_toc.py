"""Insert a table of contents into an HTML document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from simpletoc.config import DEFAULT_ROOT, DEFAULT_SELECTOR, DEFAULT_TARGET, SIMPLETOC_HTML_PARSER
from simpletoc.dom_list import DomListOptions, render_dom_list
from simpletoc.exceptions import TargetNotFoundError
from simpletoc.tree import Node, build_tree

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)


def compare_tags(current: Tag, nxt: Tag) -> bool:
    """True when ``nxt`` has a lexicographically greater tag name.

    ``h2`` sorts after ``h1``, so deeper headings nest under shallower ones.
    This is a string comparison, not a semantic rank.
    """
    return nxt.name > current.name


@dataclass
class DomTocOptions(DomListOptions):
    """Options for :func:`dom_toc`.

    Attributes:
        compare: ``(current, next) -> bool``; nesting relation between headings.
        root: CSS selector of the element whose headings are listed.
        selector: CSS selector matching the headings under ``root``.
        target: CSS selector of the element that receives the list.
    """

    compare: Callable[[Tag, Tag], bool] = compare_tags
    root: str = DEFAULT_ROOT
    selector: str = DEFAULT_SELECTOR
    target: str = DEFAULT_TARGET


def select_one(soup: BeautifulSoup | Tag, selector: str) -> Tag:
    """Return the first match of ``selector`` or raise :class:`TargetNotFoundError`."""
    element = soup.select_one(selector)
    if element is None:
        raise TargetNotFoundError(f"No element matches selector {selector!r}")
    return element


def dom_forest(soup: BeautifulSoup, options: DomTocOptions | None = None) -> list[Node[Tag]]:
    """Build the heading tree of the document under ``options.root``."""
    opts = options or DomTocOptions()
    return _forest_under(select_one(soup, opts.root), opts)


def _forest_under(root: Tag, options: DomTocOptions) -> list[Node[Tag]]:
    headings = root.select(options.selector)
    logger.debug("Found %d headings under %r", len(headings), options.root)
    return build_tree(headings, options.compare)


def dom_toc(soup: BeautifulSoup, options: DomTocOptions | None = None) -> Tag:
    """Render the document's table of contents into its target element.

    Both selectors are resolved before the target's existing children are
    removed, so a failed lookup leaves the document unchanged. Headings without an id receive one, as described in
    :func:`simpletoc.dom_list.render_dom_list`.

    Returns:
        The list element now attached to the target.

    Raises:
        TargetNotFoundError: If ``options.target`` or ``options.root`` matches nothing.
    """
    opts = options or DomTocOptions()
    target = select_one(soup, opts.target)
    root = select_one(soup, opts.root)
    target.clear()
    toc = render_dom_list(_forest_under(root, opts), soup, opts)
    target.append(toc)
    return toc


def html_toc(html: str, options: DomTocOptions | None = None, *, parser: str | None = None) -> str:
    """Parse ``html``, insert its table of contents and serialize it back."""
    soup = BeautifulSoup(html, parser or SIMPLETOC_HTML_PARSER)
    dom_toc(soup, options)
    return str(soup)
