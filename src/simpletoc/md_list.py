"""Render a heading tree as a nested Markdown list of links."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from simpletoc.config import DEFAULT_LIST_TYPE, DEFAULT_UL_BULLET, MD_INDENT
from simpletoc.tree import Node

_HEADING_MARKUP_RE = re.compile(r"^#+ +")
_LINK_RE = re.compile(r"\[(.+?)\]\(.+?\)")
_REF_STRIP_RE = re.compile(r"[^\w\- ]+", re.ASCII)
_WHITESPACE_CHAR_RE = re.compile(r"\s")


def default_get_text(line: str) -> str:
    """Strip heading markup and the first link markup from a heading line.

    Links cannot nest inside the TOC link, so ``## See [docs](http://x)``
    becomes ``See docs``.
    """
    text = _HEADING_MARKUP_RE.sub("", line, count=1)
    return _LINK_RE.sub(r"\1", text, count=1)


def default_get_ref(text: str) -> str:
    """Build a GitHub-style heading reference from heading text."""
    ref = _REF_STRIP_RE.sub("", text.strip().lower())
    return _WHITESPACE_CHAR_RE.sub("-", ref)


@dataclass
class MdListOptions:
    """Options for rendering a Markdown list.

    Attributes:
        type: ``"ol"`` numbers each sibling group from 1; anything else uses ``*``.
        get_ref: ``(text) -> str``; link target, without the leading ``#``.
        get_text: ``(heading_line) -> str``; link label.
    """

    type: str = DEFAULT_LIST_TYPE
    get_ref: Callable[[str], str] = default_get_ref
    get_text: Callable[[str], str] = default_get_text


def render_md_list(
    forest: list[Node[str]],
    options: MdListOptions | None = None,
    depth: int = 0,
) -> str:
    """Render ``forest`` as Markdown list lines, four spaces of indent per level.

    Nodes with an empty value are skipped, but still count toward the
    numbering of their siblings.

    Example:
        >>> forest = [Node("# First", [Node("## Second")])]
        >>> print(render_md_list(forest))
        1. [First](#first)
            1. [Second](#second)
    """
    return _render(forest, options or MdListOptions(), depth)


def _render(forest: list[Node[str]], options: MdListOptions, depth: int) -> str:
    lines: list[str] = []
    pad = MD_INDENT * depth
    for index, node in enumerate(forest, start=1):
        if not node.value:
            continue
        bullet = f"{index}." if options.type == "ol" else DEFAULT_UL_BULLET
        text = options.get_text(node.value)
        ref = options.get_ref(text)
        lines.append(f"{pad}{bullet} [{text}](#{ref})")
        if node.children:
            lines.append(_render(node.children, options, depth + 1))
    return "\n".join(lines)
