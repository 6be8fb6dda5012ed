"""Insert a table of contents into Markdown text."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from simpletoc.config import CODE_FENCE_PATTERN, DEFAULT_HEADING_PATTERN, DEFAULT_MD_TARGET
from simpletoc.md_list import MdListOptions, render_md_list
from simpletoc.tree import Node, build_tree

logger = logging.getLogger(__name__)

_HASHES_RE = re.compile(r"^#+")


def extract_headings(text: str, pattern: re.Pattern[str] = DEFAULT_HEADING_PATTERN) -> list[str]:
    """Return the heading lines of ``text`` in order.

    Fenced code blocks are removed first, since shell comments inside them
    look like headings.
    """
    return pattern.findall(CODE_FENCE_PATTERN.sub("", text))


def compare_headings(current: str, nxt: str) -> bool:
    """True when ``nxt`` has more leading ``#`` than ``current``."""
    return _HASHES_RE.match(nxt).group(0) > _HASHES_RE.match(current).group(0)


@dataclass
class MdTocOptions(MdListOptions):
    """Options for :func:`md_toc`.

    Attributes:
        compare: ``(current, next) -> bool``; nesting relation between heading lines.
        extract: ``(text) -> list[str]``; heading lines of the document.
        target: Placeholder replaced by the list, as a pattern or regex string.
            A string is compiled with ``re.MULTILINE``.
    """

    compare: Callable[[str, str], bool] = compare_headings
    extract: Callable[[str], list[str]] = extract_headings
    target: re.Pattern[str] | str = DEFAULT_MD_TARGET

    @property
    def target_pattern(self) -> re.Pattern[str]:
        if isinstance(self.target, str):
            return re.compile(self.target, re.MULTILINE)
        return self.target


def md_forest(text: str, options: MdTocOptions | None = None) -> list[Node[str]]:
    """Build the heading tree of a Markdown document."""
    opts = options or MdTocOptions()
    headings = opts.extract(text)
    logger.debug("Found %d Markdown headings", len(headings))
    return build_tree(headings, opts.compare)


def md_toc(text: str, options: MdTocOptions | None = None) -> str:
    """Replace the first placeholder in ``text`` with its table of contents.

    The placeholder defaults to a line containing only ``TOC``. A document
    without headings renders an empty list, so the placeholder is removed.

    Example:
        >>> print(md_toc("TOC\\n\\n# First\\n\\n## Second"))
        1. [First](#first)
            1. [Second](#second)
        <BLANKLINE>
        # First
        <BLANKLINE>
        ## Second
    """
    opts = options or MdTocOptions()
    toc = render_md_list(md_forest(text, opts), opts)
    return opts.target_pattern.sub(lambda _match: toc, text, count=1)
