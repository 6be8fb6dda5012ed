"""simpletoc: turn document headings into a nested table of contents."""

from simpletoc.dom_list import DomListOptions, render_dom_list
from simpletoc.dom_toc import DomTocOptions, dom_toc, html_toc
from simpletoc.entries import forest_to_entries, html_entries, md_entries
from simpletoc.exceptions import (
    FetchError,
    ParseError,
    SimpletocError,
    TargetNotFoundError,
)
from simpletoc.md_list import MdListOptions, render_md_list
from simpletoc.md_toc import MdTocOptions, md_toc
from simpletoc.schemas import TocEntry
from simpletoc.take_while import take_while
from simpletoc.tree import Node, build_tree, flatten

__all__ = [
    "DomListOptions",
    "DomTocOptions",
    "FetchError",
    "MdListOptions",
    "MdTocOptions",
    "Node",
    "ParseError",
    "SimpletocError",
    "TargetNotFoundError",
    "TocEntry",
    "build_tree",
    "dom_toc",
    "flatten",
    "forest_to_entries",
    "html_entries",
    "html_toc",
    "md_entries",
    "md_toc",
    "render_dom_list",
    "render_md_list",
    "take_while",
]
