"""Command line interface for generating tables of contents."""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path

from simpletoc.config import DEFAULT_CLASS_NAME, SIMPLETOC_HTML_PARSER, SIMPLETOC_LOG_LEVEL
from simpletoc.dom_list import render_dom_list
from simpletoc.dom_toc import DomTocOptions, dom_forest, dom_toc
from simpletoc.entries import html_entries, md_entries
from simpletoc.exceptions import SimpletocError
from simpletoc.http_utils import fetch_text
from simpletoc.md_list import render_md_list
from simpletoc.md_toc import MdTocOptions, md_forest, md_toc
from simpletoc.schemas import TocEntry

try:
    from bs4 import BeautifulSoup
    from soupsieve import SelectorSyntaxError
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

_HTML_SUFFIXES = {".html", ".htm", ".xhtml"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simpletoc",
        description="Generate a table of contents for a Markdown or HTML document.",
    )
    parser.add_argument("path", nargs="?", help="Input file, or - for stdin")
    parser.add_argument("--url", help="Fetch the document from a URL instead")
    parser.add_argument(
        "--format",
        choices=("auto", "markdown", "html"),
        default="auto",
        help="Input format (default: guess from the file name or content)",
    )
    parser.add_argument(
        "--emit",
        choices=("document", "list", "json"),
        default="document",
        help="Write the document with its TOC, only the TOC list, or JSON entries",
    )
    parser.add_argument("--type", choices=("ol", "ul"), default="ol", help="List type")
    parser.add_argument(
        "--class-name",
        default=DEFAULT_CLASS_NAME,
        help="Class set on HTML list containers",
    )
    parser.add_argument(
        "--target",
        help="Placeholder regex (Markdown) or CSS selector (HTML) replaced by the TOC",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("-o", "--output", help="Write the result to this file")
    output.add_argument("--in-place", action="store_true", help="Rewrite the input file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.url and not args.path:
        parser.error("Provide a path or --url")
    if args.url and args.path:
        parser.error("Provide either a path or --url, not both")
    if args.in_place and (args.url or args.path == "-"):
        parser.error("--in-place requires an input file")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else SIMPLETOC_LOG_LEVEL.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = load_text(url=args.url, path=args.path)
        is_html = detect_html(args.format, path=args.path or args.url, text=text)
        result = generate(text, is_html=is_html, args=args)
    except (re.error, SelectorSyntaxError) as exc:
        parser.error(f"Invalid --target {args.target!r}: {exc}")
    except (SimpletocError, OSError, UnicodeDecodeError) as exc:
        logger.error("%s", exc)
        return 1

    destination = args.path if args.in_place else args.output
    if destination:
        Path(destination).write_text(result, encoding="utf-8")
        logger.info("Wrote %s", destination)
    else:
        sys.stdout.write(result if result.endswith("\n") else result + "\n")
    return 0


def load_text(*, url: str | None, path: str | None) -> str:
    if url:
        return fetch_text(url)
    if path == "-":
        return sys.stdin.read()
    return Path(path or "").read_text(encoding="utf-8")


def detect_html(fmt: str, *, path: str | None, text: str) -> bool:
    """Decide whether the input is HTML."""
    if fmt != "auto":
        return fmt == "html"
    if path and Path(path.split("?", 1)[0]).suffix.lower() in _HTML_SUFFIXES:
        return True
    return text.lstrip().startswith("<")


def generate(text: str, *, is_html: bool, args: argparse.Namespace) -> str:
    if is_html:
        options = DomTocOptions(type=args.type, class_name=args.class_name)
        if args.target:
            options.target = args.target
        soup = BeautifulSoup(text, SIMPLETOC_HTML_PARSER)
        if args.emit == "json":
            return _dump_entries(html_entries(soup, options))
        if args.emit == "list":
            return str(render_dom_list(dom_forest(soup, options), soup, options))
        dom_toc(soup, options)
        return str(soup)

    md_options = MdTocOptions(type=args.type)
    if args.target:
        md_options.target = args.target
    if args.emit == "json":
        return _dump_entries(md_entries(text, md_options))
    if args.emit == "list":
        return render_md_list(md_forest(text, md_options), md_options)
    return md_toc(text, md_options)


def _dump_entries(entries: list[TocEntry]) -> str:
    return json.dumps([entry.model_dump() for entry in entries], indent=2)
