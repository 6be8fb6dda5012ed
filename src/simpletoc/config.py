"""Local configuration for simpletoc."""

from __future__ import annotations

import os
import re


DEFAULT_HTML_PARSER = "lxml"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "simpletoc/0.1 (+https://github.com/simpletoc/simpletoc)"
DEFAULT_LOG_LEVEL = "WARNING"

# List rendering defaults shared by the HTML and Markdown renderers.
DEFAULT_LIST_TYPE = "ol"
DEFAULT_CLASS_NAME = "simpletoc"
DEFAULT_UL_BULLET = "*"
MD_INDENT = " " * 4

# HTML document defaults.
DEFAULT_ROOT = "body"
DEFAULT_SELECTOR = "h1,h2,h3,h4,h5,h6"
DEFAULT_TARGET = "[simpletoc]"

# Markdown text defaults.
# Line ends may be \r\n; the \r stays out of matches.
DEFAULT_HEADING_PATTERN = re.compile(r"^#+ [^\r\n]*", re.MULTILINE)
DEFAULT_MD_TARGET = re.compile(r"^TOC(?=\r?$)", re.MULTILINE)
CODE_FENCE_PATTERN = re.compile(r"```[\S\s]+?```")

SIMPLETOC_HTML_PARSER = os.getenv("SIMPLETOC_HTML_PARSER", DEFAULT_HTML_PARSER)
SIMPLETOC_FETCH_TIMEOUT_S = float(os.getenv("SIMPLETOC_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
SIMPLETOC_FETCH_MAX_RETRIES = int(os.getenv("SIMPLETOC_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
SIMPLETOC_FETCH_BACKOFF_S = float(os.getenv("SIMPLETOC_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
SIMPLETOC_USER_AGENT = os.getenv("SIMPLETOC_USER_AGENT", DEFAULT_USER_AGENT)
SIMPLETOC_LOG_LEVEL = os.getenv("SIMPLETOC_LOG_LEVEL", DEFAULT_LOG_LEVEL)
