"""Test setup for simpletoc."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bs4 import BeautifulSoup  # noqa: E402
from bs4.element import Tag  # noqa: E402


@pytest.fixture
def heading():
    """Factory creating a standalone heading tag from an HTML snippet."""

    def _make(html: str) -> Tag:
        return BeautifulSoup(html, "html.parser").find()

    return _make


@pytest.fixture
def soup() -> BeautifulSoup:
    """Empty document used as a tag factory."""
    return BeautifulSoup("", "lxml")
