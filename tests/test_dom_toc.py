"""Tests for the HTML table of contents entry points."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from simpletoc.dom_toc import DomTocOptions, compare_tags, dom_forest, dom_toc, html_toc
from simpletoc.exceptions import ParseError, TargetNotFoundError
from simpletoc.tree import flatten

DOCUMENT = """
<html>
  <body>
    <nav simpletoc><p>stale</p></nav>
    <article>
      <h1>First</h1>
      <p>Lorem ipsum</p>
      <h2>Second Part</h2>
      <h3>Deep</h3>
      <h2>Another</h2>
      <h1 id="custom">Third</h1>
    </article>
    <footer><h2>Footer</h2></footer>
  </body>
</html>
"""


@pytest.fixture
def document() -> BeautifulSoup:
    return BeautifulSoup(DOCUMENT, "lxml")


class TestDomToc:
    """Tests for dom_toc function."""

    def test_appends_list_to_target(self, document: BeautifulSoup) -> None:
        """The target holds only the new list."""
        toc = dom_toc(document)

        target = document.select_one("[simpletoc]")
        assert [child for child in target.children] == [toc]
        assert "stale" not in target.get_text()

    def test_creates_link_per_heading(self, document: BeautifulSoup) -> None:
        """Every heading under root gets one link."""
        toc = dom_toc(document)

        hrefs = [a["href"] for a in toc.select("a[href]")]
        assert hrefs == ["#first", "#second-part", "#deep", "#another", "#custom", "#footer"]

    def test_nests_by_heading_level(self, document: BeautifulSoup) -> None:
        """The rendered list mirrors heading depth."""
        toc = dom_toc(document, DomTocOptions(root="article"))

        assert str(toc) == (
            '<ol class="simpletoc">'
            '<li><a href="#first">First</a><ol class="simpletoc">'
            '<li><a href="#second-part">Second Part</a><ol class="simpletoc">'
            '<li><a href="#deep">Deep</a></li></ol></li>'
            '<li><a href="#another">Another</a></li></ol></li>'
            '<li><a href="#custom">Third</a></li></ol>'
        )

    def test_assigns_ids_to_headings(self, document: BeautifulSoup) -> None:
        """Headings in the document receive their ids."""
        dom_toc(document)

        ids = [h.get("id") for h in document.select("article h1, article h2, article h3")]
        assert ids == ["first", "second-part", "deep", "another", "custom"]

    def test_custom_selector_and_target(self, document: BeautifulSoup) -> None:
        """Selector limits headings and target picks the container."""
        options = DomTocOptions(root="article", selector="h1", target="footer", type="ul")

        toc = dom_toc(document, options)

        assert toc.parent.name == "footer"
        assert [a.get_text() for a in toc.find_all("a")] == ["First", "Third"]

    def test_missing_target_raises(self, document: BeautifulSoup) -> None:
        """A target selector without a match is an error."""
        with pytest.raises(TargetNotFoundError, match="#missing"):
            dom_toc(document, DomTocOptions(target="#missing"))

    def test_missing_root_raises_parse_error(self, document: BeautifulSoup) -> None:
        """TargetNotFoundError is a ParseError."""
        with pytest.raises(ParseError):
            dom_toc(document, DomTocOptions(root="main"))

    def test_missing_root_leaves_target_untouched(self, document: BeautifulSoup) -> None:
        """A failed root lookup does not clear the target."""
        with pytest.raises(TargetNotFoundError):
            dom_toc(document, DomTocOptions(root="main"))

        assert document.select_one("[simpletoc]").get_text() == "stale"

    def test_document_without_headings(self) -> None:
        """An empty list is inserted when there are no headings."""
        soup = BeautifulSoup("<body><div simpletoc></div><p>text</p></body>", "lxml")

        toc = dom_toc(soup)

        assert str(toc) == '<ol class="simpletoc"></ol>'


class TestHtmlToc:
    """Tests for html_toc function."""

    def test_returns_serialized_document(self) -> None:
        """The output contains the inserted list and the updated headings."""
        result = html_toc('<body><div simpletoc></div><h1>Hello World</h1></body>')

        assert '<div simpletoc=""><ol class="simpletoc"><li><a href="#hello-world">Hello World</a></li></ol></div>' in result
        assert '<h1 id="hello-world">Hello World</h1>' in result

    def test_accepts_parser_override(self) -> None:
        """html.parser keeps fragments unwrapped."""
        result = html_toc('<div simpletoc></div><h2 id="x">X</h2>', DomTocOptions(root="h2", selector="*"), parser="html.parser")

        assert result.startswith('<div simpletoc=""><ol class="simpletoc"></ol></div>')


class TestDomForest:
    """Tests for dom_forest function."""

    def test_forest_keeps_document_order(self, document: BeautifulSoup) -> None:
        """Flattening gives headings in document order."""
        forest = dom_forest(document, DomTocOptions(root="article"))

        assert [h.get_text() for h in flatten(forest)] == ["First", "Second Part", "Deep", "Another", "Third"]


class TestCompareTags:
    """Tests for compare_tags function."""

    def test_deeper_heading_is_child(self) -> None:
        """h2 nests under h1."""
        soup = BeautifulSoup("<h1>a</h1><h2>b</h2>", "html.parser")

        assert compare_tags(soup.h1, soup.h2)
        assert not compare_tags(soup.h2, soup.h1)
