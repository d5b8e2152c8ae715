"""Tests for the content heuristic, DOM helpers and deduplication."""

import pytest

from linkaudit.extraction import ancestors, dedupe_links, is_descendant_of, is_likely_content_link, parse_html
from linkaudit.models.config import ExtractionConfig
from linkaudit.models.links import Link


def first_anchor(html):
    return parse_html(html).find("a")


class TestIsLikelyContentLink:
    """Tests for is_likely_content_link."""

    @pytest.fixture
    def config(self):
        return ExtractionConfig()

    def test_prose_class_is_content(self, config):
        """Test that a div with a text-like class marks content."""
        anchor = first_anchor('<div class="entry-text"><a href="/x">x</a></div>')
        assert is_likely_content_link(anchor, config) is True

    def test_navigation_class_wins_over_long_text(self, config):
        """Test that a menu-like class rejects even long anchor text."""
        anchor = first_anchor('<div class="site-menu"><a href="/x">A very long descriptive anchor text here</a></div>')
        assert is_likely_content_link(anchor, config) is False

    def test_navigation_tag(self, config):
        anchor = first_anchor('<footer><span><a href="/x">x</a></span></footer>')
        assert is_likely_content_link(anchor, config) is False

    def test_long_text_is_content(self, config):
        """Test that long text without decisive ancestors counts as content."""
        anchor = first_anchor('<table><tr><td><a href="/x">Read the full quarterly report</a></td></tr></table>')
        assert is_likely_content_link(anchor, config) is True

    def test_navigation_word_is_not_content(self, config):
        """Test that short text containing a navigation word is rejected."""
        anchor = first_anchor('<table><tr><td><a href="/x">Contact</a></td></tr></table>')
        assert is_likely_content_link(anchor, config) is False

    def test_navigation_word_is_substring_match(self, config):
        anchor = first_anchor('<td><a href="/x">Homepage</a></td>')
        assert is_likely_content_link(anchor, config) is False

    def test_wrapped_text_length_includes_whitespace(self, config):
        """Test that the length check measures the stripped raw text."""
        html = '<td><a href="/x">About\n                        us</a></td>'
        assert is_likely_content_link(first_anchor(html), config) is True

        short = '<td><a href="/x">About us</a></td>'
        assert is_likely_content_link(first_anchor(short), config) is False

    def test_defaults_to_content(self, config):
        """Test that short neutral text defaults to content."""
        anchor = first_anchor('<table><tr><td><a href="/x">Pricing</a></td></tr></table>')
        assert is_likely_content_link(anchor, config) is True

    def test_depth_limit(self, config):
        """Test that ancestors beyond the depth limit are ignored."""
        html = '<nav><div><div><div><div><div><a href="/x">Pricing</a></div></div></div></div></div></nav>'
        assert is_likely_content_link(first_anchor(html), config) is True

        deeper = ExtractionConfig(max_ancestor_depth=6)
        assert is_likely_content_link(first_anchor(html), deeper) is False

    def test_custom_threshold(self):
        """Test that the long-text threshold is configurable."""
        anchor = first_anchor('<td><a href="/x">About this</a></td>')
        assert is_likely_content_link(anchor, ExtractionConfig(long_text_threshold=5)) is True


class TestDomHelpers:
    """Tests for tree helpers."""

    def test_ancestors_nearest_first(self):
        soup = parse_html('<div id="outer"><p id="inner"><a href="/x">x</a></p></div>')
        names = [tag.name for tag in ancestors(soup.find("a"))]
        assert names == ["p", "div"]

    def test_ancestors_max_depth(self):
        soup = parse_html('<div><p><span><a href="/x">x</a></span></p></div>')
        names = [tag.name for tag in ancestors(soup.find("a"), max_depth=2)]
        assert names == ["span", "p"]

    def test_is_descendant_of(self):
        soup = parse_html('<article><a href="/in">in</a></article><aside><a href="/out">out</a></aside>')
        article = soup.find("article")
        inside, outside = soup.find_all("a")

        assert is_descendant_of(inside, article) is True
        assert is_descendant_of(outside, article) is False
        assert is_descendant_of(article, article) is True
        assert is_descendant_of(outside, soup) is True


class TestDedupeLinks:
    """Tests for dedupe_links."""

    def test_case_insensitive_first_wins(self):
        """Test that the first occurrence survives and order is kept."""
        links = [
            Link(href="/A", text="first"),
            Link(href="/b", text="b"),
            Link(href="/a", text="second"),
        ]
        result = dedupe_links(links)
        assert [link.text for link in result] == ["first", "b"]

    def test_no_two_links_share_href(self):
        links = [Link(href=href, text=href) for href in ["/x", "/X", "/y", "/x", "/Y", "/z"]]
        keys = [link.href.lower() for link in dedupe_links(links)]
        assert keys == ["/x", "/y", "/z"]

    def test_empty(self):
        assert dedupe_links([]) == []
