"""Tests for AsciiDoc and DocBook link extraction."""

from __future__ import annotations

import pytest

from docaudit.domain.errors import LinkExtractionError
from docaudit.links.docbook import extract_docbook_links
from docaudit.links.extractor import (
    drop_placeholders,
    extract_asciidoc_links,
    extract_links,
    iter_urls,
)

PLACEHOLDERS = ["localhost", "127.0.0.1", "::1", "example.com", "example.org"]


# ---------------------------------------------------------------------------
# AsciiDoc
# ---------------------------------------------------------------------------


class TestAsciiDocLinks:
    def test_finds_every_url_on_a_line(self):
        content = "See https://a.test/x[A] and http://b.test/y for details.\n"
        assert list(iter_urls(content)) == ["https://a.test/x", "http://b.test/y"]

    def test_trailing_punctuation_is_dropped(self):
        assert list(iter_urls("Go to https://a.test/docs.\n")) == ["https://a.test/docs"]

    def test_deduplicates_in_first_seen_order(self):
        text = "https://b.test\nhttps://a.test\nhttps://b.test\n"
        assert extract_asciidoc_links(text) == ["https://b.test", "https://a.test"]

    def test_commented_url_is_excluded(self):
        text = "////\nhttps://hidden.test/page\n////\n// https://also-hidden.test\n"
        assert extract_asciidoc_links(text) == []

    def test_same_url_outside_comment_is_kept(self):
        text = "////\nhttps://docs.test/page\n////\nRead https://docs.test/page[the docs].\n"
        assert extract_asciidoc_links(text) == ["https://docs.test/page"]

    def test_placeholder_hosts_are_dropped(self):
        text = (
            "http://localhost:8080/app\n"
            "http://127.0.0.1/\n"
            "http://[::1]/x\n"
            "https://example.com\n"
            "https://www.example.com/real\n"
            "https://docs.test\n"
        )
        assert extract_asciidoc_links(text, PLACEHOLDERS) == [
            "https://www.example.com/real",
            "https://docs.test",
        ]

    def test_unparseable_host_is_kept(self):
        assert drop_placeholders(["http://[broken/"], PLACEHOLDERS) == ["http://[broken/"]

    def test_extract_links_dispatches_on_suffix(self, tmp_path):
        adoc = tmp_path / "con_a.adoc"
        adoc.write_text("https://a.test\n", encoding="utf-8")
        assert extract_links(adoc) == ["https://a.test"]


# ---------------------------------------------------------------------------
# DocBook
# ---------------------------------------------------------------------------


DOCBOOK4 = """<?xml version="1.0"?>
<book>
  <para>See <ulink url="https://z.test/">Z</ulink> and <ulink url="https://a.test/">A</ulink>.</para>
  <para><ulink url="mailto:docs@a.test">mail</ulink> <ulink url="https://a.test/"/></para>
  <para><ulink url="">empty</ulink></para>
  <!-- <ulink url="https://commented.test/"/> -->
</book>
"""

DOCBOOK5 = """<?xml version="1.0"?>
<article xmlns="http://docbook.org/ns/docbook" xmlns:xlink="http://www.w3.org/1999/xlink">
  <para><link xlink:href="https://five.test/">five</link></para>
</article>
"""

MASTER_WITH_INCLUDE = """<?xml version="1.0"?>
<book xmlns:xi="http://www.w3.org/2001/XInclude">
  <ulink url="https://master.test/"/>
  <xi:include href="chapter.xml"/>
</book>
"""

CHAPTER = """<?xml version="1.0"?>
<chapter><ulink url="https://chapter.test/"/></chapter>
"""


class TestDocBookLinks:
    def test_ulinks_sorted_unique(self, tmp_path):
        path = tmp_path / "book.xml"
        path.write_text(DOCBOOK4, encoding="utf-8")
        assert extract_docbook_links(path) == [
            "https://a.test/",
            "https://z.test/",
            "mailto:docs@a.test",
        ]

    def test_docbook5_xlink(self, tmp_path):
        path = tmp_path / "article.xml"
        path.write_text(DOCBOOK5, encoding="utf-8")
        assert extract_docbook_links(path) == ["https://five.test/"]

    def test_xinclude_only_when_requested(self, tmp_path):
        master = tmp_path / "master.xml"
        master.write_text(MASTER_WITH_INCLUDE, encoding="utf-8")
        (tmp_path / "chapter.xml").write_text(CHAPTER, encoding="utf-8")

        assert extract_docbook_links(master) == ["https://master.test/"]
        assert extract_docbook_links(master, xinclude=True) == [
            "https://chapter.test/",
            "https://master.test/",
        ]

    def test_missing_include_is_an_error(self, tmp_path):
        master = tmp_path / "master.xml"
        master.write_text(MASTER_WITH_INCLUDE, encoding="utf-8")
        with pytest.raises(LinkExtractionError):
            extract_docbook_links(master, xinclude=True)

    def test_malformed_xml(self, tmp_path):
        path = tmp_path / "broken.xml"
        path.write_text("<book><ulink></book>", encoding="utf-8")
        with pytest.raises(LinkExtractionError, match="well-formed"):
            extract_docbook_links(path)

    def test_extract_links_uses_docbook_for_xml(self, tmp_path):
        path = tmp_path / "book.xml"
        path.write_text(DOCBOOK5, encoding="utf-8")
        assert extract_links(path) == ["https://five.test/"]
