"""Tests for sample loading."""

import pytest

from writing_style_analyzer.ingest.loader import (
    combine_samples,
    html_to_text,
    load_sample,
)
from writing_style_analyzer.style.metrics import extract_metrics


class TestLoadSample:
    """Test loading samples by file type."""

    def test_txt(self, tmp_path):
        path = tmp_path / "essay.txt"
        path.write_text("First line.\n\nSecond line.", encoding="utf-8")
        assert load_sample(path) == "First line.\n\nSecond line."

    def test_markdown_read_as_text(self, tmp_path):
        path = tmp_path / "notes.md"
        path.write_text("# Title\n\nBody text.", encoding="utf-8")
        assert load_sample(path) == "# Title\n\nBody text."

    def test_uppercase_suffix(self, tmp_path):
        path = tmp_path / "ESSAY.TXT"
        path.write_text("Shouting.", encoding="utf-8")
        assert load_sample(path) == "Shouting."

    def test_html(self, tmp_path):
        path = tmp_path / "post.html"
        path.write_text(
            "<html><head><style>p { color: red; }</style>"
            "<script>track()</script></head>"
            "<body><p>One.</p><p>Two.</p></body></html>",
            encoding="utf-8",
        )
        assert load_sample(path) == "One.\n\nTwo."

    def test_single_byte_fallback(self, tmp_path):
        path = tmp_path / "old.txt"
        path.write_bytes("Caf\xe9 au lait.".encode("latin-1"))
        assert load_sample(path) == "Café au lait."

    def test_cp1252_before_latin1(self, tmp_path):
        path = tmp_path / "quotes.txt"
        path.write_bytes(b"\x93Quoted\x94 text.")
        assert load_sample(path) == "“Quoted” text."

    def test_latin1_last_resort(self, tmp_path):
        path = tmp_path / "odd.txt"
        # 0x81 is undefined in cp1252
        path.write_bytes(b"odd \x81 byte.")
        assert load_sample(path) == "odd \x81 byte."

    def test_unknown_encoding(self, tmp_path):
        path = tmp_path / "essay.txt"
        path.write_text("Plain.", encoding="utf-8")
        with pytest.raises(ValueError, match="Unknown encoding"):
            load_sample(path, encoding="no-such-codec")

    def test_epub(self, tmp_path):
        from ebooklib import epub

        book = epub.EpubBook()
        book.set_identifier("sample-id")
        book.set_title("Sample")
        book.set_language("en")
        chapter = epub.EpubHtml(title="Intro", file_name="chap_01.xhtml", lang="en")
        chapter.content = "<h1>Intro</h1><p>Hello there. I wrote this.</p>"
        book.add_item(chapter)
        book.toc = (chapter,)
        book.add_item(epub.EpubNcx())
        book.add_item(epub.EpubNav())
        book.spine = ["nav", chapter]
        path = tmp_path / "sample.epub"
        epub.write_epub(str(path), book)

        assert "Hello there. I wrote this." in load_sample(path)

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "scan.pdf"
        path.write_bytes(b"%PDF-1.4")
        with pytest.raises(ValueError, match="Unsupported file format: .pdf"):
            load_sample(path)


class TestHtmlToText:
    """Test HTML text extraction."""

    def test_blocks_become_paragraphs(self):
        assert html_to_text("<div>A.</div>\n\n<div>  B.  </div>") == "A.\n\nB."

    def test_inline_tags_stay_in_paragraph(self):
        html = "<p>I <em>really</em> wrote this <a href='x'>post</a> myself.</p>"
        text = html_to_text(html)

        assert text == "I really wrote this post myself."
        assert extract_metrics(text).paragraph_length == pytest.approx(1.0)

    def test_nested_blocks_counted_once(self):
        html = (
            "<div><h1>Title</h1><blockquote><p>Quoted line.</p></blockquote>"
            "<ul><li>First item.</li><li>Second <b>item</b>.</li></ul></div>"
        )
        assert html_to_text(html) == "Title\n\nQuoted line.\n\nFirst item.\n\nSecond item."

    def test_text_without_blocks(self):
        assert html_to_text("<span>Just   a\nline.</span>") == "Just a line."

    def test_empty(self):
        assert html_to_text("<html><body></body></html>") == ""


class TestCombineSamples:
    """Test joining samples."""

    def test_joins_with_blank_line(self):
        assert combine_samples(["One.", "Two."]) == "One.\n\nTwo."

    def test_strips_and_drops_blank_samples(self):
        assert combine_samples(["  One.\n", "", "   ", "Two."]) == "One.\n\nTwo."

    def test_no_samples(self):
        assert combine_samples([]) == ""
