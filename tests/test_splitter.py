"""Tests for text splitting."""

import pytest
from writing_style_analyzer.ingest.splitter import (
    split_into_sentences,
    split_into_paragraphs,
    split_into_words,
)


class TestWordSplitting:
    """Test word tokenization."""

    def test_lowercases_words(self):
        assert split_into_words("The Cat SAT.") == ["the", "cat", "sat"]

    def test_punctuation_splits_words(self):
        words = split_into_words("well-known, can't")
        assert words == ["well", "known", "can", "t"]

    def test_digits_and_underscores_are_word_characters(self):
        assert split_into_words("route_66 in 1999") == ["route_66", "in", "1999"]

    def test_no_words(self):
        assert split_into_words("") == []
        assert split_into_words("  ... !? --  ") == []


class TestSentenceSplitting:
    """Test sentence boundary detection."""

    def test_simple_sentences(self):
        text = "This is sentence one. This is sentence two. And a third!"
        sentences = split_into_sentences(text)
        assert len(sentences) == 3
        assert sentences[0] == "This is sentence one."
        assert sentences[2] == " And a third!"

    def test_repeated_terminators(self):
        text = "Really?! Yes... Fine."
        sentences = split_into_sentences(text)
        assert sentences == ["Really?!", " Yes...", " Fine."]

    def test_trailing_fragment_not_counted(self):
        text = "One sentence. And a fragment"
        assert len(split_into_sentences(text)) == 1

    def test_abbreviations_split(self):
        text = "Mr. Smith arrived."
        assert len(split_into_sentences(text)) == 2

    def test_no_punctuation(self):
        assert split_into_sentences("no terminal punctuation here") == []


class TestParagraphSplitting:
    """Test paragraph boundary detection."""

    def test_double_newline(self):
        text = "First paragraph.\n\nSecond paragraph."
        paragraphs = split_into_paragraphs(text)
        assert len(paragraphs) == 2

    def test_multiple_newlines(self):
        text = "First.\n\n\n\nSecond."
        paragraphs = split_into_paragraphs(text)
        assert len(paragraphs) == 2

    def test_empty_paragraphs_filtered(self):
        text = "First.\n\n   \n\nSecond."
        paragraphs = split_into_paragraphs(text)
        assert len(paragraphs) == 2

    def test_single_newline_is_same_paragraph(self):
        text = "Line one.\nLine two."
        assert len(split_into_paragraphs(text)) == 1

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\n"])
    def test_blank_text(self, text):
        assert split_into_paragraphs(text) == []
