"""Split sample text into words, sentences and paragraphs."""

import re

# ASCII word characters, so scores do not shift with Unicode tables
WORD_PATTERN = re.compile(r"\b\w+\b", re.ASCII)

# A sentence is a run of text closed by one or more terminators.
# Trailing text without a terminator is not counted.
SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def split_into_words(text: str) -> list[str]:
    """Split text into lower-cased word tokens."""
    return WORD_PATTERN.findall(text.lower())


def split_into_sentences(text: str) -> list[str]:
    """
    Split text into sentences.

    Each sentence keeps its terminating punctuation. Abbreviations are
    not protected: "Mr. Baggins" counts as two sentences, which keeps
    the readability numbers identical to historical scores.
    """
    return SENTENCE_PATTERN.findall(text)


def split_into_paragraphs(text: str) -> list[str]:
    """Split text into paragraphs on blank lines, dropping empty ones."""
    paragraphs = PARAGRAPH_BREAK.split(text)

    return [p for p in paragraphs if p.strip()]
