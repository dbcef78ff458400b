"""Sample ingestion and tokenization."""

from writing_style_analyzer.ingest.loader import combine_samples, load_sample
from writing_style_analyzer.ingest.splitter import (
    split_into_paragraphs,
    split_into_sentences,
    split_into_words,
)

__all__ = [
    "combine_samples",
    "load_sample",
    "split_into_paragraphs",
    "split_into_sentences",
    "split_into_words",
]
