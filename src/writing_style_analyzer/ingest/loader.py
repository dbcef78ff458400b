"""Load writing samples from various formats."""

import logging
from pathlib import Path
from typing import Iterable

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

SAMPLE_SEPARATOR = "\n\n"

# Elements that start a new paragraph in HTML samples
BLOCK_TAGS = ["p", "div", "h1", "h2", "h3", "h4", "h5", "h6", "li", "blockquote"]


def load_sample(path: Path, encoding: str = "utf-8") -> str:
    """
    Load a writing sample from file and return plain text.

    Supports:
    - .txt and .md files (read directly)
    - .html and .htm files (visible text only)
    - .epub files (extract text from HTML)
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in (".txt", ".md"):
        return load_txt(path, encoding)
    elif suffix in (".html", ".htm"):
        return html_to_text(load_txt(path, encoding))
    elif suffix == ".epub":
        return load_epub(path)
    else:
        raise ValueError(f"Unsupported file format: {suffix}")


def load_txt(path: Path, encoding: str = "utf-8") -> str:
    """
    Load a plain text file.

    latin-1 maps every byte, so it is the last resort and decoding never
    fails. An unknown encoding name raises ValueError.
    """
    # Preferred encoding first, then the common fallbacks
    encodings = [encoding] + [
        e for e in ("utf-8", "utf-8-sig", "cp1252") if e != encoding
    ]
    for enc in encodings:
        try:
            return path.read_text(encoding=enc)
        except UnicodeDecodeError:
            logger.debug("Could not decode %s as %s", path, enc)
            continue
        except LookupError as e:
            raise ValueError(f"Unknown encoding {enc!r} for {path}") from e

    return path.read_text(encoding="latin-1")


def html_to_text(html: str | bytes) -> str:
    """Extract readable text from an HTML document, one block per paragraph."""
    soup = BeautifulSoup(html, "html.parser")

    for element in soup(["script", "style"]):
        element.decompose()

    # Innermost block elements only, so nested blocks are not counted twice
    blocks = [el for el in soup.find_all(BLOCK_TAGS) if not el.find(BLOCK_TAGS)]
    if not blocks:
        blocks = [soup]

    paragraphs = [" ".join(el.get_text().split()) for el in blocks]
    return SAMPLE_SEPARATOR.join(p for p in paragraphs if p)


def load_epub(path: Path) -> str:
    """Load an EPUB file and extract text."""
    import ebooklib
    from ebooklib import epub

    book = epub.read_epub(str(path))
    texts: list[str] = []

    for item in book.get_items():
        if item.get_type() == ebooklib.ITEM_DOCUMENT:
            text = html_to_text(item.get_content())
            if text:
                texts.append(text)

    return SAMPLE_SEPARATOR.join(texts)


def combine_samples(samples: Iterable[str]) -> str:
    """Join samples into one text, separated by blank lines."""
    return SAMPLE_SEPARATOR.join(s.strip() for s in samples if s and s.strip())
