"""
Corpus tokenization and file reading.

A word is a non-empty run of non-whitespace characters. Words are
delimited by spaces, tabs, newlines, or the ends of the source. Case and
punctuation are preserved here; case-folding belongs to the graph builder.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from graphpoet.config import CORPUS_ENCODING

logger = logging.getLogger(__name__)


class CorpusError(OSError):
    """Raised when a corpus source cannot be opened, read, or decoded."""


def tokenize(text: str) -> Iterator[str]:
    """Yield the whitespace-delimited words of text, in order."""
    # str.split() with no argument splits on any whitespace run and
    # never produces empty strings
    yield from text.split()


def read_corpus(path: str | Path, encoding: str = CORPUS_ENCODING) -> list[str]:
    """
    Read every word of a corpus file.

    The whole file is consumed before returning, so a read failure part
    way through never yields a partial token list.

    Args:
        path: Path to a text file
        encoding: Text encoding of the file

    Returns:
        List of words in file order

    Raises:
        CorpusError: If the file cannot be found, read, or decoded
    """
    path = Path(path)
    logger.info(f"Reading corpus from {path}...")
    tokens: list[str] = []
    try:
        with open(path, encoding=encoding) as f:
            for line in f:
                tokens.extend(tokenize(line))
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusError(f"Cannot read corpus {path}: {e}") from e
    logger.info(f"Read {len(tokens):,} words from {path.name}")
    return tokens
