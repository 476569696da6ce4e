"""
Graph-based poetry generator.

GraphPoet derives a word-affinity graph from a corpus and, given an input
sentence, inserts a bridge word between every adjacent pair of input words.
The bridge between w1 and w2 is the word b on the heaviest two-edge path
w1 -> b -> w2. If there is no such path, nothing is inserted.

Input words keep their original case; bridge words are lowercase. Words in
the output are separated by single spaces.

Example, with the corpus
    This is a test of the Mugar Omni Theater sound system.
the input
    Test the system.
becomes
    Test of the system.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from graphpoet import config
from graphpoet.graph import Graph
from graphpoet.poet.builder import build_graph, fold
from graphpoet.poet.corpus import read_corpus, tokenize

logger = logging.getLogger(__name__)


class GraphPoet:
    """
    Inserts bridge words using a word-affinity graph.

    The graph is built once at construction and never mutated afterwards.
    Bridge ties (equal total weight) go to the alphabetically smallest word.
    """

    def __init__(self, tokens: Iterable[str], graph: Graph[str] | None = None) -> None:
        """
        Create a poet from a tokenized corpus.

        Args:
            tokens: Corpus words in order
            graph: Empty graph to populate (defaults to empty_graph())
        """
        self._graph: Graph[str] = build_graph(tokens, graph)
        self._check_rep()

    @classmethod
    def from_file(
        cls,
        corpus: str | Path,
        graph: Graph[str] | None = None,
        encoding: str = config.CORPUS_ENCODING,
    ) -> GraphPoet:
        """
        Create a poet from a corpus file.

        Args:
            corpus: Path to the text file to derive the affinity graph from
            graph: Empty graph to populate (defaults to empty_graph())
            encoding: Text encoding of the corpus file

        Raises:
            CorpusError: If the corpus file cannot be found or read
        """
        poet = cls(read_corpus(corpus, encoding=encoding), graph)
        logger.info(f"GraphPoet ready: {len(poet._graph.vertices()):,} words from {corpus}")
        return poet

    @classmethod
    def from_text(cls, text: str, graph: Graph[str] | None = None) -> GraphPoet:
        """Create a poet from corpus text held in memory."""
        return cls(tokenize(text), graph)

    def _check_rep(self) -> None:
        if not config.CHECK_REP:
            return
        for word in self._graph.vertices():
            assert word, "vertex labels must not be empty"
            assert word == fold(word), f"vertex label must be lowercase: {word!r}"
            for target, weight in self._graph.targets(word).items():
                assert target == fold(target), f"target must be lowercase: {target!r}"
                assert weight > 0, f"edge weight must be positive: {weight}"

    def bridge(self, first: str, second: str) -> str | None:
        """
        Find the bridge word between two words.

        Args:
            first: Word before the bridge (any case)
            second: Word after the bridge (any case)

        Returns:
            The lowercase word b maximizing weight(first -> b) + weight(b -> second),
            or None if no two-edge path exists
        """
        start, end = fold(first), fold(second)
        best: str | None = None
        best_score = 0

        # sorted() makes the smallest word win a tie
        for candidate, first_weight in sorted(self._graph.targets(start).items()):
            second_weight = self._graph.targets(candidate).get(end)
            if second_weight is None:
                continue
            score = first_weight + second_weight
            if score > best_score:
                best, best_score = candidate, score

        if best is not None:
            logger.debug(f"Bridge {start!r} -> {best!r} -> {end!r} (weight {best_score})")
        return best

    def poem(self, text: str) -> str:
        """
        Generate a poem.

        Args:
            text: Sentence to insert bridge words into

        Returns:
            The poem, or an empty string if text has no words
        """
        words = text.split()
        if not words:
            return ""

        out = [words[0]]
        for first, second in zip(words, words[1:]):
            bridge = self.bridge(first, second)
            if bridge is not None:
                out.append(bridge)
            out.append(second)
        return " ".join(out)

    def __str__(self) -> str:
        lines = ["GraphPoet with word-affinity graph:"]
        for word in sorted(self._graph.vertices()):
            lines.append(f"  {word} -> {self._graph.targets(word)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"GraphPoet(words={len(self._graph.vertices())})"
