"""
Word-affinity graph construction from a token stream.

For every adjacent pair of words (w1, w2) the graph holds an edge from
lower(w1) to lower(w2) whose weight is the number of times w1 is
immediately followed by w2.

For example, the corpus "Hello, HELLO, hello, goodbye!" gives two edges:
    "hello," -> "hello,"   weight 2
    "hello," -> "goodbye!" weight 1
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from graphpoet.graph import Graph, empty_graph

logger = logging.getLogger(__name__)


def fold(word: str) -> str:
    """Canonical (lowercase) form of a word, used as its vertex label."""
    return word.lower()


class CorpusGraphBuilder:
    """
    Counts adjacent word pairs and writes them into a Graph.

    The builder does no I/O; it is handed already-decoded tokens.
    """

    def __init__(self, graph: Graph[str] | None = None) -> None:
        """
        Initialize the builder.

        Args:
            graph: Empty graph to populate. Defaults to empty_graph().
        """
        self._graph = graph if graph is not None else empty_graph()
        if self._graph.vertices():
            raise ValueError("CorpusGraphBuilder requires an empty graph")

    def build(self, tokens: Iterable[str]) -> Graph[str]:
        """
        Populate the graph from tokens and return it.

        Every token becomes a vertex; a corpus of one token yields one
        vertex and no edges.
        """
        pairs: Counter[tuple[str, str]] = Counter()
        prev: str | None = None
        count = 0
        for token in tokens:
            word = fold(token)
            if prev is None:
                self._graph.add(word)
            else:
                pairs[(prev, word)] += 1
            prev = word
            count += 1

        # Counter keeps first-seen order, so edges are inserted in corpus order
        for (source, target), weight in pairs.items():
            self._graph.set(source, target, weight)

        logger.debug(
            f"Built affinity graph from {count:,} words: "
            f"{len(self._graph.vertices()):,} vertices, {len(pairs):,} edges"
        )
        return self._graph


def build_graph(tokens: Iterable[str], graph: Graph[str] | None = None) -> Graph[str]:
    """Build a word-affinity graph from tokens (see CorpusGraphBuilder)."""
    return CorpusGraphBuilder(graph).build(tokens)
