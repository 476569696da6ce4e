"""
Poet module.

Provides corpus ingestion and bridge-word generation:
- tokenize / read_corpus: Split corpus text into words
- CorpusGraphBuilder: Counts adjacent word pairs into a Graph
- GraphPoet: Inserts bridge words into input sentences
"""

from graphpoet.poet.builder import CorpusGraphBuilder, build_graph, fold
from graphpoet.poet.corpus import CorpusError, read_corpus, tokenize
from graphpoet.poet.poet import GraphPoet

__all__ = [
    "CorpusError",
    "CorpusGraphBuilder",
    "GraphPoet",
    "build_graph",
    "fold",
    "read_corpus",
    "tokenize",
]
