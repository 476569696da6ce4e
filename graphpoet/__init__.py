"""
Graph Poet.

Builds a word-affinity graph from a text corpus and uses it to insert
bridge words between adjacent words of an input sentence.
"""

__version__ = "0.1.0"
