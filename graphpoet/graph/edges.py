"""
Edge-centric Graph implementation.

Stores a vertex set next to a flat list of immutable edges. Both sources()
and targets() scan the edge list.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic

from graphpoet import config
from graphpoet.graph.base import Graph, L, require_label, require_weight


@dataclass(frozen=True)
class Edge(Generic[L]):
    """
    Immutable weighted directed edge.

    Attributes:
        source: Label of the start vertex
        target: Label of the end vertex
        weight: Positive edge weight
    """

    source: L
    target: L
    weight: int

    def __post_init__(self) -> None:
        require_label(self.source, "source")
        require_label(self.target, "target")
        require_weight(self.weight)
        if self.weight == 0:
            raise ValueError("edge weight must be positive")

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"


class ConcreteEdgesGraph(Graph[L]):
    """
    Graph stored as a vertex set plus a list of edges.

    Representation invariant:
        - no None vertices
        - every edge has weight > 0 and both endpoints in the vertex set
        - at most one edge per (source, target) pair
    """

    def __init__(
        self,
        vertices: Iterable[L] | None = None,
        edges: Iterable[Edge[L]] | None = None,
    ) -> None:
        """
        Initialize the graph.

        Args:
            vertices: Optional initial vertex labels (copied)
            edges: Optional initial edges (copied). Endpoints must be among
                the given vertices.
        """
        vertex_set: set[L] = set(vertices or ())
        edge_list: list[Edge[L]] = list(edges or ())
        if None in vertex_set:
            raise ValueError("vertex must not be None")

        seen: set[tuple[L, L]] = set()
        for edge in edge_list:
            if not isinstance(edge, Edge):
                raise ValueError(f"expected Edge, got {edge!r}")
            if edge.source not in vertex_set or edge.target not in vertex_set:
                raise ValueError(f"edge {edge} has an endpoint outside the vertex set")
            pair = (edge.source, edge.target)
            if pair in seen:
                raise ValueError(f"duplicate edge {edge.source} -> {edge.target}")
            seen.add(pair)

        self._vertices = vertex_set
        self._edges = edge_list
        self._check_rep()

    def _check_rep(self) -> None:
        if not config.CHECK_REP:
            return
        assert None not in self._vertices, "null vertex"
        seen: set[tuple[L, L]] = set()
        for edge in self._edges:
            assert edge.weight > 0, f"nonpositive weight stored: {edge.weight}"
            assert edge.source in self._vertices, f"edge source not in vertices: {edge}"
            assert edge.target in self._vertices, f"edge target not in vertices: {edge}"
            pair = (edge.source, edge.target)
            assert pair not in seen, f"duplicate edge {edge.source} -> {edge.target}"
            seen.add(pair)

    def _find(self, source: L, target: L) -> int | None:
        """Index of the edge source -> target, or None."""
        for i, edge in enumerate(self._edges):
            if edge.source == source and edge.target == target:
                return i
        return None

    def add(self, vertex: L) -> bool:
        require_label(vertex)
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        self._check_rep()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        require_label(source, "source")
        require_label(target, "target")
        require_weight(weight)

        idx = self._find(source, target)
        if idx is None:
            if weight > 0:
                self._vertices.add(source)
                self._vertices.add(target)
                self._edges.append(Edge(source, target, weight))
                self._check_rep()
            return 0

        previous = self._edges[idx].weight
        if weight == 0:
            del self._edges[idx]
        else:
            # Edges are immutable: replace in place
            self._edges[idx] = Edge(source, target, weight)
        self._check_rep()
        return previous

    def remove(self, vertex: L) -> bool:
        require_label(vertex)
        if vertex not in self._vertices:
            return False

        self._edges = [
            edge for edge in self._edges
            if edge.source != vertex and edge.target != vertex
        ]
        self._vertices.remove(vertex)
        self._check_rep()
        return True

    def vertices(self) -> set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> dict[L, int]:
        require_label(target, "target")
        return {edge.source: edge.weight for edge in self._edges if edge.target == target}

    def targets(self, source: L) -> dict[L, int]:
        require_label(source, "source")
        return {edge.target: edge.weight for edge in self._edges if edge.source == source}

    def __str__(self) -> str:
        edges = ", ".join(str(edge) for edge in self._edges)
        return f"Vertices: {sorted(map(str, self._vertices))}\nEdges: [{edges}]"
