"""
Vertex-centric Graph implementation.

Each vertex owns a map of its outgoing edges. targets() is a single lookup;
sources() scans every vertex.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Generic

from graphpoet import config
from graphpoet.graph.base import Graph, L, require_label, require_weight


class Vertex(Generic[L]):
    """
    Mutable vertex used internally by ConcreteVerticesGraph.

    Attributes:
        label: Immutable vertex label
    """

    def __init__(self, label: L, targets: Mapping[L, int] | None = None) -> None:
        require_label(label, "label")
        self._label = label
        # target label -> positive weight
        self._targets: dict[L, int] = {}
        for target, weight in (targets or {}).items():
            require_label(target, "target")
            require_weight(weight)
            if weight == 0:
                raise ValueError(f"edge weight to {target!r} must be positive")
            self._targets[target] = weight
        self._check_rep()

    def _check_rep(self) -> None:
        if not config.CHECK_REP:
            return
        assert self._label is not None, "label cannot be null"
        for target, weight in self._targets.items():
            assert target is not None, "target key cannot be null"
            assert isinstance(weight, int) and weight > 0, f"weight must be positive: {weight}"

    @property
    def label(self) -> L:
        return self._label

    def targets(self) -> dict[L, int]:
        """Copy of the outgoing edges map."""
        return dict(self._targets)

    def weight_to(self, target: L) -> int:
        """Weight of the edge to target, or 0 if there is none."""
        return self._targets.get(target, 0)

    def set_target(self, target: L, weight: int) -> int:
        """
        Add, update or remove the edge from this vertex to target.

        A positive weight puts the edge; zero removes it if present.

        Returns:
            The previous weight, or 0 if there was no such edge
        """
        require_label(target, "target")
        require_weight(weight)
        if weight == 0:
            previous = self._targets.pop(target, 0)
        else:
            previous = self._targets.get(target, 0)
            self._targets[target] = weight
        self._check_rep()
        return previous

    def copy(self) -> Vertex[L]:
        """Deep copy (new edge map)."""
        return Vertex(self._label, self._targets)

    def __str__(self) -> str:
        return f"{self._label} -> {self._targets}"

    def __repr__(self) -> str:
        return f"Vertex({self._label!r}, {self._targets!r})"


class ConcreteVerticesGraph(Graph[L]):
    """
    Graph stored as a collection of vertices with their outgoing edges.

    Representation invariant:
        - labels are unique and not None; each key equals its vertex's label
        - every outgoing weight is a positive int
        - every outgoing target is itself a vertex of the graph
    """

    def __init__(self, vertices: Iterable[Vertex[L]] | None = None) -> None:
        """
        Initialize the graph.

        Args:
            vertices: Optional initial vertices. Each one is copied, so later
                changes to the originals do not affect this graph.
        """
        copies: dict[L, Vertex[L]] = {}
        for vertex in vertices or ():
            if vertex is None:
                raise ValueError("vertex must not be None")
            if vertex.label in copies:
                raise ValueError(f"duplicate vertex label: {vertex.label!r}")
            copies[vertex.label] = vertex.copy()
        for vertex in copies.values():
            for target in vertex.targets():
                if target not in copies:
                    raise ValueError(
                        f"edge {vertex.label!r} -> {target!r} points to a missing vertex"
                    )

        self._vertices: dict[L, Vertex[L]] = copies
        self._check_rep()

    def _check_rep(self) -> None:
        if not config.CHECK_REP:
            return
        for label, vertex in self._vertices.items():
            assert label is not None, "vertex label cannot be null"
            assert vertex.label == label, f"vertex stored under wrong label: {label!r}"
            for target, weight in vertex.targets().items():
                assert weight > 0, f"edge weight must be positive: {weight}"
                assert target in self._vertices, f"edge points to non-existent vertex: {target!r}"

    def add(self, vertex: L) -> bool:
        require_label(vertex)
        if vertex in self._vertices:
            return False
        self._vertices[vertex] = Vertex(vertex)
        self._check_rep()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        require_label(source, "source")
        require_label(target, "target")
        require_weight(weight)

        src = self._vertices.get(source)
        if src is None and weight == 0:
            # No such source, so no such edge
            return 0
        if src is None:
            src = Vertex(source)
            self._vertices[source] = src
        if weight > 0 and target not in self._vertices:
            self._vertices[target] = Vertex(target)

        previous = src.set_target(target, weight)
        self._check_rep()
        return previous

    def remove(self, vertex: L) -> bool:
        require_label(vertex)
        if vertex not in self._vertices:
            return False

        # Incoming edges (including a self-loop) go first
        for other in self._vertices.values():
            other.set_target(vertex, 0)
        del self._vertices[vertex]
        self._check_rep()
        return True

    def vertices(self) -> set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> dict[L, int]:
        require_label(target, "target")
        result: dict[L, int] = {}
        for label, vertex in self._vertices.items():
            weight = vertex.weight_to(target)
            if weight > 0:
                result[label] = weight
        return result

    def targets(self, source: L) -> dict[L, int]:
        require_label(source, "source")
        vertex = self._vertices.get(source)
        if vertex is None:
            return {}
        return vertex.targets()

    def __str__(self) -> str:
        lines = ["Graph:"]
        lines.extend(f"  {vertex}" for vertex in self._vertices.values())
        return "\n".join(lines)
