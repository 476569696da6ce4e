"""
Graph base class and contract for mutable weighted directed graphs.

All representations must implement the six operations below with identical
observable behavior. Callers depend on Graph only, never on a concrete class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Generic, TypeVar

L = TypeVar("L", bound=Hashable)


class Graph(ABC, Generic[L]):
    """
    A mutable weighted directed graph with labeled vertices.

    Vertices have distinct labels of an immutable, hashable type L. Edges
    are directed and carry a positive integer weight. There is at most one
    edge per ordered (source, target) pair; self-loops are allowed. Every
    edge endpoint is always a vertex of the graph.

    Observers return fresh containers. Mutating a returned set or dict
    never changes the graph.
    """

    @abstractmethod
    def add(self, vertex: L) -> bool:
        """
        Add a vertex to this graph.

        Args:
            vertex: Label for the new vertex

        Returns:
            True if the graph did not already include the vertex (and it was
            added), False otherwise. Edges are never changed.

        Raises:
            ValueError: If vertex is None
        """
        ...

    @abstractmethod
    def set(self, source: L, target: L, weight: int) -> int:
        """
        Add, change, or remove a weighted directed edge.

        If weight is positive, the edge source -> target is created or its
        weight replaced; missing endpoints are added as vertices. If weight
        is zero, the edge is removed if present and vertices are left alone.
        A zero weight for a source that is not in the graph changes nothing.

        Args:
            source: Label of the source vertex
            target: Label of the target vertex
            weight: Nonnegative weight, where 0 means "no edge"

        Returns:
            The previous weight of the edge, or 0 if there was no such edge

        Raises:
            ValueError: If source or target is None, or weight is negative
            TypeError: If weight is not an int
        """
        ...

    @abstractmethod
    def remove(self, vertex: L) -> bool:
        """
        Remove a vertex and every edge incident to it.

        Returns:
            True if the vertex was in the graph, False if the graph is
            unchanged because it was not.
        """
        ...

    @abstractmethod
    def vertices(self) -> set[L]:
        """Get a copy of the set of vertex labels."""
        ...

    @abstractmethod
    def sources(self, target: L) -> dict[L, int]:
        """
        Get the source vertices of edges that end at target.

        Returns:
            Dict mapping each source label to the weight of its edge into
            target. Empty if target has no incoming edges or is not a vertex.
        """
        ...

    @abstractmethod
    def targets(self, source: L) -> dict[L, int]:
        """
        Get the target vertices of edges that start at source.

        Returns:
            Dict mapping each target label to the weight of the edge from
            source. Empty if source has no outgoing edges or is not a vertex.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(vertices={len(self.vertices())})"


def require_label(label: object, role: str = "vertex") -> None:
    """Fail fast on a missing label."""
    if label is None:
        raise ValueError(f"{role} must not be None")


def require_weight(weight: object) -> None:
    """Fail fast on a weight that is not a nonnegative int."""
    # bool is an int subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise TypeError(f"weight must be an int, got {type(weight).__name__}")
    if weight < 0:
        raise ValueError(f"weight must be nonnegative (0 means remove), got {weight}")
