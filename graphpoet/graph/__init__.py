"""
Graph module.

Provides the weighted directed graph ADT and its representations:
- Graph: Abstract interface (add, set, remove, vertices, sources, targets)
- ConcreteVerticesGraph: Vertex-centric storage (per-vertex edge maps)
- ConcreteEdgesGraph: Edge-centric storage (vertex set + edge list)
"""

from graphpoet.config import DEFAULT_GRAPH_IMPL
from graphpoet.graph.base import Graph
from graphpoet.graph.edges import ConcreteEdgesGraph, Edge
from graphpoet.graph.vertices import ConcreteVerticesGraph, Vertex

__all__ = [
    "Graph",
    "ConcreteVerticesGraph",
    "ConcreteEdgesGraph",
    "Vertex",
    "Edge",
    "empty_graph",
    "get_graph",
]


def get_graph(name: str) -> Graph:
    """
    Get a new empty graph by representation name.

    Args:
        name: Representation identifier (vertices, edges)

    Returns:
        Empty graph instance

    Raises:
        ValueError: If name is unknown
    """
    graphs = {
        "vertices": ConcreteVerticesGraph,
        "edges": ConcreteEdgesGraph,
    }

    if name not in graphs:
        available = ", ".join(graphs.keys())
        raise ValueError(f"Unknown graph '{name}'. Available: {available}")

    return graphs[name]()


def empty_graph() -> Graph:
    """Get a new empty graph of the configured default representation."""
    return get_graph(DEFAULT_GRAPH_IMPL)
