"""
Unit tests for the Graph contract.

Every test runs against both representations through the `graph` fixture
and only uses the Graph interface.
"""

import random

import pytest


def assert_invariants(graph) -> None:
    """Every edge endpoint is a vertex and every weight is a positive int."""
    vertices = graph.vertices()
    assert None not in vertices
    for source in vertices:
        for target, weight in graph.targets(source).items():
            assert target in vertices
            assert isinstance(weight, int) and weight > 0
            assert graph.sources(target)[source] == weight


class TestAdd:
    """Test add()."""

    def test_initial_vertices_empty(self, graph):
        """A new graph has no vertices."""
        assert graph.vertices() == set()

    def test_add_new_vertex_returns_true(self, graph):
        """Adding a new vertex returns True and stores it."""
        assert graph.add("A") is True
        assert graph.vertices() == {"A"}

    def test_add_duplicate_returns_false(self, graph):
        """Adding an existing vertex returns False and changes nothing."""
        graph.add("A")
        before = graph.vertices()
        assert graph.add("A") is False
        assert graph.vertices() == before

    def test_add_does_not_touch_edges(self, graph):
        """Re-adding an endpoint keeps its edges."""
        graph.set("A", "B", 3)
        assert graph.add("A") is False
        assert graph.targets("A") == {"B": 3}

    def test_add_none_raises(self, graph):
        """None is not a valid label."""
        with pytest.raises(ValueError):
            graph.add(None)


class TestSet:
    """Test set()."""

    def test_new_edge_adds_vertices_and_returns_zero(self, graph):
        """A new edge creates missing endpoints."""
        assert graph.set("A", "B", 3) == 0
        assert graph.vertices() == {"A", "B"}
        assert graph.targets("A") == {"B": 3}
        assert graph.sources("B") == {"A": 3}

    def test_update_returns_old_weight(self, graph):
        """Setting an existing edge overwrites it and returns the old weight."""
        graph.set("A", "B", 3)
        assert graph.set("A", "B", 7) == 3
        assert graph.targets("A") == {"B": 7}
        assert graph.sources("B") == {"A": 7}

    def test_zero_removes_edge_but_keeps_vertices(self, graph):
        """Weight 0 removes the edge and leaves both endpoints."""
        graph.set("A", "B", 5)
        assert graph.set("A", "B", 0) == 5
        assert graph.vertices() == {"A", "B"}
        assert graph.targets("A") == {}
        assert graph.sources("B") == {}

    def test_zero_on_missing_edge_between_vertices(self, graph):
        """Weight 0 on a missing edge is a no-op."""
        graph.add("A")
        graph.add("B")
        assert graph.set("A", "B", 0) == 0
        assert graph.vertices() == {"A", "B"}
        assert graph.targets("A") == {}

    def test_zero_on_empty_graph_adds_nothing(self, graph):
        """Weight 0 never creates vertices."""
        assert graph.set("X", "Y", 0) == 0
        assert graph.vertices() == set()

    def test_zero_with_missing_target_adds_nothing(self, graph):
        """Weight 0 from an existing source to an unknown target changes nothing."""
        graph.add("X")
        assert graph.set("X", "Y", 0) == 0
        assert graph.vertices() == {"X"}

    def test_self_loop(self, graph):
        """Self-loops are allowed."""
        assert graph.set("A", "A", 2) == 0
        assert graph.vertices() == {"A"}
        assert graph.targets("A") == {"A": 2}
        assert graph.sources("A") == {"A": 2}

    def test_negative_weight_raises(self, graph):
        """Negative weights are rejected before any change."""
        with pytest.raises(ValueError):
            graph.set("A", "B", -1)
        assert graph.vertices() == set()

    def test_non_int_weight_raises(self, graph):
        """Weights must be ints."""
        with pytest.raises(TypeError):
            graph.set("A", "B", 1.5)
        with pytest.raises(TypeError):
            graph.set("A", "B", True)
        assert graph.vertices() == set()

    def test_none_endpoint_raises(self, graph):
        """None endpoints are rejected."""
        with pytest.raises(ValueError):
            graph.set(None, "B", 1)
        with pytest.raises(ValueError):
            graph.set("A", None, 1)
        assert graph.vertices() == set()


class TestRemove:
    """Test remove()."""

    def test_remove_existing_vertex(self, graph):
        """Removing a vertex returns True and deletes it."""
        graph.add("A")
        assert graph.remove("A") is True
        assert "A" not in graph.vertices()

    def test_remove_missing_vertex_changes_nothing(self, graph):
        """Removing an unknown vertex returns False."""
        graph.set("A", "B", 5)
        assert graph.remove("Z") is False
        assert graph.vertices() == {"A", "B"}
        assert graph.targets("A") == {"B": 5}
        assert graph.sources("B") == {"A": 5}

    def test_remove_cascades_to_incident_edges(self, graph):
        """Incoming, outgoing and self-loop edges all go with the vertex."""
        graph.set("C", "A", 7)
        graph.set("A", "B", 5)
        graph.set("A", "A", 9)
        assert graph.remove("A") is True
        assert "A" not in graph.vertices()
        assert graph.sources("B") == {}
        assert graph.targets("C") == {}
        assert graph.vertices() == {"B", "C"}

    def test_remove_keeps_unrelated_edges(self, graph):
        """Edges between other vertices survive."""
        graph.set("A", "B", 4)
        graph.set("B", "C", 2)
        graph.remove("A")
        assert graph.targets("B") == {"C": 2}
        assert graph.sources("C") == {"B": 2}

    def test_remove_only_vertex(self, graph):
        """Removing the last vertex leaves an empty graph."""
        graph.add("Solo")
        graph.remove("Solo")
        assert graph.vertices() == set()

    def test_removed_vertex_can_be_re_added(self, graph):
        """A removed vertex comes back without its old edges."""
        graph.set("A", "B", 4)
        graph.remove("A")
        assert graph.add("A") is True
        assert graph.targets("A") == {}
        assert graph.sources("B") == {}


class TestObservers:
    """Test vertices(), sources() and targets()."""

    def test_sources_of_unknown_vertex_is_empty(self, graph):
        """Absent vertices have no sources."""
        assert graph.sources("A") == {}

    def test_targets_of_unknown_vertex_is_empty(self, graph):
        """Absent vertices have no targets."""
        assert graph.targets("A") == {}

    def test_sources_multiple(self, graph):
        """sources() collects every incoming edge."""
        graph.set("A", "C", 2)
        graph.set("B", "C", 3)
        assert graph.sources("C") == {"A": 2, "B": 3}
        assert graph.sources("A") == {}

    def test_targets_multiple(self, graph):
        """targets() collects every outgoing edge."""
        graph.set("A", "B", 2)
        graph.set("A", "C", 3)
        assert graph.targets("A") == {"B": 2, "C": 3}
        assert graph.targets("B") == {}

    def test_vertices_is_a_copy(self, graph):
        """Mutating the returned set does not change the graph."""
        graph.add("A")
        vertices = graph.vertices()
        vertices.add("Z")
        vertices.discard("A")
        assert graph.vertices() == {"A"}

    def test_targets_is_a_copy(self, graph):
        """Mutating the returned targets dict does not change the graph."""
        graph.set("A", "B", 1)
        targets = graph.targets("A")
        targets["B"] = 99
        targets["C"] = 5
        assert graph.targets("A") == {"B": 1}
        assert "C" not in graph.vertices()

    def test_sources_is_a_copy(self, graph):
        """Mutating the returned sources dict does not change the graph."""
        graph.set("A", "B", 1)
        sources = graph.sources("B")
        sources.clear()
        assert graph.sources("B") == {"A": 1}

    def test_non_string_labels(self, graph):
        """Any hashable label works."""
        graph.set(1, 2, 3)
        graph.set((1, "x"), 1, 4)
        assert graph.targets(1) == {2: 3}
        assert graph.sources(1) == {(1, "x"): 4}


class TestInvariants:
    """Invariants hold after arbitrary mutation sequences."""

    def test_random_operations_preserve_invariants(self, graph):
        """Random add/set/remove calls never break the representation."""
        rng = random.Random(6005)
        labels = list("ABCDEF")
        expected: dict[tuple[str, str], int] = {}
        for _ in range(300):
            op = rng.random()
            if op < 0.15:
                graph.add(rng.choice(labels))
            elif op < 0.85:
                source, target = rng.choice(labels), rng.choice(labels)
                weight = rng.choice([0, 0, 1, 2, 3, 7])
                previous = graph.set(source, target, weight)
                assert previous == expected.get((source, target), 0)
                if weight:
                    expected[(source, target)] = weight
                else:
                    expected.pop((source, target), None)
            else:
                label = rng.choice(labels)
                graph.remove(label)
                expected = {
                    pair: w for pair, w in expected.items() if label not in pair
                }
            assert_invariants(graph)

        actual = {
            (source, target): weight
            for source in graph.vertices()
            for target, weight in graph.targets(source).items()
        }
        assert actual == expected
