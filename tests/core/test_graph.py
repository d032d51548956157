"""Tests for the core graph structure."""

import pytest

from waypoint.core.exceptions import GraphOperationError, InvalidEdgeError, UnknownNodeError
from waypoint.core.graph import Graph
from waypoint.core.models import WeightedEdge


def test_graph_nodes(scenario_graph):
    """Test node set and insertion-order iteration."""
    assert scenario_graph.nodes() == {"A", "B", "C", "D"}
    assert list(scenario_graph) == ["A", "B", "C", "D"]
    assert len(scenario_graph) == 4
    assert "A" in scenario_graph
    assert "E" not in scenario_graph


def test_graph_edges_are_symmetric(scenario_graph):
    """Test every edge is visible from both endpoints with the same weight."""
    for edge in scenario_graph.edges():
        assert (edge.target, edge.weight) in scenario_graph.neighbors(edge.source)
        assert (edge.source, edge.weight) in scenario_graph.neighbors(edge.target)


def test_graph_neighbors_order(scenario_graph):
    """Test adjacency follows edge insertion order."""
    assert scenario_graph.neighbors("A") == (("B", 1.0), ("D", 4.0))
    assert scenario_graph.neighbors("D") == (("C", 1.0), ("A", 4.0), ("B", 3.0))


def test_graph_unknown_node_lookup(scenario_graph):
    """Test lookups on absent nodes raise UnknownNodeError."""
    with pytest.raises(UnknownNodeError):
        scenario_graph.neighbors("Z")
    with pytest.raises(UnknownNodeError):
        scenario_graph.degree("Z")
    with pytest.raises(UnknownNodeError):
        scenario_graph.get_weight("A", "Z")


def test_graph_edge_with_unknown_endpoint():
    """Test edges referencing absent nodes are rejected at construction."""
    with pytest.raises(InvalidEdgeError, match="unknown node"):
        Graph(["A", "B"], [("A", "C", 1.0)])


def test_graph_edge_with_negative_weight():
    """Test negative weights are rejected at construction."""
    with pytest.raises(InvalidEdgeError, match="non-negative"):
        Graph(["A", "B"], [("A", "B", -2.0)])


@pytest.mark.parametrize("raw", [("A", "B"), ("A", "B", 1.0, 2.0), "AB1", 42])
def test_graph_malformed_edge_input(raw):
    """Test edge inputs that are not (a, b, weight) are rejected."""
    with pytest.raises(InvalidEdgeError):
        Graph(["A", "B"], [raw])


def test_graph_accepts_weighted_edges():
    """Test WeightedEdge instances and tuples can be mixed."""
    graph = Graph([1, 2, 3], [WeightedEdge(1, 2, 0.5), (2, 3, 1)])
    assert graph.get_weight(2, 1) == 0.5
    assert graph.get_weight(3, 2) == 1.0
    assert graph.edge_count == 2


def test_graph_does_not_coerce_identifiers():
    """Test integer and string identifiers stay distinct."""
    graph = Graph([1, "1"], [(1, "1", 2.0)])
    assert len(graph) == 2
    assert graph.neighbors(1) == (("1", 2.0),)
    with pytest.raises(InvalidEdgeError):
        Graph([1], [("1", 1, 1.0)])


def test_graph_rejects_invalid_node_identifiers():
    """Test node identifiers must be strings or integers."""
    with pytest.raises(TypeError):
        Graph([1.5])
    with pytest.raises(TypeError):
        Graph([True])


def test_graph_duplicate_nodes_collapse():
    """Test repeated node identifiers keep their first position."""
    graph = Graph(["B", "A", "B"])
    assert list(graph) == ["B", "A"]


def test_graph_self_loop_stored_once():
    """Test a self-loop appears once in its node's adjacency."""
    graph = Graph(["A", "B"], [("A", "A", 1.0), ("A", "B", 2.0)])
    assert graph.neighbors("A") == (("A", 1.0), ("B", 2.0))
    assert graph.degree("A") == 2
    assert graph.has_edge("A", "A")


def test_graph_parallel_edges(scenario_graph):
    """Test parallel edges are kept and the lightest weight is reported."""
    graph = Graph(["A", "B"], [("A", "B", 5.0), ("B", "A", 2.0)])
    assert graph.neighbors("A") == (("B", 5.0), ("B", 2.0))
    assert graph.get_weight("A", "B") == 2.0
    assert graph.edge_count == 2


def test_graph_has_edge(scenario_graph):
    """Test edge existence in both orientations."""
    assert scenario_graph.has_edge("A", "B")
    assert scenario_graph.has_edge("B", "A")
    assert not scenario_graph.has_edge("A", "C")
    assert not scenario_graph.has_edge("A", "Z")
    with pytest.raises(GraphOperationError):
        scenario_graph.get_weight("A", "C")


def test_graph_isolated_nodes(disconnected_graph):
    """Test isolated node detection and pruning."""
    assert disconnected_graph.isolated_nodes() == {"Z"}
    pruned = disconnected_graph.without_isolated_nodes()
    assert pruned.nodes() == {"A", "B", "C", "X", "Y"}
    assert pruned.edge_count == disconnected_graph.edge_count
    # The original graph is left untouched
    assert "Z" in disconnected_graph


def test_graph_empty():
    """Test an empty graph."""
    graph = Graph([])
    assert len(graph) == 0
    assert graph.nodes() == set()
    assert graph.edges() == []
    assert repr(graph) == "Graph(nodes=0, edges=0)"
