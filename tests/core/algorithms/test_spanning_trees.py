"""
Tests for Prim's and Kruskal's minimum spanning tree algorithms.
"""

import math

import pytest

from waypoint.core.algorithms import KruskalMST, PrimMST, collect_edges
from waypoint.core.events import AlgorithmEventType
from waypoint.core.exceptions import InvalidOperationError, UnknownNodeError
from waypoint.core.graph import Graph
from waypoint.core.graph_operations import ComponentAnalysis


def _edge_set(tree):
    return {frozenset((edge.source, edge.target)) for edge in tree.edges}


def test_prim_reference_scenario(scenario_graph):
    """Test Prim's tree and its finalization order on the reference graph."""
    tree = PrimMST(scenario_graph).run()
    assert tree.edge_tuples() == [("A", "B", 1.0), ("B", "C", 2.0), ("C", "D", 1.0)]
    assert tree.total_weight == 4.0
    assert tree.nodes == ["A", "B", "C", "D"]
    assert tree.is_spanning(scenario_graph)


def test_kruskal_reference_scenario(scenario_graph):
    """Test Kruskal's tree on the reference graph."""
    tree = KruskalMST(scenario_graph).run()
    assert tree.edge_tuples() == [("A", "B", 1.0), ("C", "D", 1.0), ("B", "C", 2.0)]
    assert tree.total_weight == 4.0
    assert tree.is_spanning(scenario_graph)


def test_prim_and_kruskal_agree(distinct_weight_graph):
    """Test both algorithms find the same unique tree for distinct weights."""
    prim = PrimMST(distinct_weight_graph).run()
    kruskal = KruskalMST(distinct_weight_graph).run()
    assert len(prim) == len(kruskal) == len(distinct_weight_graph) - 1
    assert prim.total_weight == kruskal.total_weight
    assert _edge_set(prim) == _edge_set(kruskal)


def test_prim_start_node_does_not_change_weight(distinct_weight_graph):
    """Test any start node yields the same minimum weight."""
    weights = {PrimMST(distinct_weight_graph, start=node).run().total_weight for node in (0, 7, 29)}
    assert len(weights) == 1


def test_tree_edges_exist_in_graph(distinct_weight_graph):
    """Test every tree edge is an edge of the graph with its weight."""
    for tree in (PrimMST(distinct_weight_graph).run(), KruskalMST(distinct_weight_graph).run()):
        for edge in tree:
            assert distinct_weight_graph.get_weight(edge.source, edge.target) == edge.weight


def test_prim_disconnected_covers_start_component(disconnected_graph):
    """Test Prim only spans the start node's component by default."""
    tree = PrimMST(disconnected_graph).run()
    assert set(tree.nodes) == {"A", "B", "C"}
    assert tree.total_weight == 3.0
    assert not tree.is_spanning(disconnected_graph)

    other = PrimMST(disconnected_graph, start="Y").run()
    assert other.edge_tuples() == [("Y", "X", 5.0)]


def test_prim_span_forest(disconnected_graph):
    """Test Prim can restart from unreached nodes to build a forest."""
    forest = PrimMST(disconnected_graph, span_forest=True).run()
    assert set(forest.nodes) == disconnected_graph.nodes()
    assert forest.total_weight == 8.0
    assert forest.component_count == 3


def test_kruskal_disconnected_forest(disconnected_graph):
    """Test Kruskal returns V minus the number of components edges."""
    tree = KruskalMST(disconnected_graph).run()
    components = ComponentAnalysis(disconnected_graph).get_component_count()
    assert len(tree) == len(disconnected_graph) - components
    assert tree.component_count == components
    assert tree.total_weight == 8.0


def test_kruskal_ties_keep_discovery_order():
    """Test equal weights are processed in discovery order."""
    graph = Graph(["A", "B", "C"], [("B", "C", 1.0), ("A", "B", 1.0), ("A", "C", 1.0)])
    tree = KruskalMST(graph).run()
    # Discovery walks A's adjacency first: A-B, A-C, then B-C
    assert tree.edge_tuples() == [("A", "B", 1.0), ("A", "C", 1.0)]


def test_collect_edges_deduplicates():
    """Test both orientations and parallel edges collapse to one candidate."""
    graph = Graph(
        ["A", "B", "C"],
        [("A", "B", 3.0), ("B", "A", 1.0), ("B", "C", 2.0), ("C", "C", 0.5)],
    )
    assert [edge.as_tuple() for edge in collect_edges(graph)] == [
        ("A", "B", 1.0),
        ("B", "C", 2.0),
    ]


def test_self_loops_never_in_tree():
    """Test self-loops are ignored by both algorithms."""
    graph = Graph(["A", "B"], [("A", "A", 0.0), ("A", "B", 2.0)])
    for tree in (PrimMST(graph).run(), KruskalMST(graph).run()):
        assert tree.edge_tuples() == [("A", "B", 2.0)]


def test_empty_and_single_node_graphs():
    """Test trivial graphs produce empty trees."""
    for graph in (Graph([]), Graph(["solo"])):
        for tree in (PrimMST(graph).run(), KruskalMST(graph).run()):
            assert tree.edges == []
            assert tree.total_weight == 0.0
            assert tree.is_spanning(graph)


def test_prim_unknown_start(scenario_graph):
    """Test an absent start node is rejected."""
    with pytest.raises(UnknownNodeError):
        PrimMST(scenario_graph, start="Z")


def test_kruskal_idempotent(scenario_graph):
    """Test repeated Kruskal runs give identical output."""
    search = KruskalMST(scenario_graph)
    assert search.run() == search.run() == KruskalMST(scenario_graph).run()


def test_kruskal_events(scenario_graph):
    """Test Kruskal reports accepted and rejected edges."""
    events = list(KruskalMST(scenario_graph).events())
    added = [e.edge.as_tuple() for e in events if e.type is AlgorithmEventType.TREE_EDGE_ADDED]
    rejected = [e.edge.as_tuple() for e in events if e.type is AlgorithmEventType.EDGE_REJECTED]
    assert added == [("A", "B", 1.0), ("C", "D", 1.0), ("B", "C", 2.0)]
    assert rejected == [("B", "D", 3.0), ("A", "D", 4.0)]
    assert events[-1].type is AlgorithmEventType.SEARCH_COMPLETED
    assert events[-1].value == 4.0


def test_prim_events(scenario_graph):
    """Test Prim reports tree edges as nodes are finalized."""
    events = list(PrimMST(scenario_graph).events())
    added = [e.edge.as_tuple() for e in events if e.type is AlgorithmEventType.TREE_EDGE_ADDED]
    assert added == [("A", "B", 1.0), ("B", "C", 2.0), ("C", "D", 1.0)]
    relaxed_d = [e.value for e in events
                 if e.type is AlgorithmEventType.EDGE_RELAXED and e.node == "D"]
    # D's key drops 4 -> 3 -> 1 as cheaper connections appear
    assert relaxed_d == [4.0, 3.0, 1.0]
    assert math.isclose(events[-1].value, 4.0)


@pytest.mark.parametrize("algorithm", [PrimMST, KruskalMST])
def test_result_cleared_when_new_run_starts(scenario_graph, algorithm):
    """Test a partly consumed rerun does not expose the previous tree."""
    search = algorithm(scenario_graph)
    search.run()
    events = search.events()
    next(events)
    with pytest.raises(InvalidOperationError):
        search.result
