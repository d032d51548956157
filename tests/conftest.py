"""Shared test fixtures."""

import random

import pytest

from waypoint.core.graph import Graph


@pytest.fixture
def scenario_graph() -> Graph:
    """
    Fixture providing the four-node reference graph:

    A --1-- B
    |     / |
    4   3   2
    | /     |
    D --1-- C
    """
    return Graph(
        ["A", "B", "C", "D"],
        [
            ("A", "B", 1),
            ("B", "C", 2),
            ("C", "D", 1),
            ("A", "D", 4),
            ("B", "D", 3),
        ],
    )


@pytest.fixture
def disconnected_graph() -> Graph:
    """
    Fixture providing two components plus an isolated node:

    A --1-- B --2-- C      X --5-- Y      Z
    """
    return Graph(
        ["A", "B", "C", "X", "Y", "Z"],
        [("A", "B", 1.0), ("B", "C", 2.0), ("X", "Y", 5.0)],
    )


@pytest.fixture
def distinct_weight_graph() -> Graph:
    """Fixture providing a connected 30-node graph with pairwise distinct weights."""
    rng = random.Random(1234)
    nodes = list(range(30))
    weights = rng.sample(range(1, 10_000), 120)
    edges = []
    # A chain keeps the graph connected
    for i in range(1, len(nodes)):
        edges.append((rng.randrange(i), i, weights.pop()))
    seen = {frozenset((a, b)) for a, b, _ in edges}
    while weights:
        a, b = rng.sample(nodes, 2)
        if frozenset((a, b)) in seen:
            continue
        seen.add(frozenset((a, b)))
        edges.append((a, b, weights.pop()))
    return Graph(nodes, edges)
