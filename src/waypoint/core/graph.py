"""
Core graph data structure with an undirected adjacency list representation.

This module provides the Graph class consumed by every algorithm in the
package. A graph is built once from a node set and a collection of weighted
edges and is read-only afterwards. Every edge is stored symmetrically so
that each endpoint sees the other in its adjacency with the same weight.

Construction is where malformed input is rejected: an edge referencing a node
outside the node set, or carrying a negative or non-finite weight, raises
InvalidEdgeError before any algorithm runs.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Sequence, Set, Tuple, Union

from .exceptions import GraphOperationError, InvalidEdgeError, UnknownNodeError
from .models import WeightedEdge, validate_node_id
from .types import EdgeTuple, Neighbor, NodeId

logger = logging.getLogger(__name__)

EdgeInput = Union[WeightedEdge, EdgeTuple, Sequence]


@dataclass
class GraphState:
    """Encapsulates the state of a graph."""

    adjacency: Dict[NodeId, List[Neighbor]] = field(default_factory=dict)
    weights: Dict[NodeId, Dict[NodeId, float]] = field(default_factory=dict)
    edges: List[WeightedEdge] = field(default_factory=list)


class Graph:
    """
    Weighted undirected graph with an adjacency list representation.

    Node iteration follows insertion order, which makes every algorithm
    deterministic for identical inputs. The graph carries no internal
    synchronization; concurrent callers should each build their own view.

    Attributes:
        _state (GraphState): Adjacency, weight index and original edge list

    Example:
        >>> graph = Graph(["A", "B", "C"], [("A", "B", 1.0), ("B", "C", 2.5)])
        >>> graph.neighbors("B")
        (('A', 1.0), ('C', 2.5))
    """

    def __init__(self, nodes: Iterable[NodeId], edges: Iterable[EdgeInput] = ()):
        """
        Build the graph from a node set and weighted edges.

        Args:
            nodes: Node identifiers. Duplicates are collapsed, first position wins.
            edges: ``WeightedEdge`` instances or ``(a, b, weight)`` sequences.

        Raises:
            InvalidEdgeError: If an edge is malformed, has an invalid weight or
                references a node absent from ``nodes``
            TypeError: If a node identifier is neither a str nor an int
        """
        self._state = GraphState()
        for node in nodes:
            validate_node_id(node)
            if node not in self._state.adjacency:
                self._state.adjacency[node] = []
                self._state.weights[node] = {}

        for raw in edges:
            self._add_edge(self._coerce_edge(raw))

        logger.debug(f"Built graph with {len(self)} nodes and {self.edge_count} edges")

    @staticmethod
    def _coerce_edge(raw: EdgeInput) -> WeightedEdge:
        """Turn an edge input into a validated WeightedEdge."""
        if isinstance(raw, WeightedEdge):
            return raw
        if isinstance(raw, (str, bytes)) or not isinstance(raw, (tuple, list)):
            raise InvalidEdgeError(f"edge must be a WeightedEdge or (a, b, weight), got {raw!r}")
        if len(raw) != 3:
            raise InvalidEdgeError(f"edge must have exactly 3 items (a, b, weight), got {raw!r}")
        return WeightedEdge(*raw)

    def _add_edge(self, edge: WeightedEdge) -> None:
        """Store an edge in both endpoints' adjacency."""
        for endpoint in (edge.source, edge.target):
            if endpoint not in self._state.adjacency:
                raise InvalidEdgeError(
                    f"edge {edge.source!r} - {edge.target!r} references unknown node {endpoint!r}"
                )

        state = self._state
        state.edges.append(edge)
        state.adjacency[edge.source].append((edge.target, edge.weight))
        if not edge.is_self_loop:
            state.adjacency[edge.target].append((edge.source, edge.weight))

        # Weight index keeps the lightest of any parallel edges
        current = state.weights[edge.source].get(edge.target)
        if current is None or edge.weight < current:
            state.weights[edge.source][edge.target] = edge.weight
            state.weights[edge.target][edge.source] = edge.weight

    def __len__(self) -> int:
        return len(self._state.adjacency)

    def __iter__(self) -> Iterator[NodeId]:
        """Iterate node identifiers in insertion order."""
        return iter(self._state.adjacency)

    def __contains__(self, node: object) -> bool:
        try:
            return node in self._state.adjacency
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.edge_count})"

    @property
    def edge_count(self) -> int:
        """Number of edges given at construction, parallel edges included."""
        return len(self._state.edges)

    def nodes(self) -> Set[NodeId]:
        """Return the set of node identifiers."""
        return set(self._state.adjacency)

    def has_node(self, node: NodeId) -> bool:
        return node in self

    def _require(self, node: NodeId) -> None:
        if node not in self:
            raise UnknownNodeError(f"Node {node!r} not found in graph")

    def neighbors(self, node: NodeId) -> Tuple[Neighbor, ...]:
        """
        Get the adjacency of a node.

        Args:
            node: Node identifier

        Returns:
            Tuple of ``(neighbor, weight)`` pairs in edge insertion order

        Raises:
            UnknownNodeError: If the node is not in the graph
        """
        self._require(node)
        return tuple(self._state.adjacency[node])

    def degree(self, node: NodeId) -> int:
        """Number of adjacency entries of a node (a self-loop counts once)."""
        self._require(node)
        return len(self._state.adjacency[node])

    def has_edge(self, from_node: NodeId, to_node: NodeId) -> bool:
        """Check whether an edge joins two nodes, in either orientation."""
        if from_node not in self or to_node not in self:
            return False
        return to_node in self._state.weights[from_node]

    def get_weight(self, from_node: NodeId, to_node: NodeId) -> float:
        """
        Get the weight of the edge joining two nodes.

        When parallel edges exist the lightest weight is returned.

        Raises:
            UnknownNodeError: If either node is not in the graph
            GraphOperationError: If the nodes are not adjacent
        """
        self._require(from_node)
        self._require(to_node)
        try:
            return self._state.weights[from_node][to_node]
        except KeyError:
            raise GraphOperationError(f"No edge between {from_node!r} and {to_node!r}")

    def edges(self) -> List[WeightedEdge]:
        """Return every edge once, in the order given at construction."""
        return list(self._state.edges)

    def isolated_nodes(self) -> Set[NodeId]:
        """Nodes with an empty adjacency."""
        return {node for node, adjacent in self._state.adjacency.items() if not adjacent}

    def without_isolated_nodes(self) -> "Graph":
        """
        Return a copy of the graph with every node of empty adjacency removed.

        Disconnected nodes carry no information for shortest paths or spanning
        trees, so loaders usually prune them before handing the graph over.
        """
        isolated = self.isolated_nodes()
        if isolated:
            logger.debug(f"Pruning {len(isolated)} isolated nodes")
        return Graph(
            [node for node in self._state.adjacency if node not in isolated],
            self._state.edges,
        )
