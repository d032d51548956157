"""
Data models for algorithm results.

This module provides the result containers returned by the algorithms:
- ShortestPaths: Distances and predecessor links produced by Dijkstra
- SpanningTree: Ordered tree edges produced by Prim or Kruskal
- PerformanceMetrics: Timing and exploration counters of a single run

Metrics are excluded from equality so that two runs over the same graph
compare equal.

Example:
    >>> result = DijkstraSearch(graph, "A").run()
    >>> result.distance_to("D")
    4.0
    >>> result.path_to("D")
    ['A', 'D']
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

from ..exceptions import UnknownNodeError
from ..graph import Graph
from ..models import WeightedEdge
from ..types import EdgeTuple, NodeId


@dataclass
class PerformanceMetrics:
    """
    Container for algorithm performance metrics.

    Attributes:
        operation: Name of the algorithm
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of nodes extracted from the queue or scanned
        edges_scanned: Number of adjacency entries or candidate edges examined
        max_memory_used: Peak resident memory during the run (bytes)

    Example:
        >>> metrics = PerformanceMetrics(operation="dijkstra", start_time=time())
        >>> # ... run algorithm ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: int = 0
    edges_scanned: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

        if self.nodes_explored < 0 or self.edges_scanned < 0:
            raise ValueError("counters cannot be negative")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "edges_scanned": self.edges_scanned,
            "max_memory_used": self.max_memory_used,
        }


@dataclass
class ShortestPaths:
    """
    Single-source shortest path result.

    A node whose distance is infinite was never reached; that is a valid
    outcome, reported as "no path" by ``path_to``. When the search stopped
    early at ``target``, distances of nodes other than the target may be
    tentative.

    Attributes:
        source: Node the search started from
        target: Node that ended the search early, if one was given
        distances: Distance of every node (``math.inf`` when unreachable)
        predecessors: Predecessor of every node on its best known path
        predecessor_weights: Weight of the edge to each node's predecessor
        metrics: Performance metrics of the run (ignored by equality)
    """

    source: NodeId
    target: Optional[NodeId]
    distances: Dict[NodeId, float]
    predecessors: Dict[NodeId, Optional[NodeId]]
    predecessor_weights: Dict[NodeId, float] = field(default_factory=dict, repr=False)
    metrics: Optional[PerformanceMetrics] = field(default=None, compare=False, repr=False)

    def _require(self, node: NodeId) -> None:
        if node not in self.distances:
            raise UnknownNodeError(f"Node {node!r} not found in result")

    def distance_to(self, node: NodeId) -> float:
        self._require(node)
        return self.distances[node]

    def is_reachable(self, node: NodeId) -> bool:
        self._require(node)
        return not math.isinf(self.distances[node])

    def path_to(self, node: NodeId) -> Optional[List[NodeId]]:
        """
        Reconstruct the path from the source to ``node``.

        Returns:
            Node identifiers from source to ``node``, or None if ``node`` was
            not reached
        """
        if not self.is_reachable(node):
            return None
        path = [node]
        current = node
        while current != self.source:
            current = self.predecessors[current]
            path.append(current)
        path.reverse()
        return path

    def path_edges(self, node: NodeId) -> Optional[List[WeightedEdge]]:
        """Edges along the path to ``node``, or None if it was not reached."""
        path = self.path_to(node)
        if path is None:
            return None
        return [
            WeightedEdge(prev, curr, self.predecessor_weights[curr])
            for prev, curr in zip(path, path[1:])
        ]

    def tree_edges(self) -> List[WeightedEdge]:
        """Edges linking every reached node to its predecessor."""
        return [
            WeightedEdge(parent, node, self.predecessor_weights[node])
            for node, parent in self.predecessors.items()
            if parent is not None
        ]


@dataclass
class SpanningTree:
    """
    Spanning tree (or forest) result.

    Attributes:
        edges: Tree edges in the order they were finalized
        nodes: Nodes covered by the tree, in the order they were reached
        metrics: Performance metrics of the run (ignored by equality)
    """

    edges: List[WeightedEdge]
    nodes: List[NodeId]
    metrics: Optional[PerformanceMetrics] = field(default=None, compare=False, repr=False)

    def __len__(self) -> int:
        """Return the number of tree edges."""
        return len(self.edges)

    def __iter__(self) -> Iterator[WeightedEdge]:
        return iter(self.edges)

    @property
    def total_weight(self) -> float:
        return math.fsum(edge.weight for edge in self.edges)

    @property
    def component_count(self) -> int:
        """Number of trees in the forest."""
        return len(self.nodes) - len(self.edges)

    def edge_tuples(self) -> List[EdgeTuple]:
        """Tree edges as ``(source, target, weight)`` tuples."""
        return [edge.as_tuple() for edge in self.edges]

    def is_spanning(self, graph: Graph) -> bool:
        """Check whether the result is a single tree covering every node of ``graph``."""
        if set(self.nodes) != graph.nodes():
            return False
        return self.component_count <= 1
