"""Shortest path and minimum spanning tree algorithms."""

from typing import List, Optional, Tuple

from ..graph import Graph
from ..types import NodeId
from .base import GraphAlgorithm
from .dijkstra import DijkstraSearch
from .kruskal import KruskalMST, collect_edges
from .models import PerformanceMetrics, ShortestPaths, SpanningTree
from .prim import PrimMST
from .utils import MemoryManager, SearchConfig

# Constants
MST_METHODS = ("kruskal", "prim")

__all__ = [
    "GraphAlgorithm",
    "GraphAlgorithms",
    "DijkstraSearch",
    "PrimMST",
    "KruskalMST",
    "ShortestPaths",
    "SpanningTree",
    "PerformanceMetrics",
    "MemoryManager",
    "SearchConfig",
    "MST_METHODS",
    "collect_edges",
]


class GraphAlgorithms:
    """Static interface for the graph algorithms."""

    @staticmethod
    def shortest_paths(
        graph: Graph,
        source: NodeId,
        target: Optional[NodeId] = None,
        config: Optional[SearchConfig] = None,
    ) -> ShortestPaths:
        """Run Dijkstra's algorithm from ``source``."""
        return DijkstraSearch(graph, source, target=target, config=config).run()

    @staticmethod
    def shortest_path(
        graph: Graph,
        source: NodeId,
        target: NodeId,
        config: Optional[SearchConfig] = None,
    ) -> Tuple[float, Optional[List[NodeId]]]:
        """
        Find the shortest path between two nodes.

        Returns:
            ``(distance, path)``; ``(inf, None)`` when the target is unreachable
        """
        result = DijkstraSearch(graph, source, target=target, config=config).run()
        return result.distance_to(target), result.path_to(target)

    @staticmethod
    def prim(
        graph: Graph,
        start: Optional[NodeId] = None,
        config: Optional[SearchConfig] = None,
        span_forest: bool = False,
    ) -> SpanningTree:
        """Run Prim's algorithm."""
        return PrimMST(graph, start=start, config=config, span_forest=span_forest).run()

    @staticmethod
    def kruskal(graph: Graph, config: Optional[SearchConfig] = None) -> SpanningTree:
        """Run Kruskal's algorithm."""
        return KruskalMST(graph, config=config).run()

    @classmethod
    def minimum_spanning_tree(
        cls,
        graph: Graph,
        method: str = "kruskal",
        config: Optional[SearchConfig] = None,
    ) -> SpanningTree:
        """
        Compute a minimum spanning tree with the named method.

        Raises:
            ValueError: If ``method`` is not one of MST_METHODS
        """
        if method == "kruskal":
            return cls.kruskal(graph, config=config)
        if method == "prim":
            return cls.prim(graph, config=config)
        raise ValueError(f"Unknown spanning tree method {method!r}; expected one of {MST_METHODS}")
