"""
Kruskal's minimum spanning tree algorithm.
"""

import logging
from typing import Dict, FrozenSet, Iterator, List, Optional

from ..events import AlgorithmEvent, AlgorithmEventType
from ..graph import Graph
from ..models import WeightedEdge
from ..structures import UnionFind
from ..types import NodeId
from .base import GraphAlgorithm
from .models import SpanningTree
from .utils import SearchConfig

logger = logging.getLogger(__name__)


def collect_edges(graph: Graph) -> List[WeightedEdge]:
    """
    Collect each undirected edge once, in discovery order.

    Adjacency lists hold every edge twice; both orientations collapse onto
    the unordered endpoint key. Among parallel edges the lightest is kept,
    and an edge keeps the orientation and position in which it was first
    discovered. Self-loops are dropped since no tree can contain them.
    """
    unique: Dict[FrozenSet[NodeId], WeightedEdge] = {}
    for node in graph:
        for neighbor, weight in graph.neighbors(node):
            edge = WeightedEdge(node, neighbor, weight)
            if edge.is_self_loop:
                continue
            existing = unique.get(edge.key)
            if existing is None:
                unique[edge.key] = edge
            elif weight < existing.weight:
                unique[edge.key] = WeightedEdge(existing.source, existing.target, weight)
    return list(unique.values())


class KruskalMST(GraphAlgorithm[SpanningTree]):
    """
    Minimum spanning forest by sorted-edge processing.

    The result holds ``V - C`` edges, where ``C`` is the number of connected
    components; on a connected graph that is a spanning tree.
    """

    operation = "kruskal"

    def __init__(self, graph: Graph, config: Optional[SearchConfig] = None):
        super().__init__(graph, config)

    def events(self) -> Iterator[AlgorithmEvent]:
        self._result = None
        graph = self.graph
        metrics = self._new_metrics()

        # sorted() is stable, so equal weights keep discovery order
        candidates = sorted(collect_edges(graph), key=lambda edge: edge.weight)
        logger.debug(f"Starting Kruskal's algorithm over {len(candidates)} candidate edges")

        sets = UnionFind(graph)
        tree_edges: List[WeightedEdge] = []

        with self._search_context(metrics) as memory:
            for edge in candidates:
                memory.check_memory()
                metrics.edges_scanned += 1
                if sets.union(edge.source, edge.target):
                    tree_edges.append(edge)
                    yield AlgorithmEvent(
                        AlgorithmEventType.TREE_EDGE_ADDED,
                        node=edge.target,
                        edge=edge,
                        value=edge.weight,
                    )
                else:
                    yield AlgorithmEvent(
                        AlgorithmEventType.EDGE_REJECTED,
                        node=edge.target,
                        edge=edge,
                        value=edge.weight,
                    )
            metrics.nodes_explored = len(sets)

        self._result = SpanningTree(edges=tree_edges, nodes=list(graph), metrics=metrics)
        logger.info(
            f"Kruskal accepted {len(tree_edges)} of {len(candidates)} edges "
            f"({sets.set_count} components) in {metrics.duration:.1f}ms"
        )
        yield AlgorithmEvent(AlgorithmEventType.SEARCH_COMPLETED, value=self._result.total_weight)
