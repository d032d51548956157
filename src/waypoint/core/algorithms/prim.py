"""
Prim's minimum spanning tree algorithm.
"""

import logging
import math
from typing import Iterator, List, Optional, Set

from ..events import AlgorithmEvent, AlgorithmEventType
from ..graph import Graph
from ..models import WeightedEdge
from ..structures import DecreaseKeyQueue
from ..types import INFINITY, NodeId
from .base import GraphAlgorithm
from .models import SpanningTree
from .utils import SearchConfig

logger = logging.getLogger(__name__)


class PrimMST(GraphAlgorithm[SpanningTree]):
    """
    Minimum spanning tree grown from a single start node.

    On a disconnected graph the tree only covers the start node's component.
    With ``span_forest=True`` the search restarts from the next unreached
    node instead and returns a minimum spanning forest.

    Attributes:
        start (Optional[NodeId]): Start node, the first graph node by default
        span_forest (bool): Whether to keep going past the start's component
    """

    operation = "prim"

    def __init__(
        self,
        graph: Graph,
        start: Optional[NodeId] = None,
        config: Optional[SearchConfig] = None,
        span_forest: bool = False,
    ):
        super().__init__(graph, config)
        if start is None:
            start = next(iter(graph), None)
        else:
            self.validate_node(start, "Start")
        self.start = start
        self.span_forest = span_forest

    def events(self) -> Iterator[AlgorithmEvent]:
        self._result = None
        graph = self.graph
        metrics = self._new_metrics()
        logger.debug(f"Starting Prim's algorithm from {self.start!r}")

        included: Set[NodeId] = set()
        tree_edges: List[WeightedEdge] = []
        tree_nodes: List[NodeId] = []

        queue = DecreaseKeyQueue()
        for node in graph:
            queue.enqueue(node, 0.0 if node == self.start else INFINITY)

        with self._search_context(metrics) as memory:
            while not queue.is_empty():
                memory.check_memory()
                current, key, parent = queue.extract_min()
                metrics.nodes_explored += 1

                if math.isinf(key):
                    if not self.span_forest:
                        logger.debug(f"{len(queue) + 1} nodes unreachable from {self.start!r}")
                        break
                    logger.debug(f"Starting new tree at {current!r}")

                included.add(current)
                tree_nodes.append(current)
                yield AlgorithmEvent(AlgorithmEventType.NODE_FINALIZED, node=current, value=key)

                if parent is not None:
                    edge = WeightedEdge(parent, current, key)
                    tree_edges.append(edge)
                    yield AlgorithmEvent(
                        AlgorithmEventType.TREE_EDGE_ADDED, node=current, edge=edge, value=key
                    )

                for neighbor, weight in graph.neighbors(current):
                    metrics.edges_scanned += 1
                    if neighbor in included:
                        continue
                    if queue.enqueue(neighbor, weight, current):
                        yield AlgorithmEvent(
                            AlgorithmEventType.EDGE_RELAXED,
                            node=neighbor,
                            edge=WeightedEdge(current, neighbor, weight),
                            value=weight,
                        )

        self._result = SpanningTree(edges=tree_edges, nodes=tree_nodes, metrics=metrics)
        logger.info(
            f"Prim finalized {len(tree_edges)} tree edges over {len(tree_nodes)} nodes "
            f"in {metrics.duration:.1f}ms"
        )
        yield AlgorithmEvent(AlgorithmEventType.SEARCH_COMPLETED, value=self._result.total_weight)
