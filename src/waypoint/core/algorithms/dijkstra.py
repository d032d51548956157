"""
Dijkstra's single-source shortest path algorithm.

Edge weights must be non-negative. Graph construction already rejects
negative weights, so the search does not check them again.
"""

import logging
from typing import Dict, Iterator, Optional

from ..events import AlgorithmEvent, AlgorithmEventType
from ..graph import Graph
from ..models import WeightedEdge
from ..structures import DecreaseKeyQueue
from ..types import INFINITY, NodeId
from .base import GraphAlgorithm
from .models import ShortestPaths
from .utils import SearchConfig

logger = logging.getLogger(__name__)


class DijkstraSearch(GraphAlgorithm[ShortestPaths]):
    """
    Shortest paths from one source over a weighted undirected graph.

    Runs in O((V + E) log V) with the decrease-key binary heap. When a
    target is given the search stops as soon as the target is extracted
    from the queue.

    Example:
        >>> result = DijkstraSearch(graph, "A", target="D").run()
        >>> result.distance_to("D"), result.path_to("D")
        (4.0, ['A', 'D'])
    """

    operation = "dijkstra"

    def __init__(
        self,
        graph: Graph,
        source: NodeId,
        target: Optional[NodeId] = None,
        config: Optional[SearchConfig] = None,
    ):
        """
        Initialize the search.

        Raises:
            UnknownNodeError: If the source or target is not in the graph
        """
        super().__init__(graph, config)
        self.validate_node(source, "Source")
        if target is not None:
            self.validate_node(target, "Target")
        self.source = source
        self.target = target

    def events(self) -> Iterator[AlgorithmEvent]:
        self._result = None
        graph = self.graph
        metrics = self._new_metrics()
        logger.debug(f"Starting Dijkstra's algorithm from {self.source!r} to {self.target!r}")

        distances: Dict[NodeId, float] = {node: INFINITY for node in graph}
        predecessors: Dict[NodeId, Optional[NodeId]] = {node: None for node in graph}
        predecessor_weights: Dict[NodeId, float] = {}
        distances[self.source] = 0.0

        queue = DecreaseKeyQueue()
        for node in graph:
            queue.enqueue(node, distances[node])

        with self._search_context(metrics) as memory:
            while not queue.is_empty():
                memory.check_memory()
                current, current_dist, _ = queue.extract_min()
                metrics.nodes_explored += 1

                logger.debug(f"Visiting node {current!r} with distance {current_dist}")
                yield AlgorithmEvent(
                    AlgorithmEventType.NODE_FINALIZED, node=current, value=current_dist
                )

                if current == self.target:
                    logger.debug(f"Reached target {current!r}")
                    break

                for neighbor, weight in graph.neighbors(current):
                    metrics.edges_scanned += 1
                    alt = distances[current] + weight
                    if alt < distances[neighbor]:
                        distances[neighbor] = alt
                        predecessors[neighbor] = current
                        predecessor_weights[neighbor] = weight
                        queue.enqueue(neighbor, alt)
                        yield AlgorithmEvent(
                            AlgorithmEventType.EDGE_RELAXED,
                            node=neighbor,
                            edge=WeightedEdge(current, neighbor, weight),
                            value=alt,
                        )

        self._result = ShortestPaths(
            source=self.source,
            target=self.target,
            distances=distances,
            predecessors=predecessors,
            predecessor_weights=predecessor_weights,
            metrics=metrics,
        )
        logger.info(
            f"Dijkstra from {self.source!r} explored {metrics.nodes_explored} nodes "
            f"in {metrics.duration:.1f}ms"
        )
        yield AlgorithmEvent(
            AlgorithmEventType.SEARCH_COMPLETED,
            node=self.target,
            value=distances[self.target] if self.target is not None else None,
        )
