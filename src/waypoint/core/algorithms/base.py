from abc import ABC, abstractmethod
from contextlib import contextmanager
from time import time
from typing import Generator, Iterator, Optional

from ..events import AlgorithmEvent
from ..exceptions import InvalidOperationError, UnknownNodeError
from ..graph import Graph
from .models import PerformanceMetrics
from .utils import MemoryManager, SearchConfig


class GraphAlgorithm[R](ABC):
    """
    Abstract base class for graph algorithms.

    An instance describes one algorithm invocation over a read-only graph.
    Each call to ``events()`` runs the algorithm from scratch with its own
    priority queue or union-find, so nothing leaks between runs.
    """

    operation: str = "algorithm"

    def __init__(self, graph: Graph, config: Optional[SearchConfig] = None):
        """Initialize algorithm with graph and optional configuration."""
        if not isinstance(graph, Graph):
            raise TypeError("graph must be a Graph instance")
        self.graph = graph
        self.config = config or SearchConfig()
        self._result: Optional[R] = None

    @abstractmethod
    def events(self) -> Iterator[AlgorithmEvent]:
        """Run the algorithm lazily, yielding one event per step.

        The result becomes available through ``result`` once the iterator is
        exhausted.
        """
        pass

    def run(self) -> R:
        """Run the algorithm to completion and return its result."""
        for _ in self.events():
            pass
        return self.result

    @property
    def result(self) -> R:
        """Result of the latest run, available once that run has completed."""
        if self._result is None:
            raise InvalidOperationError(f"{self.operation} has not been run to completion")
        return self._result

    def validate_node(self, node: object, role: str) -> None:
        """Validate that a node exists in the graph."""
        if not self.graph.has_node(node):
            raise UnknownNodeError(f"{role} node {node!r} not found")

    def _new_metrics(self) -> PerformanceMetrics:
        return PerformanceMetrics(operation=self.operation, start_time=time())

    @contextmanager
    def _search_context(self, metrics: PerformanceMetrics) -> Generator[MemoryManager, None, None]:
        """Context manager for search state."""
        memory = MemoryManager(self.config.max_memory_mb, self.config.memory_check_interval)
        try:
            yield memory
        finally:
            metrics.end_time = time()
            metrics.max_memory_used = memory.peak_memory
