"""
Waypoint - shortest paths and minimum spanning trees over weighted graphs

This package provides:

- A read-only weighted undirected graph built from external input
- A decrease-key binary heap and a union-find structure
- Dijkstra's shortest path algorithm
- Prim's and Kruskal's minimum spanning tree algorithms
- Lazy algorithm event streams for step-by-step visualization
- Schema validation and loading of graph payloads
"""

__version__ = "0.1.0"
__author__ = "Waypoint Team"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Waypoint requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.algorithms import (
    DijkstraSearch,
    GraphAlgorithms,
    KruskalMST,
    PrimMST,
    SearchConfig,
    ShortestPaths,
    SpanningTree,
)
from .core.events import AlgorithmEvent, AlgorithmEventType
from .core.graph import Graph
from .core.models import WeightedEdge
from .utils.validation import load_graph

__all__ = [
    "Graph",
    "WeightedEdge",
    "GraphAlgorithms",
    "DijkstraSearch",
    "PrimMST",
    "KruskalMST",
    "SearchConfig",
    "ShortestPaths",
    "SpanningTree",
    "AlgorithmEvent",
    "AlgorithmEventType",
    "load_graph",
]
