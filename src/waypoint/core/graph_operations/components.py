"""Graph component analysis functionality."""

from typing import Dict, List, Set

from ..graph import Graph
from ..structures import UnionFind
from ..types import NodeId


class ComponentAnalysis:
    """
    Analyzes connected components in a graph.

    Components are computed with a union-find pass over every edge, so the
    analysis shares its notion of connectivity with Kruskal's algorithm.
    Components are reported in the order of their first node.
    """

    def __init__(self, graph: Graph):
        """Initialize component analyzer with a graph."""
        self.graph = graph
        self._sets = UnionFind(graph)
        self._components: Dict[NodeId, List[NodeId]] = {}
        self._analyze_components()

    def _analyze_components(self) -> None:
        """Merge the endpoints of every edge, then group nodes by representative."""
        for edge in self.graph.edges():
            self._sets.union(edge.source, edge.target)

        for node in self.graph:
            self._components.setdefault(self._sets.find(node), []).append(node)

    def get_components(self) -> List[Set[NodeId]]:
        """Get list of all components (sets of node IDs)."""
        return [set(members) for members in self._components.values()]

    def get_component_count(self) -> int:
        """Get number of connected components."""
        return self._sets.set_count

    def get_isolated_nodes(self) -> Set[NodeId]:
        """Get set of isolated nodes (degree 0 or only self-loops)."""
        return {
            node
            for node in self.graph
            if all(neighbor == node for neighbor, _ in self.graph.neighbors(node))
        }

    def are_connected(self, node1: NodeId, node2: NodeId) -> bool:
        """Check if two nodes are in the same component."""
        if node1 not in self._sets or node2 not in self._sets:
            return False
        return self._sets.connected(node1, node2)

    def get_largest_component(self) -> Set[NodeId]:
        """Get the largest connected component (the earliest one on ties)."""
        if not self._components:
            return set()
        return set(max(self._components.values(), key=len))
