"""
Union-Find (disjoint set) structure with path compression and union by rank.

Elements must be registered with ``make_set`` before use; any other operation
on an unregistered element raises UnknownNodeError.

Example:
    >>> uf = UnionFind(["A", "B", "C"])
    >>> uf.union("A", "B")
    True
    >>> uf.union("B", "A")
    False
    >>> uf.connected("A", "C")
    False
"""

from typing import Dict, Iterable

from ..exceptions import UnknownNodeError
from ..types import NodeId


class UnionFind:
    """
    Disjoint-set forest.

    Attributes:
        _parent (Dict[NodeId, NodeId]): Parent link of every registered node
        _rank (Dict[NodeId, int]): Upper bound on the height of each root's tree
        _set_count (int): Number of disjoint sets
    """

    def __init__(self, nodes: Iterable[NodeId] = ()) -> None:
        self._parent: Dict[NodeId, NodeId] = {}
        self._rank: Dict[NodeId, int] = {}
        self._set_count = 0
        for node in nodes:
            self.make_set(node)

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, node: object) -> bool:
        return node in self._parent

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently tracked."""
        return self._set_count

    def make_set(self, node: NodeId) -> None:
        """Register ``node`` as its own root with rank 0."""
        if node in self._parent:
            return
        self._parent[node] = node
        self._rank[node] = 0
        self._set_count += 1

    def find(self, node: NodeId) -> NodeId:
        """
        Find the representative of the set containing ``node``.

        Every node visited on the way up is re-pointed at the root.

        Raises:
            UnknownNodeError: If ``node`` was never registered
        """
        if node not in self._parent:
            raise UnknownNodeError(f"Node {node!r} was never added to the union-find")

        root = node
        while self._parent[root] != root:
            root = self._parent[root]

        current = node
        while self._parent[current] != root:
            next_node = self._parent[current]
            self._parent[current] = root
            current = next_node

        return root

    def union(self, a: NodeId, b: NodeId) -> bool:
        """
        Merge the sets containing ``a`` and ``b``.

        The lower-rank root is attached under the higher-rank one. On a tie
        the root of ``b`` goes under the root of ``a`` and ``a``'s root rank
        grows by one.

        Returns:
            False if both were already in the same set, True otherwise
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        rank_a = self._rank[root_a]
        rank_b = self._rank[root_b]
        if rank_a < rank_b:
            self._parent[root_a] = root_b
        elif rank_a > rank_b:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] += 1

        self._set_count -= 1
        return True

    def connected(self, a: NodeId, b: NodeId) -> bool:
        """Check whether two nodes share a representative."""
        return self.find(a) == self.find(b)

    def rank_of(self, node: NodeId) -> int:
        if node not in self._rank:
            raise UnknownNodeError(f"Node {node!r} was never added to the union-find")
        return self._rank[node]
