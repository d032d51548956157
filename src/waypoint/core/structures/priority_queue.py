"""
Binary min-heap priority queue with in-place decrease-key.

The queue keeps at most one live entry per node. A side mapping from node to
heap index is updated on every swap, so lowering the priority of a queued
node costs O(log n) instead of a linear search.

Example:
    >>> pq = DecreaseKeyQueue()
    >>> pq.enqueue("A", 5.0)
    >>> pq.enqueue("B", 3.0)
    >>> pq.enqueue("A", 1.0, parent="B")  # decrease
    >>> pq.extract_min()
    QueueEntry(node='A', priority=1.0, parent='B')
"""

from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional

from ..exceptions import EmptyQueueError, UnknownNodeError
from ..types import NodeId


class QueueEntry(NamedTuple):
    """Entry returned by ``extract_min``: (node, priority, parent)."""

    node: NodeId
    priority: float
    parent: Optional[NodeId]


@dataclass
class _HeapSlot:
    """Mutable heap slot so decrease-key can update in place."""

    __slots__ = ("node", "priority", "parent")

    node: NodeId
    priority: float
    parent: Optional[NodeId]


class DecreaseKeyQueue:
    """
    Priority queue with decrease-key and index tracking.

    Priorities are compared with strict ``<`` only. Entries of equal priority
    are never swapped past each other, so the same sequence of operations
    always produces the same extraction order.

    Attributes:
        _heap (List[_HeapSlot]): Binary heap stored level by level
        _indices (Dict[NodeId, int]): Position of each queued node in ``_heap``
    """

    def __init__(self) -> None:
        self._heap: List[_HeapSlot] = []
        self._indices: Dict[NodeId, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, node: object) -> bool:
        return node in self._indices

    def __repr__(self) -> str:
        return f"DecreaseKeyQueue(size={len(self._heap)})"

    def is_empty(self) -> bool:
        """Return True if the queue holds no entries."""
        return not self._heap

    def enqueue(self, node: NodeId, priority: float, parent: Optional[NodeId] = None) -> bool:
        """
        Insert a node or lower its priority.

        A node that is not queued is inserted and sifted toward the root. A
        node that is already queued is only updated when ``priority`` is
        strictly lower than the stored one; its parent is replaced together
        with the priority. Attempts to raise a priority are ignored.

        Args:
            node: Node identifier
            priority: New priority (lower is better)
            parent: Optional predecessor carried with the entry

        Returns:
            True if the queue changed, False for an ignored increase
        """
        index = self._indices.get(node)
        if index is None:
            self._heap.append(_HeapSlot(node, priority, parent))
            index = len(self._heap) - 1
            self._indices[node] = index
            self._sift_up(index)
            return True

        slot = self._heap[index]
        if not priority < slot.priority:
            return False
        slot.priority = priority
        slot.parent = parent
        self._sift_up(index)
        return True

    def extract_min(self) -> QueueEntry:
        """
        Remove and return the entry with the lowest priority.

        Raises:
            EmptyQueueError: If the queue is empty
        """
        if not self._heap:
            raise EmptyQueueError("Cannot extract from an empty priority queue")

        root = self._heap[0]
        last = self._heap.pop()
        del self._indices[root.node]
        if self._heap:
            self._heap[0] = last
            self._indices[last.node] = 0
            self._sift_down(0)
        return QueueEntry(root.node, root.priority, root.parent)

    def peek(self) -> QueueEntry:
        """Return the lowest-priority entry without removing it."""
        if not self._heap:
            raise EmptyQueueError("Cannot peek into an empty priority queue")
        root = self._heap[0]
        return QueueEntry(root.node, root.priority, root.parent)

    def priority_of(self, node: NodeId) -> float:
        """Return the stored priority of a queued node."""
        try:
            return self._heap[self._indices[node]].priority
        except KeyError:
            raise UnknownNodeError(f"Node {node!r} is not queued")

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._indices[heap[i].node] = i
        self._indices[heap[j].node] = j

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index].priority < heap[parent].priority:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and heap[left].priority < heap[smallest].priority:
                smallest = left
            if right < size and heap[right].priority < heap[smallest].priority:
                smallest = right
            if smallest == index:
                break
            self._swap(index, smallest)
            index = smallest
