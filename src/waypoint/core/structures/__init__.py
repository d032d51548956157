"""Supporting data structures for the graph algorithms."""

from .priority_queue import DecreaseKeyQueue, QueueEntry
from .union_find import UnionFind

__all__ = [
    "DecreaseKeyQueue",
    "QueueEntry",
    "UnionFind",
]
