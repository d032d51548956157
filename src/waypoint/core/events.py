"""
Algorithm event stream.

Every algorithm in the package can be driven step by step through a lazy
iterator of discrete events instead of running to completion in one call.
A presentation layer that wants to animate a search consumes the events at
its own pace; the algorithm itself never pauses.

Example:
    >>> for event in DijkstraSearch(graph, "A").events():
    ...     if event.type is AlgorithmEventType.NODE_FINALIZED:
    ...         highlight(event.node)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .models import WeightedEdge
from .types import NodeId


class AlgorithmEventType(Enum):
    """Steps that an algorithm reports while it runs."""

    NODE_FINALIZED = auto()
    EDGE_RELAXED = auto()
    TREE_EDGE_ADDED = auto()
    EDGE_REJECTED = auto()
    SEARCH_COMPLETED = auto()


@dataclass(frozen=True)
class AlgorithmEvent:
    """
    A single algorithm step.

    Attributes:
        type (AlgorithmEventType): Kind of step
        node (Optional[NodeId]): Node the step is about, if any
        edge (Optional[WeightedEdge]): Edge the step is about, if any
        value (Optional[float]): Distance or key established by the step
    """

    type: AlgorithmEventType
    node: Optional[NodeId] = None
    edge: Optional[WeightedEdge] = None
    value: Optional[float] = None
