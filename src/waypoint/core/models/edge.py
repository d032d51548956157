"""
Edge model for the waypoint graph core.

An edge is an unordered pair of node identifiers plus a non-negative weight.
The orientation of ``source`` and ``target`` only records the order in which
the edge was given or discovered; the graph treats both directions alike.
"""

from dataclasses import dataclass
from typing import FrozenSet

from ..types import EdgeTuple, NodeId
from .base import validate_node_id, validate_weight


@dataclass(frozen=True)
class WeightedEdge:
    """
    Undirected weighted edge.

    Attributes:
        source (NodeId): First endpoint, as given or discovered
        target (NodeId): Second endpoint
        weight (float): Non-negative, finite edge weight

    Raises:
        InvalidEdgeError: If the weight is negative, NaN, infinite or not numeric
        TypeError: If an endpoint is not a valid node identifier
    """

    source: NodeId
    target: NodeId
    weight: float

    def __post_init__(self):
        """Validate endpoints and normalize the weight to float."""
        validate_node_id(self.source)
        validate_node_id(self.target)
        object.__setattr__(self, "weight", validate_weight(self.weight))

    @property
    def endpoints(self) -> FrozenSet[NodeId]:
        """Unordered endpoints of the edge."""
        return frozenset((self.source, self.target))

    @property
    def key(self) -> FrozenSet[NodeId]:
        """Canonical key used to collapse both orientations of the same edge."""
        return self.endpoints

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    def reversed(self) -> "WeightedEdge":
        """Return the same edge in the opposite orientation."""
        return WeightedEdge(self.target, self.source, self.weight)

    def as_tuple(self) -> EdgeTuple:
        return (self.source, self.target, self.weight)
