"""
Core domain models package for the waypoint graph core.

This package provides the edge model and the validation helpers shared by
graph construction and payload loading.
"""

from .base import validate_node_id, validate_weight
from .edge import WeightedEdge

__all__ = [
    # Base utilities
    "validate_node_id",
    "validate_weight",
    # Edge models
    "WeightedEdge",
]
