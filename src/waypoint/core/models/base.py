"""
Common validation functions for the core models.

These helpers are shared by the edge model, the graph constructor and the
payload loader so that node identifiers and weights are checked the same way
everywhere.
"""

import math
from typing import Any

from ..exceptions import InvalidEdgeError
from ..types import NodeId


def validate_node_id(node: Any) -> NodeId:
    """Validate that a node identifier is a non-empty string or an integer."""
    # bool is an int subclass but never a meaningful identifier
    if isinstance(node, bool) or not isinstance(node, (str, int)):
        raise TypeError(f"node identifier must be a str or int, got {type(node).__name__}")
    if isinstance(node, str) and not node.strip():
        raise ValueError("node identifier must be a non-empty string")
    return node


def validate_weight(weight: Any) -> float:
    """Validate that an edge weight is a finite, non-negative number."""
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise InvalidEdgeError(f"edge weight must be numeric, got {type(weight).__name__}")
    if math.isnan(weight) or math.isinf(weight):
        raise InvalidEdgeError(f"edge weight must be a finite number, got {weight}")
    if weight < 0:
        raise InvalidEdgeError(f"edge weight must be non-negative, got {weight}")
    return float(weight)
