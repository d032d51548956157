"""Type definitions shared by the graph core."""

import math
from typing import Tuple, Union

# Node identifiers are opaque keys; ``1`` and ``"1"`` are different nodes.
NodeId = Union[str, int]

Weight = float

# Distance/key of a node that has not been reached.
INFINITY: float = math.inf

# Adjacency entry: (neighbor, weight)
Neighbor = Tuple[NodeId, Weight]

# Tree edge as handed to callers: (source, target, weight)
EdgeTuple = Tuple[NodeId, NodeId, Weight]
