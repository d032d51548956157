"""
Validation package for waypoint.

This package provides schema validation and loading of graph payloads handed
to the core by external loaders.
"""

from .base import ValidationResult
from .schema import GRAPH_PAYLOAD_SCHEMA, load_graph, load_graph_json, validate_graph_payload

__all__ = [
    "ValidationResult",
    "GRAPH_PAYLOAD_SCHEMA",
    "load_graph",
    "load_graph_json",
    "validate_graph_payload",
]
