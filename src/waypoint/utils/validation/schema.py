"""
Schema validation and loading of graph payloads.

A graph reaches the core as a JSON-compatible payload produced by whatever
loader reads the raw graph file:

    {
        "nodes": ["A", "B", "C"],
        "edges": [
            {"source": "A", "target": "B", "weight": 1.5},
            {"source": "B", "target": "C", "weight": "2"}
        ]
    }

The payload structure is checked against GRAPH_PAYLOAD_SCHEMA with
jsonschema. Weights may be numbers or numeric strings, since graph file
formats usually store attribute values as text. The schema only checks the
shape of a weight; its range is checked by validate_weight, so a negative or
non-finite weight fails with InvalidEdgeError whether it arrives through a
payload or directly through Graph. Extra keys (coordinates, labels) are
allowed and ignored by the core.
"""

import json
import logging
from typing import Any, Dict, List, Mapping

from jsonschema import Draft7Validator
from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate
from jsonschema import validators

from ...core.exceptions import InvalidEdgeError, ValidationError
from ...core.graph import Graph
from ...core.models import WeightedEdge, validate_weight
from .base import ValidationResult

logger = logging.getLogger(__name__)


def _is_strict_integer(checker: Any, instance: Any) -> bool:
    # Draft 7 treats 1.0 as an integer, node identifiers must be real ints
    return isinstance(instance, int) and not isinstance(instance, bool)


GraphPayloadValidator = validators.extend(
    Draft7Validator,
    type_checker=Draft7Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)

_NODE_ID_SCHEMA: Dict[str, Any] = {
    "oneOf": [
        {"type": "string", "minLength": 1, "pattern": r"\S"},
        {"type": "integer"},
    ]
}

GRAPH_PAYLOAD_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "nodes": {"type": "array", "items": _NODE_ID_SCHEMA},
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "source": _NODE_ID_SCHEMA,
                    "target": _NODE_ID_SCHEMA,
                    "weight": {
                        "oneOf": [
                            {"type": "number"},
                            {
                                "type": "string",
                                "pattern": r"^\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?\s*$",
                            },
                        ]
                    },
                },
                "required": ["source", "target", "weight"],
            },
        },
    },
    "required": ["nodes"],
}


def _format_error(error: JsonSchemaError) -> str:
    location = "/".join(str(part) for part in error.absolute_path) or "<root>"
    return f"{location}: {error.message}"


def validate_graph_payload(payload: Any) -> ValidationResult:
    """
    Validate a graph payload without raising.

    Checks the payload against GRAPH_PAYLOAD_SCHEMA, then checks that every
    edge weight is in range and every edge endpoint is a declared node.
    Isolated nodes are reported as warnings.

    Args:
        payload: Decoded JSON payload

    Returns:
        ValidationResult listing every problem found
    """
    validator = GraphPayloadValidator(GRAPH_PAYLOAD_SCHEMA)
    errors = [
        _format_error(error)
        for error in sorted(validator.iter_errors(payload), key=lambda e: list(e.absolute_path))
    ]
    warnings: List[str] = []

    if errors:
        return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

    nodes = set(payload["nodes"])
    connected = set()
    edges = payload.get("edges", [])
    for index, edge in enumerate(edges):
        try:
            validate_weight(float(edge["weight"]))
        except InvalidEdgeError as e:
            errors.append(f"edges/{index}: {e.args[0]}")
        for role in ("source", "target"):
            if edge[role] not in nodes:
                errors.append(f"edges/{index}: {role} {edge[role]!r} is not a declared node")
        connected.update((edge["source"], edge["target"]))

    isolated = nodes - connected
    if isolated:
        warnings.append(f"{len(isolated)} nodes have no incident edge")

    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        context={"node_count": len(nodes), "edge_count": len(edges)},
    )


def load_graph(payload: Mapping[str, Any], prune_isolated: bool = True) -> Graph:
    """
    Build a Graph from a validated payload.

    Args:
        payload: Decoded JSON payload
        prune_isolated: Drop nodes without any incident edge, as they play
            no part in shortest paths or spanning trees

    Returns:
        Graph built from the payload

    Raises:
        ValidationError: If the payload does not match the schema
        InvalidEdgeError: If an edge references an undeclared node or has a
            negative or non-finite weight
    """
    try:
        json_validate(instance=payload, schema=GRAPH_PAYLOAD_SCHEMA, cls=GraphPayloadValidator)
    except JsonSchemaError as e:
        raise ValidationError(f"Graph payload does not match schema: {_format_error(e)}")

    edges = [
        WeightedEdge(edge["source"], edge["target"], float(edge["weight"]))
        for edge in payload.get("edges", [])
    ]
    graph = Graph(payload["nodes"], edges)
    if prune_isolated:
        graph = graph.without_isolated_nodes()

    logger.info(f"Loaded graph with {len(graph)} nodes and {graph.edge_count} edges")
    return graph


def load_graph_json(text: str, prune_isolated: bool = True) -> Graph:
    """Decode a JSON document and build a Graph from it."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {str(e)}")
    return load_graph(payload, prune_isolated=prune_isolated)
