"""
Custom exceptions for the waypoint graph core.

This module defines the hierarchy of exceptions raised by graph construction,
the supporting data structures and the graph algorithms. Each exception type
corresponds to a specific category of error so callers can decide whether to
abort a whole computation or report a single path or edge as absent.

Unreachable nodes and disconnected components are not errors: they are
reported through the algorithm results.
"""


class ValidationError(Exception):
    """
    Raised when input data fails validation.

    Examples:
        * Graph payload that does not match the expected schema
        * Edge weights that are negative or not finite
        * Edges referencing nodes outside the node set
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when an operation on the graph structure cannot be carried out.

    Examples:
        * Weight lookup for an edge that does not exist
        * Unsupported algorithm selection
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not present in the graph
        * Node never registered with a union-find structure
    """


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current state.

    Examples:
        * Extracting from an empty priority queue
        * Reading an algorithm result before the algorithm has run
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Negative memory limit
        * Non-positive memory check interval
    """


class InvalidEdgeError(ValidationError):
    """
    Raised at graph construction time for a malformed edge.

    An edge is malformed when its weight is negative, NaN, infinite or not a
    number, or when one of its endpoints is absent from the node set.
    """


class UnknownNodeError(ResourceNotFoundError):
    """
    Raised when a node identifier was never registered.

    Covers graph lookups (neighbors, weights, algorithm sources and targets),
    union-find operations on nodes never passed to ``make_set`` and priority
    lookups for nodes that are not queued.
    """


class EmptyQueueError(InvalidOperationError):
    """
    Raised when extracting from an empty priority queue.

    Callers must check ``is_empty()`` before extracting.
    """
