# wp_nav/domain/errors.py
"""Exceptions raised by graph construction and search."""


class PathfindingError(Exception):
    """Base exception for graph and search operations."""


class NodeNotFoundError(PathfindingError, KeyError):
    """Raised when an identity does not resolve to a node in the graph."""

    def __init__(self, identity):
        super().__init__(identity)
        self.identity = identity

    def __str__(self) -> str:
        return f"no node with identity {self.identity!r}"


class DanglingEdgeError(PathfindingError):
    """Raised in strict mode when an edge references an unknown identity."""


class SearchDepthExceededError(PathfindingError):
    """Raised when recursive depth-first search goes deeper than its bound."""


class PathReconstructionError(PathfindingError):
    """Raised when a breadth-first walk-back finds no predecessor one level up."""


class UnknownAlgorithmError(PathfindingError, ValueError):
    """Raised when no planner is registered for an algorithm kind."""
