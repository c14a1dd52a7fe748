"""Custom exception types used across :mod:`minpath`."""

from __future__ import annotations

from typing import Hashable


class MinpathError(Exception):
    """Base class for all package-specific errors."""


class InputError(MinpathError, ValueError):
    """Raised for invalid user input such as malformed edges."""


class GraphFormatError(InputError):
    """Raised when graph data cannot be parsed or carries an invalid weight."""


class ConfigError(MinpathError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(MinpathError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


class UnreachableDestination(MinpathError, LookupError):
    """Raised when no path exists from ``source`` to ``destination``.

    A destination that never appears in the graph is reported the same way.

    Attributes:
        source: Node the search started from.
        destination: Node that was never assigned a cost.
    """

    def __init__(self, source: Hashable, destination: Hashable) -> None:
        self.source = source
        self.destination = destination
        super().__init__(f"Could not find a path from {source!r} to {destination!r}.")


__all__ = [
    "MinpathError",
    "InputError",
    "GraphFormatError",
    "ConfigError",
    "AlgorithmError",
    "UnreachableDestination",
]
