"""Typed domain errors for the Aegis risk graph.

Every failure of the graph engine and of its work structures is a
distinct error type, so callers (loaders, query handlers) can translate
each one into their own representation. "No route found" is deliberately
absent: an unreachable destination is a normal, empty result.

All errors inherit from AegisError and can optionally wrap a root cause
exception for debugging. Where a builtin exception describes the same
failure (``ValueError``, ``IndexError``, ``LookupError``) it is mixed in,
so generic handlers keep working.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class AegisError(Exception):
    """Base error for the Aegis domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(AegisError):
    """Base error for graph construction and query failures."""


@dataclass
class DuplicateVertexError(GraphError):
    """A vertex with the same id already exists in the graph.

    Attributes:
        vertex_id: The id that was inserted twice
    """

    vertex_id: str = ""


@dataclass
class VertexNotFoundError(GraphError, LookupError):
    """A vertex id does not resolve to any vertex of the graph.

    Attributes:
        vertex_id: The id that could not be resolved
    """

    vertex_id: str = ""


@dataclass
class InvalidWeightError(GraphError, ValueError):
    """An edge was given a negative or non-integer risk weight.

    Attributes:
        cost: The rejected weight
    """

    cost: Any = 0


@dataclass
class SelfLoopNotAllowedError(GraphError, ValueError):
    """An edge would start and end on the same vertex.

    Attributes:
        vertex_id: Id of the vertex on both ends
    """

    vertex_id: str = ""


@dataclass
class InvalidArgumentError(AegisError, ValueError):
    """An absent (None) or empty value was passed where one is required.

    Attributes:
        argument: Name of the offending argument
    """

    argument: str = ""


@dataclass
class EmptyContainerError(AegisError, IndexError):
    """Removal or inspection on an empty list or stack."""


@dataclass
class EmptyQueueError(AegisError, IndexError):
    """Extraction or inspection on an empty priority queue."""


@dataclass
class IndexOutOfRangeError(AegisError, IndexError):
    """Positional access outside ``[0, size)``.

    Attributes:
        index: The requested position
        size: Size of the container at the time of the call
    """

    index: int = 0
    size: int = 0


@dataclass
class GraphLoadError(AegisError):
    """Graph source data could not be read or parsed.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(AegisError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        value: The rejected value, if any
    """

    setting_name: str = ""
    value: Optional[Any] = None
