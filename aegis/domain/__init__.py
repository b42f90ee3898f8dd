"""Domain layer - Core records, responses and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    AegisError,
    ConfigurationError,
    DuplicateVertexError,
    EmptyContainerError,
    EmptyQueueError,
    GraphError,
    GraphLoadError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidWeightError,
    SelfLoopNotAllowedError,
    VertexNotFoundError,
)
from .models import (
    CriticalPoint,
    CriticalPointsResponse,
    EdgeRecord,
    RouteResponse,
    RouteStep,
    VertexRecord,
)

__all__ = [
    # Models
    "VertexRecord",
    "EdgeRecord",
    "RouteStep",
    "RouteResponse",
    "CriticalPoint",
    "CriticalPointsResponse",
    # Errors
    "AegisError",
    "GraphError",
    "DuplicateVertexError",
    "VertexNotFoundError",
    "InvalidWeightError",
    "SelfLoopNotAllowedError",
    "InvalidArgumentError",
    "EmptyContainerError",
    "EmptyQueueError",
    "IndexOutOfRangeError",
    "GraphLoadError",
    "ConfigurationError",
]
