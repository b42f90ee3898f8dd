"""Graph ports - Abstractions for graph source data and edge costs.

These protocols define the contracts the graph service depends on:
where vertices and edges come from, and how an edge's risk and distance
are turned into the weight the graph engine searches over.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import EdgeRecord, VertexRecord


class VertexRepositoryPort(Protocol):
    """Port for loading locations.

    Implementations: adapters/repository/csv_repository.py,
    adapters/repository/memory_repository.py
    """

    def find_all(self) -> Sequence[VertexRecord]:
        """Return every location, in source order.

        Raises:
            GraphLoadError: If the source cannot be read.
        """
        ...


class EdgeRepositoryPort(Protocol):
    """Port for loading routes between locations.

    Implementations: adapters/repository/csv_repository.py,
    adapters/repository/memory_repository.py
    """

    def find_all(self) -> Sequence[EdgeRecord]:
        """Return every route, in source order.

        Raises:
            GraphLoadError: If the source cannot be read.
        """
        ...


class CostCalculatorPort(Protocol):
    """Strategy turning route attributes into a graph weight.

    Implementation: adapters/cost/default_calculator.py

    The graph engine rejects negative weights, so implementations
    should return a non-negative integer for valid input.
    """

    def calculate(self, risk: int, distance: int) -> int:
        """Compute the weight of a route.

        Args:
            risk: Risk level of the route.
            distance: Length of the route.

        Returns:
            The edge weight.
        """
        ...
