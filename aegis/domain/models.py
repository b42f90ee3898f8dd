"""Immutable domain models for the Aegis risk graph.

Records describe graph source data as handed over by repositories;
responses describe query results as handed over to callers. All models
are frozen dataclasses with slots and have no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class VertexRecord:
    """A location as stored in a graph source.

    Attributes:
        id: Unique location identifier (e.g., 'BANK_01')
        name: Human-readable location name
    """

    id: str
    name: str


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """A route between two locations as stored in a graph source.

    The graph weight is not stored; it is derived from ``risk`` and
    ``distance`` by a cost calculator when the graph is built.

    Attributes:
        origin_id: Id of the starting location
        dest_id: Id of the destination location
        risk: Risk level of the route
        distance: Length of the route (source units, e.g. meters)
    """

    origin_id: str
    dest_id: str
    risk: int
    distance: int = 0


@dataclass(frozen=True, slots=True)
class RouteStep:
    """One stop of a computed route."""

    name: str
    id: str


@dataclass(frozen=True, slots=True)
class RouteResponse:
    """Result of a safest-route query.

    Attributes:
        total_cost: Accumulated risk of the route (0 when no route exists)
        route: Ordered stops from origin to destination, inclusive
    """

    total_cost: int
    route: tuple[RouteStep, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.route) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.route)


@dataclass(frozen=True, slots=True)
class CriticalPoint:
    """A location whose removal disconnects the network."""

    name: str
    id: str


@dataclass(frozen=True, slots=True)
class CriticalPointsResponse:
    """Result of an articulation-point query.

    Attributes:
        critical_points_found: Number of critical locations
        points: Critical locations in graph insertion order
    """

    critical_points_found: int
    points: tuple[CriticalPoint, ...] = field(default_factory=tuple)
