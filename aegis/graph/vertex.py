"""Vertex and edge records of the risk graph.

A vertex is a location; an edge is a one-way route from the vertex that
stores it to a destination vertex, weighted by risk. Both carry only
permanent data: the scratch state of a search lives in the search
contexts of ``context.py``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..domain.errors import InvalidArgumentError, InvalidWeightError, SelfLoopNotAllowedError
from .linked_list import LinkedList


def check_cost(cost: object) -> None:
    """Raise InvalidWeightError unless ``cost`` is a non-negative int.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(cost, bool) or not isinstance(cost, int):
        raise InvalidWeightError(
            f"Risk weight must be an integer, got {cost!r}",
            cost=cost,
        )
    if cost < 0:
        raise InvalidWeightError(
            f"Risk weight cannot be negative, got {cost}",
            cost=cost,
        )


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed, risk-weighted connection to ``destination``.

    The edge shares the destination vertex with the graph, which owns it.

    Attributes:
        destination: Vertex this edge leads to
        cost: Non-negative risk weight
    """

    destination: Vertex
    cost: int

    def __post_init__(self) -> None:
        check_cost(self.cost)

    def __repr__(self) -> str:
        return f"Edge(to={self.destination.id!r}, cost={self.cost})"


@dataclass(frozen=True, eq=False)
class Vertex:
    """A location of the network with its outgoing edges.

    Vertices are equal when their ids are equal; ``id`` is the hash key.
    The record is frozen so ``id`` and ``index`` cannot drift from the
    graph's lookup tables; only the edge list grows.

    Attributes:
        id: Unique, non-empty identifier
        name: Human-readable name
        index: Stable position of the vertex in its graph, used to key
            per-search state
    """

    id: str
    name: str
    index: int = 0
    _edges: LinkedList[Edge] = field(default_factory=LinkedList, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.id:
            raise InvalidArgumentError(
                "Vertex id cannot be None or empty",
                argument="id",
            )

    @property
    def edges(self) -> LinkedList[Edge]:
        """Outgoing edges in insertion order."""
        return self._edges

    def add_edge(self, destination: Vertex, cost: int) -> Edge:
        """Attach an outgoing edge to ``destination``. O(1).

        Raises:
            InvalidArgumentError: If ``destination`` is None.
            InvalidWeightError: If ``cost`` is negative or not an int.
            SelfLoopNotAllowedError: If ``destination`` is this vertex.
        """
        if destination is None:
            raise InvalidArgumentError(
                "Destination vertex cannot be None",
                argument="destination",
            )
        edge = Edge(destination, cost)
        if destination == self:
            raise SelfLoopNotAllowedError(
                f"Self-loops are not allowed: {self.id}",
                vertex_id=self.id,
            )
        self._edges.append(edge)
        return edge

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Vertex(id={self.id!r}, name={self.name!r}, edges={len(self._edges)})"
