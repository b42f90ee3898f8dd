"""Graph service - Loads the risk graph and answers queries.

The service is the population source and the query caller of the graph
engine: it bulk-loads vertices and edges from repositories, weights each
edge with the injected cost strategy, and turns query results into
immutable response models.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.models import (
    CriticalPoint,
    CriticalPointsResponse,
    RouteResponse,
    RouteStep,
)
from ..graph import Graph
from ..ports.graph import CostCalculatorPort, EdgeRepositoryPort, VertexRepositoryPort


@dataclass
class GraphService:
    """Builds the graph once and serves safest-route and critical-point queries.

    Attributes:
        vertex_repository: Source of locations
        edge_repository: Source of routes
        cost_calculator: Turns route risk and distance into edge weight
        undirected: Insert each route in both directions
    """

    vertex_repository: VertexRepositoryPort
    edge_repository: EdgeRepositoryPort
    cost_calculator: CostCalculatorPort
    undirected: bool = True

    _graph: Optional[Graph] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def initialize_graph(self) -> Graph:
        """Build a new graph from the repositories.

        Vertices are all inserted before any edge. Construction errors
        (duplicate ids, unknown endpoints, negative costs, self-loops)
        propagate unchanged; the previously built graph, if any, is kept.

        Returns:
            The freshly built graph.

        Raises:
            GraphLoadError: If a repository cannot read its source.
            GraphError: If the source data does not form a valid graph.
        """
        self._logger.info("Loading graph", extra={"undirected": self.undirected})
        graph = Graph()

        vertices = self.vertex_repository.find_all()
        for vertex in vertices:
            graph.add_vertex(vertex.id, vertex.name)
        self._logger.debug("Vertices added", extra={"vertices": len(vertices)})

        edges = self.edge_repository.find_all()
        for edge in edges:
            cost = self.cost_calculator.calculate(edge.risk, edge.distance)
            if self.undirected:
                graph.add_undirected_edge(edge.origin_id, edge.dest_id, cost)
            else:
                graph.add_directed_edge(edge.origin_id, edge.dest_id, cost)
        self._logger.debug("Edges added", extra={"edges": len(edges)})

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"vertices": graph.vertex_count, "edges": graph.edge_count},
        )
        return graph

    def get_graph(self) -> Graph:
        """Return the loaded graph, building it on first use."""
        if self._graph is None:
            return self.initialize_graph()
        return self._graph

    def safest_route(self, origin_id: str, dest_id: str) -> RouteResponse:
        """Find the lowest-risk route between two locations.

        Returns:
            RouteResponse with the stops and total cost. When the
            destination is unreachable the route is empty and the cost 0.

        Raises:
            VertexNotFoundError: If either id is unknown.
        """
        route = self.get_graph().find_safest_route(origin_id, dest_id)

        if route.is_empty:
            self._logger.info(
                "No route found",
                extra={"origin": origin_id, "destination": dest_id},
            )
            return RouteResponse(total_cost=0)

        steps = tuple(RouteStep(name=v.name, id=v.id) for v in route.path)
        self._logger.info(
            "Route found",
            extra={
                "origin": origin_id,
                "destination": dest_id,
                "stops": len(steps),
                "total_cost": route.total_risk,
            },
        )
        return RouteResponse(total_cost=route.total_risk or 0, route=steps)

    def critical_points(self) -> CriticalPointsResponse:
        """List the locations whose removal disconnects the network."""
        points = tuple(
            CriticalPoint(name=v.name, id=v.id)
            for v in self.get_graph().find_critical_points()
        )
        self._logger.info("Critical points found", extra={"count": len(points)})
        return CriticalPointsResponse(critical_points_found=len(points), points=points)
