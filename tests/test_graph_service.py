from dataclasses import dataclass, field
from typing import List, Tuple

import pytest

from aegis.adapters.cost import DefaultCostCalculator
from aegis.adapters.repository import InMemoryEdgeRepository, InMemoryVertexRepository
from aegis.config import CostConfig
from aegis.domain.errors import DuplicateVertexError, InvalidWeightError, VertexNotFoundError
from aegis.domain.models import (
    CriticalPoint,
    CriticalPointsResponse,
    EdgeRecord,
    RouteResponse,
    RouteStep,
    VertexRecord,
)
from aegis.services import GraphService


@dataclass
class RecordingCostCalculator:
    """Returns a fixed cost and records every call."""

    cost: int = 60
    calls: List[Tuple[int, int]] = field(default_factory=list)

    def calculate(self, risk: int, distance: int) -> int:
        self.calls.append((risk, distance))
        return self.cost


VERTICES = InMemoryVertexRepository.of(
    [
        VertexRecord("A", "Location A"),
        VertexRecord("B", "Location B"),
        VertexRecord("C", "Location C"),
    ]
)


def _service(edges, cost_calculator=None, undirected=True, vertices=VERTICES):
    return GraphService(
        vertex_repository=InMemoryVertexRepository(records=vertices.records),
        edge_repository=InMemoryEdgeRepository.of(edges),
        cost_calculator=cost_calculator or RecordingCostCalculator(),
        undirected=undirected,
    )


def test_initialize_graph_loads_vertices_and_edges():
    calculator = RecordingCostCalculator()
    service = _service(
        [EdgeRecord("A", "B", 5, 1000), EdgeRecord("B", "C", 3, 2000)],
        cost_calculator=calculator,
    )

    graph = service.initialize_graph()

    assert graph.vertex_count == 3
    assert graph.edge_count == 4
    assert service.vertex_repository.calls == 1
    assert service.edge_repository.calls == 1
    assert calculator.calls == [(5, 1000), (3, 2000)]


def test_directed_mode_inserts_one_edge_per_record():
    service = _service([EdgeRecord("A", "B", 5, 1000)], undirected=False)

    graph = service.initialize_graph()

    assert graph.edge_count == 1
    assert graph.find_vertex("B").edges.is_empty()


def test_cost_calculator_output_becomes_edge_weight():
    service = _service(
        [EdgeRecord("A", "B", 5, 1000)],
        cost_calculator=DefaultCostCalculator(CostConfig()),
    )

    edge = service.get_graph().find_vertex("A").edges.get(0)

    assert edge.cost == 60


def test_get_graph_loads_once():
    service = _service([EdgeRecord("A", "B", 1, 0)])

    assert service.get_graph() is service.get_graph()
    assert service.vertex_repository.calls == 1


def test_safest_route_response():
    calculator = DefaultCostCalculator(CostConfig(risk_weight=1, distance_divisor=1000))
    service = _service(
        [
            EdgeRecord("A", "B", 1, 0),
            EdgeRecord("B", "C", 1, 0),
            EdgeRecord("A", "C", 5, 0),
        ],
        cost_calculator=calculator,
    )

    response = service.safest_route("A", "C")

    assert response == RouteResponse(
        total_cost=2,
        route=(
            RouteStep(name="Location A", id="A"),
            RouteStep(name="Location B", id="B"),
            RouteStep(name="Location C", id="C"),
        ),
    )
    assert response.num_stops == 3


def test_safest_route_without_path_is_empty_response():
    service = _service([EdgeRecord("A", "B", 1, 0)])

    response = service.safest_route("A", "C")

    assert response.is_empty
    assert response.total_cost == 0


def test_safest_route_unknown_vertex_propagates():
    service = _service([])

    with pytest.raises(VertexNotFoundError):
        service.safest_route("A", "Z")


def test_critical_points_response():
    service = _service([EdgeRecord("A", "B", 1, 0), EdgeRecord("B", "C", 1, 0)])

    assert service.critical_points() == CriticalPointsResponse(
        critical_points_found=1,
        points=(CriticalPoint(name="Location B", id="B"),),
    )


def test_construction_errors_propagate():
    duplicated = InMemoryVertexRepository.of([VertexRecord("A", "x"), VertexRecord("A", "y")])

    with pytest.raises(DuplicateVertexError):
        _service([], vertices=duplicated).initialize_graph()

    with pytest.raises(VertexNotFoundError):
        _service([EdgeRecord("A", "Z", 1, 0)]).initialize_graph()

    negative = RecordingCostCalculator(cost=-1)
    with pytest.raises(InvalidWeightError):
        _service([EdgeRecord("A", "B", 1, 0)], cost_calculator=negative).initialize_graph()


def test_failed_reload_keeps_previous_graph():
    service = _service([EdgeRecord("A", "B", 1, 0)])
    graph = service.get_graph()

    service.edge_repository = InMemoryEdgeRepository.of([EdgeRecord("A", "Z", 1, 0)])
    with pytest.raises(VertexNotFoundError):
        service.initialize_graph()

    assert service.get_graph() is graph
