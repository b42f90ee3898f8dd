import logging

import pytest
from pydantic import ValidationError

from aegis.adapters.cost import DefaultCostCalculator
from aegis.config import AppConfig, CostConfig, GraphConfig, ObservabilityConfig, get_config
from aegis.domain.errors import ConfigurationError
from aegis.logging_setup import configure_logging


def test_defaults():
    config = AppConfig()

    assert config.graph.vertices_path.name == "vertices.csv"
    assert config.graph.edges_path.name == "edges.csv"
    assert config.graph.undirected_edges is True
    assert config.cost.risk_weight == 10
    assert config.cost.distance_divisor == 100


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("AEGIS_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("AEGIS_GRAPH_UNDIRECTED_EDGES", "false")
    monkeypatch.setenv("AEGIS_COST_RISK_WEIGHT", "3")

    config = AppConfig()

    assert config.graph.vertices_path == tmp_path / "vertices.csv"
    assert config.graph.undirected_edges is False
    assert config.cost.risk_weight == 3


def test_distance_divisor_must_be_positive():
    with pytest.raises(ValidationError):
        CostConfig(distance_divisor=0)


@pytest.mark.parametrize(
    "risk, distance, expected",
    [(5, 1000, 60), (3, 2000, 50), (0, 99, 0), (1, 250, 12)],
)
def test_default_cost_formula(risk, distance, expected):
    assert DefaultCostCalculator(CostConfig()).calculate(risk, distance) == expected


def test_configure_logging_applies_level():
    root = logging.getLogger()
    previous = root.level
    try:
        level = configure_logging(ObservabilityConfig(level="debug"))
        assert level == logging.DEBUG
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError) as exc_info:
        configure_logging(ObservabilityConfig(level="LOUD"))

    assert exc_info.value.setting_name == "AEGIS_LOG_LEVEL"


def test_graph_config_paths_follow_data_dir(tmp_path):
    config = GraphConfig(data_dir=tmp_path, edges_file="routes.csv")

    assert config.edges_path == tmp_path / "routes.csv"
