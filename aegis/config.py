"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
graph data location, the cost formula used to weight edges, and
logging.

Configuration can be overridden via environment variables:
- AEGIS_GRAPH_DATA_DIR=/path/to/data
- AEGIS_GRAPH_UNDIRECTED_EDGES=false
- AEGIS_COST_RISK_WEIGHT=20
- AEGIS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with AEGIS_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="AEGIS_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    vertices_file: str = "vertices.csv"
    edges_file: str = "edges.csv"
    # Each edge row becomes a two-way route; required for critical points
    undirected_edges: bool = True

    @property
    def vertices_path(self) -> Path:
        """Full path to vertices CSV file."""
        return self.data_dir / self.vertices_file

    @property
    def edges_path(self) -> Path:
        """Full path to edges CSV file."""
        return self.data_dir / self.edges_file


class CostConfig(BaseSettings):
    """Edge cost formula configuration.

    cost = risk * risk_weight + distance // distance_divisor

    Environment variables prefixed with AEGIS_COST_.
    """

    model_config = SettingsConfigDict(env_prefix="AEGIS_COST_")

    risk_weight: int = Field(default=10, ge=0)
    distance_divisor: int = Field(default=100, gt=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with AEGIS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="AEGIS_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.edges_path)
        print(config.cost.risk_weight)

    Environment variables prefixed with AEGIS_.
    """

    model_config = SettingsConfigDict(env_prefix="AEGIS_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    cost: CostConfig = Field(default_factory=CostConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
