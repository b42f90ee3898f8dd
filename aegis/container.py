"""Dependency injection container for the risk-graph application.

Maps each port (CSV or in-memory repositories, the cost strategy) and the
``GraphService`` to a factory. Factories run on first ``resolve``; by
default the instance is then cached. The registry is guarded by a
re-entrant lock, so a factory may itself call ``resolve``.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(GraphService)

        # Testing
        container = Container()
        container.register(VertexRepositoryPort, lambda: InMemoryVertexRepository())
        repository = container.resolve(VertexRepositoryPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Configures logging, then registers the CSV repositories, the
        default cost calculator and the graph service.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.cost import DefaultCostCalculator
        from .adapters.repository import CSVEdgeRepository, CSVVertexRepository
        from .logging_setup import configure_logging
        from .ports.graph import CostCalculatorPort, EdgeRepositoryPort, VertexRepositoryPort
        from .services import GraphService

        config = config or get_config()
        configure_logging(config.observability)
        container = cls(config=config)

        # Graph sources
        container.register(
            VertexRepositoryPort,
            lambda: CSVVertexRepository(config.graph),
        )
        container.register(
            EdgeRepositoryPort,
            lambda: CSVEdgeRepository(config.graph),
        )

        # Cost strategy
        container.register(
            CostCalculatorPort,
            lambda: DefaultCostCalculator(config.cost),
        )

        # Main service
        def create_graph_service() -> GraphService:
            return GraphService(
                vertex_repository=container.resolve(VertexRepositoryPort),
                edge_repository=container.resolve(EdgeRepositoryPort),
                cost_calculator=container.resolve(CostCalculatorPort),
                undirected=config.graph.undirected_edges,
            )

        container.register(GraphService, create_graph_service)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container.

    Returns:
        The default Container instance (creates one if needed).
    """
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
