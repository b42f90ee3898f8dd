"""Root logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError


def configure_logging(config: Optional[ObservabilityConfig] = None) -> int:
    """Configure the root logger from configuration.

    Only the first call installs a handler (``logging.basicConfig``
    semantics); later calls still update the level.

    Args:
        config: Logging configuration. Defaults to the application one.

    Returns:
        The numeric level that was applied.

    Raises:
        ConfigurationError: If the configured level is unknown.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="AEGIS_LOG_LEVEL",
            value=config.level,
        )

    logging.basicConfig(level=level, format=config.format)
    logging.getLogger().setLevel(level)
    return level
