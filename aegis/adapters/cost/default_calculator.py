"""Default edge cost strategy.

Formula: (risk * risk_weight) + (distance // distance_divisor), with
the factors taken from CostConfig (10 and 100 by default).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...config import CostConfig, get_config


@dataclass
class DefaultCostCalculator:
    """Cost calculator weighting risk far above distance.

    This adapter implements CostCalculatorPort.

    Attributes:
        config: Cost formula factors
    """

    config: CostConfig = field(default_factory=lambda: get_config().cost)

    def calculate(self, risk: int, distance: int) -> int:
        return risk * self.config.risk_weight + distance // self.config.distance_divisor
