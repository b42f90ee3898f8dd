"""Cost adapters - Implementations of CostCalculatorPort."""

from .default_calculator import DefaultCostCalculator

__all__ = ["DefaultCostCalculator"]
