"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .graph import CostCalculatorPort, EdgeRepositoryPort, VertexRepositoryPort

__all__ = [
    "VertexRepositoryPort",
    "EdgeRepositoryPort",
    "CostCalculatorPort",
]
