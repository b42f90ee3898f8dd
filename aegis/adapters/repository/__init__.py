"""Repository adapters - Implementations of the graph source ports.

Available implementations:
- CSVVertexRepository / CSVEdgeRepository: Load records from CSV files
- InMemoryVertexRepository / InMemoryEdgeRepository: Hold given records
"""

from .csv_repository import CSVEdgeRepository, CSVVertexRepository
from .memory_repository import InMemoryEdgeRepository, InMemoryVertexRepository

__all__ = [
    "CSVVertexRepository",
    "CSVEdgeRepository",
    "InMemoryVertexRepository",
    "InMemoryEdgeRepository",
]
