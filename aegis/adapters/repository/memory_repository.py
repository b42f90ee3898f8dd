"""In-memory repository adapters.

Hold records handed over at construction time. Used to build graphs
from data already in memory (and as test doubles for the CSV
repositories).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

from ...domain.models import EdgeRecord, VertexRecord


@dataclass
class InMemoryVertexRepository:
    """Vertex repository backed by a tuple of records.

    This adapter implements VertexRepositoryPort and counts calls to
    ``find_all`` so callers can check how often the source was read.
    """

    records: Tuple[VertexRecord, ...] = ()
    calls: int = field(default=0, init=False)

    @classmethod
    def of(cls, records: Iterable[VertexRecord]) -> InMemoryVertexRepository:
        return cls(records=tuple(records))

    def find_all(self) -> Sequence[VertexRecord]:
        self.calls += 1
        return self.records


@dataclass
class InMemoryEdgeRepository:
    """Edge repository backed by a tuple of records.

    This adapter implements EdgeRepositoryPort and counts calls to
    ``find_all``.
    """

    records: Tuple[EdgeRecord, ...] = ()
    calls: int = field(default=0, init=False)

    @classmethod
    def of(cls, records: Iterable[EdgeRecord]) -> InMemoryEdgeRepository:
        return cls(records=tuple(records))

    def find_all(self) -> Sequence[EdgeRecord]:
        self.calls += 1
        return self.records
