"""CSV repository adapters.

Load graph source data from two CSV files with a header row:

- vertices: ``vertex_id,name``
- edges: ``origin_id,dest_id,risk[,distance]``

Rows with a blank id are skipped. A missing ``distance`` column or
value counts as 0. Loaded records are cached until ``clear_cache``.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError
from ...domain.models import EdgeRecord, VertexRecord


@dataclass
class CSVVertexRepository:
    """Vertex repository that loads from a CSV file.

    This adapter implements VertexRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    _vertices: Optional[List[VertexRecord]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def path(self) -> Path:
        return self.config.vertices_path

    def find_all(self) -> Sequence[VertexRecord]:
        """Load every location from the vertices file.

        Raises:
            GraphLoadError: If the file cannot be read, is not valid UTF-8
                CSV, or lacks a column.
        """
        if self._vertices is not None:
            return self._vertices

        self._logger.debug("Loading vertices", extra={"path": str(self.path)})

        vertices: List[VertexRecord] = []
        try:
            with self.path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    vertex_id = (row["vertex_id"] or "").strip()
                    if not vertex_id:
                        continue
                    name = (row.get("name") or "").strip()
                    vertices.append(VertexRecord(id=vertex_id, name=name or vertex_id))
        except (OSError, KeyError, ValueError, csv.Error) as e:
            raise GraphLoadError(
                f"Failed to load vertices: {e}",
                file_path=str(self.path),
                cause=e,
            )

        self._vertices = vertices
        self._logger.info("Vertices loaded", extra={"vertices": len(vertices)})
        return vertices

    def clear_cache(self) -> None:
        """Clear cached vertex records."""
        self._vertices = None
        self._logger.debug("Vertex cache cleared")


@dataclass
class CSVEdgeRepository:
    """Edge repository that loads from a CSV file.

    This adapter implements EdgeRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    _edges: Optional[List[EdgeRecord]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def path(self) -> Path:
        return self.config.edges_path

    def find_all(self) -> Sequence[EdgeRecord]:
        """Load every route from the edges file.

        Raises:
            GraphLoadError: If the file cannot be read, lacks a column, or
                holds a non-integer risk or distance.
        """
        if self._edges is not None:
            return self._edges

        self._logger.debug("Loading edges", extra={"path": str(self.path)})

        edges: List[EdgeRecord] = []
        try:
            with self.path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    origin_id = (row["origin_id"] or "").strip()
                    dest_id = (row["dest_id"] or "").strip()
                    if not origin_id or not dest_id:
                        continue

                    risk = self._parse_int(row["risk"], "risk", reader.line_num)
                    distance = self._parse_int(row.get("distance"), "distance", reader.line_num)
                    edges.append(
                        EdgeRecord(
                            origin_id=origin_id,
                            dest_id=dest_id,
                            risk=risk,
                            distance=distance,
                        )
                    )
        except (OSError, KeyError, ValueError, csv.Error) as e:
            raise GraphLoadError(
                f"Failed to load edges: {e}",
                file_path=str(self.path),
                cause=e,
            )

        self._edges = edges
        self._logger.info("Edges loaded", extra={"edges": len(edges)})
        return edges

    @staticmethod
    def _parse_int(raw: Optional[str], column: str, line_number: int) -> int:
        value = (raw or "").strip()
        if not value:
            if column == "distance":
                return 0
            raise ValueError(f"line {line_number}: missing {column}")
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"line {line_number}: invalid {column} {value!r}") from None

    def clear_cache(self) -> None:
        """Clear cached edge records."""
        self._edges = None
        self._logger.debug("Edge cache cleared")
