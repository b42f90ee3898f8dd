"""Per-search scratch state for the graph algorithms.

Each query allocates a fresh context sized to the graph, indexed by
``Vertex.index``. Vertices themselves never hold search state, so a
fully built graph can serve any number of queries, including concurrent
read-only ones, without a reset step.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

UNREACHED = math.inf


@dataclass
class RouteSearchContext:
    """State of one safest-route search.

    Attributes:
        min_risk: Best known cumulative risk per vertex, ``UNREACHED``
            until the vertex is reached
        previous: Index of the predecessor on the best known path, or None
        visited: Whether the vertex has been settled (extracted while fresh)
    """

    min_risk: List[float] = field(default_factory=list)
    previous: List[Optional[int]] = field(default_factory=list)
    visited: List[bool] = field(default_factory=list)

    @classmethod
    def for_size(cls, size: int) -> RouteSearchContext:
        return cls(
            min_risk=[UNREACHED] * size,
            previous=[None] * size,
            visited=[False] * size,
        )


@dataclass
class ArticulationContext:
    """State of one articulation-point pass.

    Attributes:
        visited: Whether the DFS has discovered the vertex
        dfs_order: Discovery time, 0 until discovered
        low_link: Smallest discovery time reachable from the vertex's
            DFS subtree through at most one back-edge
        dfs_parent: Index of the DFS tree parent, None for roots
        is_articulation_point: Whether the vertex is a cut vertex
        counter: Last discovery time handed out
    """

    visited: List[bool] = field(default_factory=list)
    dfs_order: List[int] = field(default_factory=list)
    low_link: List[int] = field(default_factory=list)
    dfs_parent: List[Optional[int]] = field(default_factory=list)
    is_articulation_point: List[bool] = field(default_factory=list)
    counter: int = 0

    @classmethod
    def for_size(cls, size: int) -> ArticulationContext:
        return cls(
            visited=[False] * size,
            dfs_order=[0] * size,
            low_link=[0] * size,
            dfs_parent=[None] * size,
            is_articulation_point=[False] * size,
        )

    def discover(self, index: int) -> None:
        """Mark a vertex visited and stamp its discovery time."""
        self.visited[index] = True
        self.counter += 1
        self.dfs_order[index] = self.low_link[index] = self.counter
