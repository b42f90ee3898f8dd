"""In-memory risk graph and its two queries.

The graph is built once (vertices first, then edges) and then queried:

- ``find_safest_route`` runs Dijkstra's algorithm to find the path with
  the lowest accumulated risk between two locations;
- ``find_critical_points`` runs a single DFS pass (Tarjan) to find the
  articulation points, i.e. the locations whose removal disconnects the
  network.

Both queries keep their scratch state in a fresh context object, so the
graph is never mutated by a search.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.errors import (
    DuplicateVertexError,
    SelfLoopNotAllowedError,
    VertexNotFoundError,
)
from .context import ArticulationContext, RouteSearchContext
from .linked_list import LinkedList
from .min_heap import MinHeap
from .stack import Stack
from .vertex import Edge, Vertex, check_cost

logger = logging.getLogger(__name__)

# (risk when queued, vertex index)
_QueueEntry = Tuple[float, int]


@dataclass(frozen=True)
class Route:
    """Result of a safest-route search.

    Attributes:
        path: Vertices from origin to destination, inclusive; empty when
            the destination is unreachable
        total_risk: Accumulated risk of ``path``, None when empty
    """

    path: LinkedList[Vertex] = field(default_factory=LinkedList)
    total_risk: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return self.path.is_empty()

    @property
    def num_stops(self) -> int:
        """Return the number of vertices in the route."""
        return self.path.size()


@dataclass
class _DfsFrame:
    vertex: Vertex
    edges: Iterator[Edge]
    child_count: int = 0


class Graph:
    """Weighted directed graph of locations.

    Example:
        graph = Graph()
        graph.add_vertex("A", "Home")
        graph.add_vertex("B", "Work")
        graph.add_undirected_edge("A", "B", 15)
        route = graph.find_safest_route("A", "B")
    """

    def __init__(self) -> None:
        self._vertices: Dict[str, Vertex] = {}
        self._by_index: List[Vertex] = []

    # Construction

    def add_vertex(self, vertex_id: str, name: str) -> Vertex:
        """Add a new location to the graph.

        Raises:
            DuplicateVertexError: If a vertex with the same id exists.
            InvalidArgumentError: If ``vertex_id`` is None or empty.
        """
        if vertex_id in self._vertices:
            raise DuplicateVertexError(
                f"Vertex with ID '{vertex_id}' already exists",
                vertex_id=vertex_id,
            )
        vertex = Vertex(vertex_id, name, index=len(self._by_index))
        self._vertices[vertex_id] = vertex
        self._by_index.append(vertex)
        return vertex

    def find_vertex(self, vertex_id: Optional[str]) -> Optional[Vertex]:
        """Return the vertex with the given id, or None."""
        if vertex_id is None:
            return None
        return self._vertices.get(vertex_id)

    def add_directed_edge(self, origin_id: str, dest_id: str, cost: int) -> None:
        """Add a one-way route from ``origin_id`` to ``dest_id``.

        Raises:
            InvalidWeightError: If ``cost`` is negative or not an int.
            VertexNotFoundError: If either id is unknown.
            SelfLoopNotAllowedError: If both ids are the same vertex.
        """
        check_cost(cost)

        origin = self._require(origin_id)
        destination = self._require(dest_id)

        if origin == destination:
            raise SelfLoopNotAllowedError(
                f"Self-loops are not allowed: {origin_id}",
                vertex_id=origin_id,
            )

        origin.add_edge(destination, cost)

    def add_undirected_edge(self, vertex1_id: str, vertex2_id: str, cost: int) -> None:
        """Add a two-way route as two directed edges with the same cost.

        The edges are inserted ``vertex1 -> vertex2`` then
        ``vertex2 -> vertex1``. The insertions are not atomic: if the
        second one fails, the first one stays in the graph.
        """
        self.add_directed_edge(vertex1_id, vertex2_id, cost)
        self.add_directed_edge(vertex2_id, vertex1_id, cost)

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """All vertices in insertion order."""
        return tuple(self._by_index)

    @property
    def vertex_count(self) -> int:
        return len(self._by_index)

    @property
    def edge_count(self) -> int:
        return sum(vertex.edges.size() for vertex in self._by_index)

    def _require(self, vertex_id: str) -> Vertex:
        vertex = self.find_vertex(vertex_id)
        if vertex is None:
            raise VertexNotFoundError(
                f"Vertex not found: {vertex_id}",
                vertex_id=str(vertex_id),
            )
        return vertex

    # Safest route

    def find_safest_route(self, origin_id: str, dest_id: str) -> Route:
        """Find the route with the lowest accumulated risk.

        Uses Dijkstra's algorithm with lazy reinsertion: a vertex is queued
        again each time its best risk improves, and queue entries whose
        risk is worse than the vertex's current best are skipped when
        extracted.

        Args:
            origin_id: Id of the starting vertex.
            dest_id: Id of the destination vertex.

        Returns:
            The route, or an empty Route if ``dest_id`` is unreachable.

        Raises:
            VertexNotFoundError: If either id is unknown.
        """
        origin = self._require(origin_id)
        destination = self._require(dest_id)

        context = RouteSearchContext.for_size(self.vertex_count)
        queue: MinHeap[_QueueEntry] = MinHeap()

        context.min_risk[origin.index] = 0
        queue.insert((0, origin.index))

        while not queue.is_empty():
            risk, index = queue.extract_min()
            if risk > context.min_risk[index] or context.visited[index]:
                continue
            context.visited[index] = True

            current = self._by_index[index]
            if current == destination:
                return self._reconstruct_route(context, destination)

            for edge in current.edges:
                neighbor = edge.destination.index
                candidate = context.min_risk[index] + edge.cost
                if candidate < context.min_risk[neighbor]:
                    context.min_risk[neighbor] = candidate
                    context.previous[neighbor] = index
                    queue.insert((candidate, neighbor))

        logger.debug(
            "Destination unreachable",
            extra={"origin": origin_id, "destination": dest_id},
        )
        return Route()

    def _reconstruct_route(self, context: RouteSearchContext, target: Vertex) -> Route:
        path: LinkedList[Vertex] = LinkedList()
        current: Optional[int] = target.index

        while current is not None:
            path.prepend(self._by_index[current])
            current = context.previous[current]

        return Route(path=path, total_risk=context.min_risk[target.index])

    # Critical points

    def find_critical_points(self) -> LinkedList[Vertex]:
        """Find every articulation point of the graph.

        Every vertex not yet discovered starts a new DFS tree, so all
        connected components are covered. The result assumes every edge
        has a reciprocal edge (as built by ``add_undirected_edge``); on
        graphs with one-way edges it has no defined meaning.

        Returns:
            The articulation points in vertex insertion order.
        """
        context = ArticulationContext.for_size(self.vertex_count)

        for vertex in self._by_index:
            if not context.visited[vertex.index]:
                self._dfs_articulation(vertex, context)

        points: LinkedList[Vertex] = LinkedList()
        for vertex in self._by_index:
            if context.is_articulation_point[vertex.index]:
                points.append(vertex)
        return points

    def _dfs_articulation(self, root: Vertex, context: ArticulationContext) -> None:
        """Iterative DFS from ``root`` computing discovery and low-link values.

        The top frame of the stack is the vertex being explored; a child is
        pushed as soon as it is discovered and its results are folded into
        its parent when its frame is popped.
        """
        stack: Stack[_DfsFrame] = Stack()
        context.discover(root.index)
        stack.push(_DfsFrame(root, iter(root.edges)))

        while not stack.is_empty():
            frame = stack.peek()
            u = frame.vertex.index
            descended = False

            for edge in frame.edges:
                v = edge.destination.index
                if v == context.dfs_parent[u]:
                    continue

                if context.visited[v]:
                    context.low_link[u] = min(context.low_link[u], context.dfs_order[v])
                else:
                    frame.child_count += 1
                    context.dfs_parent[v] = u
                    context.discover(v)
                    stack.push(_DfsFrame(edge.destination, iter(edge.destination.edges)))
                    descended = True
                    break

            if descended:
                continue

            stack.pop()
            parent = context.dfs_parent[u]
            if parent is None:
                continue

            context.low_link[parent] = min(context.low_link[parent], context.low_link[u])
            parent_frame = stack.peek()
            if context.dfs_parent[parent] is None:
                if parent_frame.child_count > 1:
                    context.is_articulation_point[parent] = True
            elif context.low_link[u] >= context.dfs_order[parent]:
                context.is_articulation_point[parent] = True

    def __len__(self) -> int:
        return len(self._by_index)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"
