"""Graph engine for the location network.

This subpackage contains the work structures (linked list, stack,
min-heap), the vertex and edge records, and the graph that answers
safest-route and critical-point queries.
"""

from .context import ArticulationContext, RouteSearchContext
from .engine import Graph, Route
from .linked_list import LinkedList
from .min_heap import MinHeap
from .stack import Stack
from .vertex import Edge, Vertex

__all__ = [
    "Graph",
    "Route",
    "Vertex",
    "Edge",
    "LinkedList",
    "Stack",
    "MinHeap",
    "RouteSearchContext",
    "ArticulationContext",
]
