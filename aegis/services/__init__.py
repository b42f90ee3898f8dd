"""Services layer - Application orchestration.

Available services:
- GraphService: Loads the risk graph and answers route and
  critical-point queries
"""

from .graph_service import GraphService

__all__ = ["GraphService"]
