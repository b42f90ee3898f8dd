"""Top-level package for the Aegis risk graph.

Aegis models a network of locations as a risk-weighted graph and
answers two questions about it: which route between two locations
carries the lowest accumulated risk, and which locations are critical,
i.e. would disconnect the network if removed.

The graph engine lives in ``aegis.graph``; repositories, the cost
strategy and the graph service wire it to data sources.
"""

__version__ = "0.1.0"
