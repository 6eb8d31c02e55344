"""Top-level package for the Air Routes project.

Models a network of airports joined by weighted, optionally one-way
connections and finds the cheapest route between two airports.
"""

from .domain import Airport, Connection, RouteResult
from .graph import WeightedGraph

__all__ = ["Airport", "Connection", "RouteResult", "WeightedGraph"]
