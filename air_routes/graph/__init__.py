"""Graph core for the air route network.

This subpackage holds the mutable weighted graph and the Dijkstra search
it uses to answer route queries.
"""

from .dijkstra import shortest_path
from .weighted_graph import WeightedGraph

__all__ = ["WeightedGraph", "shortest_path"]
