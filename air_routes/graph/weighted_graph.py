"""Mutable weighted graph over opaque vertex identities.

The graph is an adjacency map ``vertex -> {neighbor: weight}``. A vertex
exists as soon as it is a top-level key, even with no outgoing edges.
Edges are either one-directional or mirrored with the same weight; once
stored, a mirrored edge cannot be told apart from two equal one-way edges.

Every operation validates its inputs before touching the adjacency map,
so a failed call leaves the graph unchanged. The class is not
synchronised; see RoutePlannerService for shared use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

from ..domain.errors import (
    AsymmetricEdgeError,
    EdgeNotFoundError,
    InvalidWeightError,
    VertexNotFoundError,
)
from ..domain.models import RouteResult
from .dijkstra import CancelSignal, shortest_path


def _validate_weight(weight: Any) -> None:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidWeightError(
            f"Edge weight must be an integer, got {weight!r}",
            weight=weight,
        )
    if weight < 0:
        raise InvalidWeightError(
            f"Edge weight must be non-negative, got {weight}",
            weight=weight,
        )


@dataclass
class WeightedGraph:
    """Adjacency-map graph supporting mutation and shortest-path queries.

    Example:
        graph = WeightedGraph()
        graph.add_edge(Airport("ZRH"), Airport("LHR"), 90)
        result = graph.route(Airport("ZRH"), Airport("LHR"))
    """

    _adjacency: Dict[Hashable, Dict[Hashable, int]] = field(
        default_factory=dict, repr=False
    )
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: Hashable) -> None:
        """Add a vertex with no outgoing edges if it is not present yet."""
        if vertex not in self._adjacency:
            self._adjacency[vertex] = {}
            self._logger.debug("Vertex added", extra={"vertex": str(vertex)})

    def remove_vertex(self, vertex: Hashable) -> None:
        """Remove a vertex and every edge pointing to it.

        Removing an absent vertex is a no-op.
        """
        if vertex not in self._adjacency:
            return
        del self._adjacency[vertex]
        for neighbors in self._adjacency.values():
            neighbors.pop(vertex, None)
        self._logger.debug("Vertex removed", extra={"vertex": str(vertex)})

    def add_edge(
        self,
        origin: Hashable,
        destination: Hashable,
        weight: int,
        directional: bool = False,
    ) -> None:
        """Add or overwrite an edge, creating missing endpoints.

        Args:
            origin: Start vertex (the only holder of the edge if directional).
            destination: End vertex.
            weight: Non-negative integer weight.
            directional: True for one way only, False to mirror the edge.

        Raises:
            InvalidWeightError: If weight is negative or not an integer.
        """
        _validate_weight(weight)
        self.add_vertex(origin)
        self.add_vertex(destination)
        self._adjacency[origin][destination] = weight
        if not directional:
            self._adjacency[destination][origin] = weight
        self._logger.debug(
            "Edge added",
            extra={
                "origin": str(origin),
                "destination": str(destination),
                "weight": weight,
                "directional": directional,
            },
        )

    def remove_edge(
        self,
        origin: Hashable,
        destination: Hashable,
        directional: bool = False,
    ) -> None:
        """Remove an edge (and its mirror unless directional).

        Raises:
            VertexNotFoundError: If an endpoint is absent, or the edge is
                missing in a direction that would be removed.
        """
        self._require_edge(origin, destination)
        if not directional:
            self._require_edge(destination, origin)

        del self._adjacency[origin][destination]
        if not directional:
            del self._adjacency[destination][origin]
        self._logger.debug(
            "Edge removed",
            extra={
                "origin": str(origin),
                "destination": str(destination),
                "directional": directional,
            },
        )

    def alter_weight(self, first: Hashable, second: Hashable, weight: int) -> None:
        """Change the weight of a mirrored edge in both directions.

        The edge must already exist both ways; this never creates edges.

        Raises:
            InvalidWeightError: If weight is negative or not an integer.
            EdgeNotFoundError: If no edge joins the two vertices.
            AsymmetricEdgeError: If the edge exists in one direction only.
        """
        _validate_weight(weight)
        forward = self.has_edge(first, second)
        backward = self.has_edge(second, first)

        if not forward and not backward:
            raise EdgeNotFoundError(
                f"No edge between {first} and {second}",
                origin=first,
                destination=second,
            )
        if not (forward and backward):
            holder, other = (first, second) if forward else (second, first)
            raise AsymmetricEdgeError(
                f"Edge {holder} -> {other} has no reverse direction",
                origin=holder,
                destination=other,
            )

        self._adjacency[first][second] = weight
        self._adjacency[second][first] = weight
        self._logger.debug(
            "Edge weight altered",
            extra={"first": str(first), "second": str(second), "weight": weight},
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def route(
        self,
        source: Hashable,
        destination: Hashable,
        cancel_event: Optional[CancelSignal] = None,
    ) -> RouteResult:
        """Find the minimum-total-weight path from source to destination.

        Raises:
            UnknownEndpointError: If either vertex is not in the graph.
            NoPathFoundError: If destination is unreachable.
            RouteCancelledError: If cancel_event is set during the search.
        """
        return shortest_path(self._adjacency, source, destination, cancel_event)

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._adjacency

    def has_edge(self, origin: Hashable, destination: Hashable) -> bool:
        neighbors = self._adjacency.get(origin)
        return neighbors is not None and destination in neighbors

    def weight(self, origin: Hashable, destination: Hashable) -> int:
        """Return the weight of the edge origin -> destination.

        Raises:
            EdgeNotFoundError: If there is no such edge.
        """
        if not self.has_edge(origin, destination):
            raise EdgeNotFoundError(
                f"No edge {origin} -> {destination}",
                origin=origin,
                destination=destination,
            )
        return self._adjacency[origin][destination]

    def outgoing(self, vertex: Hashable) -> Dict[Hashable, int]:
        """Return a copy of the outgoing edges of a vertex.

        Raises:
            VertexNotFoundError: If the vertex is not in the graph.
        """
        neighbors = self._adjacency.get(vertex)
        if neighbors is None:
            raise VertexNotFoundError(f"Vertex not in graph: {vertex}", vertex=vertex)
        return dict(neighbors)

    def vertices(self) -> List[Hashable]:
        return list(self._adjacency)

    def edges(self) -> Iterator[Tuple[Hashable, Hashable, int]]:
        """Iterate over every stored (origin, destination, weight) entry."""
        for origin, neighbors in self._adjacency.items():
            for destination, weight in neighbors.items():
                yield origin, destination, weight

    def edge_count(self) -> int:
        """Return the number of stored directed entries."""
        return sum(len(neighbors) for neighbors in self._adjacency.values())

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def _require_edge(self, origin: Hashable, destination: Hashable) -> None:
        for endpoint in (origin, destination):
            if endpoint not in self._adjacency:
                raise VertexNotFoundError(
                    f"Vertex not in graph: {endpoint}", vertex=endpoint
                )
        if destination not in self._adjacency[origin]:
            raise VertexNotFoundError(
                f"No edge {origin} -> {destination}: {destination} is not a neighbor of {origin}",
                vertex=destination,
            )
