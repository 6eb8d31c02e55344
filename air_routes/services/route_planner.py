"""Route planner service - Owner of the shared airport network.

The planner is the single entry point through which the network is
mutated and queried. Every call runs under one lock, so a route query
never observes a half-applied mutation and two mutations never
interleave.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.errors import AirRoutesError, GraphError, NoPathFoundError, UnknownEndpointError
from ..domain.models import Airport, Connection, RouteResult
from ..graph.dijkstra import CancelSignal
from ..graph.weighted_graph import WeightedGraph
from ..ports.graph import NetworkRepositoryPort


@dataclass
class RoutePlannerService:
    """Thread-safe facade over a WeightedGraph of airports.

    Usage:
        planner = RoutePlannerService()
        planner.load_network(CSVNetworkRepository())
        result = planner.find_route(Airport("ZRH"), Airport("JFK"))

    The graph is private: every read and write goes through the planner
    and its lock.
    """

    _graph: WeightedGraph = field(default_factory=WeightedGraph, init=False, repr=False)

    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_network(self, repository: NetworkRepositoryPort) -> None:
        """Replace the network with the repository's airports and connections.

        The new graph is built aside and swapped in only when every
        connection was accepted.

        Args:
            repository: Source of airports and connections.

        Raises:
            GraphError: If the data cannot be loaded or a connection is rejected.
        """
        airports = repository.list_airports()
        connections = repository.list_connections()

        graph = WeightedGraph()
        for airport in airports:
            graph.add_vertex(airport)
        for connection in connections:
            try:
                self._apply(graph, connection)
            except AirRoutesError as e:
                raise GraphError(
                    f"Rejected connection {connection.origin} -> {connection.destination}",
                    cause=e,
                )

        with self._lock:
            self._graph = graph

        self._logger.info(
            "Network loaded",
            extra={"airports": len(graph), "edges": graph.edge_count()},
        )

    def add_airport(self, airport: Airport) -> None:
        with self._lock:
            self._graph.add_vertex(airport)

    def remove_airport(self, airport: Airport) -> None:
        with self._lock:
            self._graph.remove_vertex(airport)

    def add_connection(self, connection: Connection) -> None:
        """Add or overwrite the edge described by a connection."""
        with self._lock:
            self._apply(self._graph, connection)

    def remove_connection(
        self, origin: Airport, destination: Airport, directional: bool = False
    ) -> None:
        with self._lock:
            self._graph.remove_edge(origin, destination, directional)

    def alter_weight(self, first: Airport, second: Airport, weight: int) -> None:
        with self._lock:
            self._graph.alter_weight(first, second, weight)

    def airports(self) -> List[Airport]:
        with self._lock:
            return list(self._graph.vertices())

    def airport_count(self) -> int:
        with self._lock:
            return len(self._graph)

    def edge_count(self) -> int:
        """Return the number of directed edge entries in the network."""
        with self._lock:
            return self._graph.edge_count()

    def has_connection(self, origin: Airport, destination: Airport) -> bool:
        with self._lock:
            return self._graph.has_edge(origin, destination)

    def find_route(
        self,
        departure: Airport,
        arrival: Airport,
        cancel_event: Optional[CancelSignal] = None,
    ) -> RouteResult:
        """Find the cheapest route between two airports.

        Args:
            departure: Departure airport.
            arrival: Arrival airport.
            cancel_event: Optional signal that aborts the search when set.

        Returns:
            RouteResult with the path and its total weight.

        Raises:
            UnknownEndpointError: If either airport is not in the network.
            NoPathFoundError: If no route connects the airports.
            RouteCancelledError: If cancel_event is set during the search.
        """
        self._logger.debug(
            "Finding route",
            extra={"departure": str(departure), "arrival": str(arrival)},
        )

        with self._lock:
            try:
                result = self._graph.route(departure, arrival, cancel_event)
            except UnknownEndpointError as e:
                self._logger.warning(
                    "Unknown airport in route query",
                    extra={"airport": str(e.vertex)},
                )
                raise
            except NoPathFoundError:
                self._logger.warning(
                    "No route found",
                    extra={"departure": str(departure), "arrival": str(arrival)},
                )
                raise

        self._logger.info(
            "Route found",
            extra={
                "departure": str(departure),
                "arrival": str(arrival),
                "stops": result.num_stops,
                "total_weight": result.total_weight,
            },
        )
        return result

    @staticmethod
    def _apply(graph: WeightedGraph, connection: Connection) -> None:
        graph.add_edge(
            connection.origin,
            connection.destination,
            connection.weight,
            connection.directional,
        )
