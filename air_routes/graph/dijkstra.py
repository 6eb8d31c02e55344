"""Shortest-path computation using Dijkstra's algorithm.

This module computes the minimum-total-weight path between two vertices
of an adjacency mapping. The priority queue is a binary heap with lazy
deletion: every improvement pushes a fresh entry and outdated entries are
skipped when they surface.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Dict, Hashable, List, Mapping, Optional, Protocol, Set, Tuple

from ..domain.errors import NoPathFoundError, RouteCancelledError, UnknownEndpointError
from ..domain.models import RouteResult, SearchRecord

Adjacency = Mapping[Hashable, Mapping[Hashable, int]]


class CancelSignal(Protocol):
    """Anything exposing ``is_set()``, such as ``threading.Event``."""

    def is_set(self) -> bool: ...


def shortest_path(
    adjacency: Adjacency,
    source: Hashable,
    destination: Hashable,
    cancel_event: Optional[CancelSignal] = None,
) -> RouteResult:
    """Compute the shortest path between two vertices using Dijkstra.

    Parameters
    ----------
    adjacency:
        Mapping of vertex to its outgoing ``{neighbor: weight}`` mapping.
        Weights must be non-negative.
    source:
        Departure vertex.
    destination:
        Arrival vertex.
    cancel_event:
        Optional signal checked once per heap extraction.

    Returns
    -------
    RouteResult
        The vertices from ``source`` to ``destination`` (inclusive) and the
        total weight.

    Raises
    ------
    UnknownEndpointError
        If ``source`` or ``destination`` is not a vertex of ``adjacency``.
    NoPathFoundError
        If ``destination`` cannot be reached from ``source``.
    RouteCancelledError
        If ``cancel_event`` is set while the search is running.
    """
    for endpoint in (source, destination):
        if endpoint not in adjacency:
            raise UnknownEndpointError(
                f"Vertex not in graph: {endpoint}",
                vertex=endpoint,
                source=source,
                destination=destination,
            )

    if source == destination:
        return RouteResult(path=(source,), total_weight=0)

    records: Dict[Any, SearchRecord] = {source: SearchRecord(source, 0, None)}
    finalized: Set[Any] = set()

    # The counter breaks distance ties so vertices are never compared.
    counter = itertools.count()
    heap: List[Tuple[int, int, Any]] = [(0, next(counter), source)]

    while heap:
        if cancel_event is not None and cancel_event.is_set():
            raise RouteCancelledError(
                f"Route search from {source} to {destination} cancelled",
                source=source,
                destination=destination,
            )

        current_distance, _, u = heapq.heappop(heap)

        # Skip outdated entries
        if u in finalized or current_distance > records[u].distance:
            continue

        finalized.add(u)

        if u == destination:
            return RouteResult(
                path=_reconstruct(records, source, destination),
                total_weight=current_distance,
            )

        for v, weight in adjacency.get(u, {}).items():
            if v in finalized:
                continue
            candidate = current_distance + weight
            best = records.get(v)
            if best is None or candidate < best.distance:
                records[v] = SearchRecord(v, candidate, u)
                heapq.heappush(heap, (candidate, next(counter), v))

    raise NoPathFoundError(
        f"No path from {source} to {destination}",
        source=source,
        destination=destination,
    )


def _reconstruct(
    records: Mapping[Any, SearchRecord], source: Any, destination: Any
) -> Tuple[Any, ...]:
    # Walk until the source itself; None may be a vertex.
    path: List[Any] = [destination]
    current = destination
    while current != source:
        current = records[current].predecessor
        path.append(current)
    path.reverse()
    return tuple(path)
