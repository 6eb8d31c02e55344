"""Immutable domain models for the air route network.

All models are frozen dataclasses with slots. The graph itself only needs
vertices to be hashable; Airport is the vertex type used by the loaders
and the planner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Optional


@dataclass(frozen=True, slots=True)
class Airport:
    """An airport identified by its code.

    Attributes:
        code: Unique airport identifier (e.g., 'ZRH'), stored upper-cased
    """

    code: str

    def __post_init__(self) -> None:
        """Validate and normalise the code."""
        code = self.code.strip() if isinstance(self.code, str) else ""
        if not code:
            raise ValueError(f"Airport code must be a non-empty string, got {self.code!r}")
        object.__setattr__(self, "code", code.upper())

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True, slots=True)
class Connection:
    """An edge definition as supplied by an external data source.

    Attributes:
        origin: Start vertex (the only endpoint holding the edge if directional)
        destination: End vertex
        weight: Non-negative edge weight
        directional: True for a one-way link, False to mirror it
    """

    origin: Hashable
    destination: Hashable
    weight: int
    directional: bool = False


@dataclass(frozen=True, slots=True)
class SearchRecord:
    """Best known distance to a vertex during one route search.

    A record is never updated in place; an improvement produces a new one.

    Attributes:
        vertex: The vertex this record describes
        distance: Cumulative weight from the source
        predecessor: Previous vertex on the best path, None for the source
    """

    vertex: Any
    distance: int
    predecessor: Optional[Any] = None


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query.

    Attributes:
        path: Ordered vertices from source to destination (inclusive)
        total_weight: Sum of the edge weights along the path
    """

    path: tuple[Any, ...]
    total_weight: int

    @property
    def source(self) -> Any:
        """Return the first vertex of the path."""
        return self.path[0]

    @property
    def destination(self) -> Any:
        """Return the last vertex of the path."""
        return self.path[-1]

    @property
    def num_stops(self) -> int:
        """Return the number of vertices in the path."""
        return len(self.path)

    @property
    def legs(self) -> tuple[tuple[Any, Any], ...]:
        """Return consecutive (from, to) pairs along the path."""
        return tuple(zip(self.path, self.path[1:]))
