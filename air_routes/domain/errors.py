"""Typed domain errors for the air route network.

Every failure the graph, the loaders or the planner can report is one of
these types, so callers can tell "unknown airport" apart from "no route"
without inspecting messages.

All errors inherit from AirRoutesError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class AirRoutesError(Exception):
    """Base error for the air routes domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(AirRoutesError):
    """Network loading or data integrity error.

    Attributes:
        file_path: Path to the network data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(AirRoutesError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""


@dataclass
class VertexNotFoundError(AirRoutesError):
    """An operation referenced a vertex that is not in the graph.

    Attributes:
        vertex: The missing vertex
    """

    vertex: Any = None


@dataclass
class EdgeNotFoundError(AirRoutesError):
    """No edge exists between the given vertices.

    Attributes:
        origin: Source vertex of the expected edge
        destination: Target vertex of the expected edge
    """

    origin: Any = None
    destination: Any = None


@dataclass
class InvalidWeightError(AirRoutesError):
    """An edge weight is negative or not an integer.

    Attributes:
        weight: The rejected weight
    """

    weight: Any = None


@dataclass
class AsymmetricEdgeError(AirRoutesError):
    """A symmetric update was requested on a one-directional edge.

    Attributes:
        origin: Vertex holding the only existing direction
        destination: Vertex lacking the reverse direction
    """

    origin: Any = None
    destination: Any = None


@dataclass
class NoPathFoundError(AirRoutesError):
    """No path connects the source to the destination.

    Attributes:
        source: Departure vertex
        destination: Arrival vertex
    """

    source: Any = None
    destination: Any = None


@dataclass
class UnknownEndpointError(VertexNotFoundError, NoPathFoundError):
    """The source or destination of a route query is not in the graph.

    Can be caught either as a missing vertex or as a missing path.
    """


@dataclass
class RouteCancelledError(AirRoutesError):
    """A route search was cancelled before it completed.

    Attributes:
        source: Departure vertex
        destination: Arrival vertex
    """

    source: Any = None
    destination: Any = None
