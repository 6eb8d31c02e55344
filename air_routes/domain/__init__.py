"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    AirRoutesError,
    AsymmetricEdgeError,
    ConfigurationError,
    EdgeNotFoundError,
    GraphError,
    InvalidWeightError,
    NoPathFoundError,
    RouteCancelledError,
    UnknownEndpointError,
    VertexNotFoundError,
)
from .models import Airport, Connection, RouteResult, SearchRecord

__all__ = [
    # Models
    "Airport",
    "Connection",
    "SearchRecord",
    "RouteResult",
    # Errors
    "AirRoutesError",
    "GraphError",
    "ConfigurationError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "InvalidWeightError",
    "AsymmetricEdgeError",
    "NoPathFoundError",
    "UnknownEndpointError",
    "RouteCancelledError",
]
