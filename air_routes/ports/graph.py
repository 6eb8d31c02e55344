"""Graph ports - Abstractions for network data sources.

These protocols define the contract between the route planner and
whatever supplies the airports and connections (CSV files, a schedule
database, a test fixture).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Airport, Connection


class NetworkRepositoryPort(Protocol):
    """Port for loading network data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the airports
    and the connections between them from persistent storage.
    """

    def list_airports(self) -> Sequence[Airport]:
        """List all airports, including those without connections.

        Returns:
            Sequence of airports.
        """
        ...

    def list_connections(self) -> Sequence[Connection]:
        """List all edge definitions.

        Returns:
            Sequence of connections, each mapping onto one add_edge call.
        """
        ...
