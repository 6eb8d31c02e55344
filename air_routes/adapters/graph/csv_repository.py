"""CSV Network Repository adapter.

Loads airports and connections from two CSV files:

- airports.csv: ``airport_code`` (other columns are ignored)
- routes.csv: ``from_airport,to_airport,weight,directional``

Rows with blank codes are skipped. A blank ``directional`` cell means a
mirrored connection.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import Airport, Connection

_TRUE_VALUES = {"true", "yes", "1"}
_FALSE_VALUES = {"false", "no", "0", ""}


@dataclass
class CSVNetworkRepository:
    """Network repository that loads from CSV files.

    This adapter implements NetworkRepositoryPort. Loaded data is cached
    until clear_cache() is called.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _airports: Optional[List[Airport]] = field(default=None, repr=False)
    _connections: Optional[List[Connection]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def list_airports(self) -> Sequence[Airport]:
        """Load all airports from the airports file.

        Returns:
            Airports in file order, without duplicates.

        Raises:
            GraphError: If the file cannot be read or a code is invalid.
        """
        if self._airports is not None:
            return self._airports

        path = self.config.airports_path
        self._logger.debug("Loading airports", extra={"airports_path": str(path)})

        airports: List[Airport] = []
        seen = set()
        for line_no, row in self._read_rows(path):
            code = (row.get("airport_code") or "").strip()
            if not code:
                continue
            airport = self._airport(code, path, line_no)
            if airport not in seen:
                seen.add(airport)
                airports.append(airport)

        self._airports = airports
        self._logger.info("Airports loaded", extra={"airports": len(airports)})
        return airports

    def list_connections(self) -> Sequence[Connection]:
        """Load all connections from the routes file.

        Returns:
            Connections in file order.

        Raises:
            GraphError: If the file cannot be read or a row is malformed.
        """
        if self._connections is not None:
            return self._connections

        path = self.config.routes_path
        self._logger.debug("Loading connections", extra={"routes_path": str(path)})

        connections: List[Connection] = []
        for line_no, row in self._read_rows(path):
            from_code = (row.get("from_airport") or "").strip()
            to_code = (row.get("to_airport") or "").strip()
            if not from_code or not to_code:
                continue

            connections.append(
                Connection(
                    origin=self._airport(from_code, path, line_no),
                    destination=self._airport(to_code, path, line_no),
                    weight=self._parse_weight(row.get("weight"), path, line_no),
                    directional=self._parse_directional(
                        row.get("directional"), path, line_no
                    ),
                )
            )

        self._connections = connections
        self._logger.info("Connections loaded", extra={"connections": len(connections)})
        return connections

    def clear_cache(self) -> None:
        """Clear cached airport and connection data."""
        self._airports = None
        self._connections = None
        self._logger.debug("Network cache cleared")

    def _read_rows(self, path: Path) -> List[tuple[int, dict]]:
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                # Header is line 1
                return [(index + 2, row) for index, row in enumerate(reader)]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise GraphError(
                f"Failed to read network file {path}",
                file_path=str(path),
                cause=e,
            )

    @staticmethod
    def _airport(code: str, path: Path, line_no: int) -> Airport:
        try:
            return Airport(code)
        except ValueError as e:
            raise GraphError(
                f"Invalid airport code on line {line_no}",
                file_path=str(path),
                cause=e,
            )

    @staticmethod
    def _parse_weight(raw: Optional[str], path: Path, line_no: int) -> int:
        try:
            return int((raw or "").strip())
        except ValueError as e:
            raise GraphError(
                f"Invalid weight {raw!r} on line {line_no}",
                file_path=str(path),
                cause=e,
            )

    @staticmethod
    def _parse_directional(raw: Optional[str], path: Path, line_no: int) -> bool:
        value = (raw or "").strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise GraphError(
            f"Invalid directional flag {raw!r} on line {line_no}",
            file_path=str(path),
        )
