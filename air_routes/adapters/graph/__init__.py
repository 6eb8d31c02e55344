"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVNetworkRepository: Loads airports and connections from CSV files
"""

from .csv_repository import CSVNetworkRepository

__all__ = ["CSVNetworkRepository"]
