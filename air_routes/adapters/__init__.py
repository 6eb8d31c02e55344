"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external data sources such as
CSV exports of an airport network.
"""
