"""Tile arena toolkit: bounded reachable-path search over wall grids."""

__version__ = "0.1.0"
