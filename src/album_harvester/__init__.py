"""Incremental album metadata harvester for a fixed list of artists."""

__version__ = "0.1.0"
