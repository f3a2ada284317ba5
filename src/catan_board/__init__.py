"""Catan board engine: topology, construction rules and resource production."""

__version__ = "0.1.0"
