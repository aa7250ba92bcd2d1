"""Hex sector map and star system generator."""

__version__ = "0.1.0"
