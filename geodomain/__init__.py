"""Geo domain generator: keyword x city domain candidates with availability estimates."""

__version__ = "0.1.0"
