"""Deserialize loosely typed values, reporting errors in JSON or query-parameter style."""

__version__ = "0.1.0"