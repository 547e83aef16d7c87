"""Dense two-dimensional tables with transforms and text rendering."""

from tablegrid.src.core.table import InvalidCoordinatesError, Table, TableIndexError

__all__ = ["Table", "TableIndexError", "InvalidCoordinatesError"]
