"""Core table data structure and helpers."""

from .table import InvalidCoordinatesError, Table, TableIndexError, format_cell
from .array_bridge import table_from_array, table_to_array

__all__ = [
    "Table",
    "TableIndexError",
    "InvalidCoordinatesError",
    "format_cell",
    "table_to_array",
    "table_from_array",
]
