"""Loading and display helpers for tables."""

from .loader import load_table
from .visualization import visualize

__all__ = ["load_table", "visualize"]
