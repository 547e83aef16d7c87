import numpy as np
from typing import Any, Optional

from .table import Table


def table_to_array(table: Table, fill_value: Any = 0, dtype: Optional[Any] = None) -> np.ndarray:
    """Return ``table`` as a ``(height, width)`` array with ``None`` replaced by ``fill_value``."""
    data = table.map(lambda value, x, y, t: fill_value if value is None else value)
    return np.array(data.rows, dtype=dtype).reshape(table.height, table.width)


def table_from_array(arr: Any) -> Table:
    """Return a :class:`Table` holding the values of 2-D ``arr``."""
    arr = np.asarray(arr)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2-D array, got {arr.ndim} dimensions")
    height, width = arr.shape
    values = arr.tolist()
    return Table(width, height, lambda x, y: values[y][x])
