import pytest

from tablegrid.src.core.table import Table


@pytest.fixture
def dash_table():
    """3x3 table filled with ``"-"``."""
    return Table(3, 3, lambda x, y: "-")


@pytest.fixture
def tall_table():
    """Two columns, three rows: ``[[1, 2], [10, 20], [100, 200]]``."""
    return Table.from_rows([[1, 2], [10, 20], [100, 200]])
