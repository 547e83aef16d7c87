import numpy as np
import pytest

from tablegrid.src.core.table import InvalidCoordinatesError, Table, TableIndexError


def test_dimensions_respected():
    table = Table(8, 8)
    assert len(table.rows) == 8
    assert len(table.cols) == 8


@pytest.mark.parametrize("width,height", [(0, 0), (4, 0), (0, 3), (4, 16), (1, 1)])
def test_dimension_invariant(width, height):
    table = Table(width, height)
    assert table.width == width
    assert table.height == height
    assert len(table.rows) == height
    assert all(len(row) == width for row in table.rows)
    assert len(table.cols) == width
    assert table.shape() == (height, width)


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Table(-1, 2)


def test_default_fill_is_none():
    table = Table(3, 2)
    assert table.rows == [[None, None, None], [None, None, None]]


def test_generator_populates_cells():
    table = Table(3, 3, lambda x, y: x * y)
    assert table.rows == [[0, 0, 0], [0, 1, 2], [0, 2, 4]]


def test_get_returns_cell():
    table = Table(3, 3, lambda x, y: f"{x}-{y}")
    assert table.get(1, 0) == "1-0"


@pytest.mark.parametrize("x,y", [(3, 0), (0, 3), (-1, 0), (0, -1), (1.5, 0)])
def test_get_out_of_bounds(x, y):
    table = Table(3, 3)
    with pytest.raises(TableIndexError):
        table.get(x, y)


def test_row_and_col():
    table = Table(3, 3, lambda x, y: x + 1)
    assert table.row(1) == [1, 2, 3]
    assert table.col(1) == [2, 2, 2]
    assert table.rows == [[1, 2, 3], [1, 2, 3], [1, 2, 3]]
    assert table.cols == [[1, 1, 1], [2, 2, 2], [3, 3, 3]]


def test_row_and_col_out_of_bounds():
    table = Table(2, 3)
    with pytest.raises(TableIndexError):
        table.row(3)
    with pytest.raises(TableIndexError):
        table.col(2)
    with pytest.raises(IndexError):
        table.row(-1)


def test_row_is_live_col_is_copy(dash_table):
    row = dash_table.row(0)
    col = dash_table.col(0)
    dash_table.set(0, 0, "X")
    assert row[0] == "X"
    assert col[0] == "-"


def test_set_single_cell(dash_table):
    dash_table.set(1, 1, "X")
    assert dash_table.rows == [["-", "-", "-"], ["-", "X", "-"], ["-", "-", "-"]]


def test_set_row(dash_table):
    dash_table.set(None, 1, "X")
    assert dash_table.rows == [["-", "-", "-"], ["X", "X", "X"], ["-", "-", "-"]]


def test_set_col(dash_table):
    dash_table.set(1, None, "X")
    assert dash_table.rows == [["-", "X", "-"], ["-", "X", "-"], ["-", "X", "-"]]


def test_set_returns_table(dash_table):
    assert dash_table.set(0, 0, "X").set(2, 2, "O") is dash_table
    assert dash_table.get(2, 2) == "O"


def test_set_requires_a_coordinate():
    table = Table(3, 3)
    with pytest.raises(InvalidCoordinatesError):
        table.set(None, None, "X")


def test_set_out_of_bounds_leaves_table_untouched(dash_table):
    with pytest.raises(TableIndexError):
        dash_table.set(None, 5, "X")
    with pytest.raises(TableIndexError):
        dash_table.set(3, None, "X")
    with pytest.raises(TableIndexError):
        dash_table.set(-1, 0, "X")
    assert dash_table.rows == [["-"] * 3] * 3


def test_equality_and_repr():
    a = Table(2, 2, lambda x, y: x + y)
    b = Table(2, 2, lambda x, y: x + y)
    assert a == b
    assert a != Table(2, 2)
    assert Table(0, 2) != Table(0, 3)
    assert repr(a) == "Table(width=2, height=2)"
    with pytest.raises(TypeError):
        hash(a)


def test_to_list_is_deep_copy(dash_table):
    data = dash_table.to_list()
    data[0][0] = "X"
    assert dash_table.get(0, 0) == "-"


def test_numpy_integer_coordinates():
    table = Table(3, 3, lambda x, y: x + y)
    assert table.get(np.int64(1), np.int64(2)) == 3
    assert table.row(np.int32(1)) == [1, 2, 3]
    assert table.col(np.uint8(2)) == [2, 3, 4]
    table.set(np.int64(0), None, "X")
    assert table.col(0) == ["X", "X", "X"]
    with pytest.raises(TableIndexError):
        table.get(np.int64(3), 0)


def test_bool_coordinates_rejected(dash_table):
    with pytest.raises(TableIndexError):
        dash_table.get(True, 0)
    with pytest.raises(TableIndexError):
        dash_table.set(0, False, "X")
    assert dash_table.rows == [["-"] * 3] * 3
