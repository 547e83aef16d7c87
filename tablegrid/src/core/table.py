"""Dense two-dimensional table addressed by ``(x, y)`` coordinates."""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

from tablegrid.src.utils import config_loader
from tablegrid.src.utils.logger import get_logger

T = TypeVar("T")
U = TypeVar("U")

logger = get_logger(__name__)

_NO_CONTEXT = object()


class TableIndexError(IndexError):
    """Raised when a coordinate falls outside the table."""


class InvalidCoordinatesError(ValueError):
    """Raised when ``set`` is called without any coordinate."""


def format_cell(value: Any) -> str:
    """Return the default text for ``value``; ``None`` renders as the null text."""
    if value is None:
        return config_loader.NULL_TEXT
    return str(value)


def _coalescer(mode: Optional[str]) -> Callable[[Any], Any]:
    if mode is None:
        mode = config_loader.COALESCE_MODE
    if mode == "falsy":
        return lambda value: value or None
    if mode == "none":
        return lambda value: value
    raise ValueError(f"Unknown coalesce mode: {mode!r}")


def _coordinate(value: Any, limit: int, name: str) -> int:
    """Return ``value`` as a plain int within ``[0, limit)``; bools are rejected."""
    if isinstance(value, bool):
        raise TableIndexError(f"{name}={value!r} is not a coordinate")
    try:
        index = operator.index(value)
    except TypeError:
        raise TableIndexError(f"{name}={value!r} is not a coordinate") from None
    if not 0 <= index < limit:
        raise TableIndexError(f"{name}={value!r} outside [0, {limit})")
    return index


class Table(Generic[T]):
    """Fixed-size grid of optional values.

    Cells are stored row-major, so ``rows`` and ``row`` expose the backing
    lists while ``cols`` and ``col`` build fresh ones. ``None`` is a regular
    cell value meaning "empty".
    """

    def __init__(
        self,
        width: int,
        height: int,
        generator: Optional[Callable[[int, int], Optional[T]]] = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("Table dimensions must be non-negative")
        self._width = width
        self._height = height
        self._rows: List[List[Optional[T]]] = [
            [generator(x, y) if generator else None for x in range(width)]
            for y in range(height)
        ]

    # Dimensions and access -----------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def rows(self) -> List[List[Optional[T]]]:
        """Table data organised by rows (the backing lists)."""
        return self._rows

    @property
    def cols(self) -> List[List[Optional[T]]]:
        """Table data organised by columns (fresh lists)."""
        return [self.col(x) for x in range(self._width)]

    def shape(self) -> Tuple[int, int]:
        """Return the table shape as (height, width)."""
        return self._height, self._width

    def _check_x(self, x: Any) -> int:
        return _coordinate(x, self._width, "x")

    def _check_y(self, y: Any) -> int:
        return _coordinate(y, self._height, "y")

    def get(self, x: int, y: int) -> Optional[T]:
        """Return the value at ``x``, ``y``."""
        return self._rows[self._check_y(y)][self._check_x(x)]

    def row(self, y: int) -> List[Optional[T]]:
        """Return row ``y``; later ``set`` calls are visible through it."""
        return self._rows[self._check_y(y)]

    def col(self, x: int) -> List[Optional[T]]:
        """Return a copy of column ``x``."""
        x = self._check_x(x)
        return [row[x] for row in self._rows]

    def to_list(self) -> List[List[Optional[T]]]:
        """Return a deep list copy of the table data."""
        return [row[:] for row in self._rows]

    def set(self, x: Optional[int], y: Optional[int], value: Optional[T]) -> "Table[T]":
        """Set ``value`` at ``x``, ``y``.

        A ``None`` coordinate acts as a wildcard: ``set(None, y, v)`` fills row
        ``y`` and ``set(x, None, v)`` fills column ``x``. At least one
        coordinate is required.
        """
        if x is not None and y is not None:
            self._rows[self._check_y(y)][self._check_x(x)] = value
        elif x is None and y is not None:
            y = self._check_y(y)
            for col_x in range(self._width):
                self.set(col_x, y, value)
        elif x is not None and y is None:
            x = self._check_x(x)
            for row_y in range(self._height):
                self.set(x, row_y, value)
        else:
            raise InvalidCoordinatesError("Invalid arguments, at least one coordinate is required.")
        return self

    # Bulk operations -----------------------------------------------------

    def map(
        self, fn: Callable[[Optional[T], int, int, "Table[T]"], Optional[U]]
    ) -> "Table[U]":
        """Return a new table where each cell is ``fn(value, x, y, self)``."""
        return Table(self._width, self._height, lambda x, y: fn(self._rows[y][x], x, y, self))

    def reduce(
        self,
        fn: Callable[[U, Optional[T], int, int, "Table[T]"], U],
        initial: U,
    ) -> U:
        """Fold all cells in row-major order starting from ``initial``."""
        acc = initial
        for y, row in enumerate(self._rows):
            for x, value in enumerate(row):
                acc = fn(acc, value, x, y, self)
        return acc

    def for_each(self, fn: Callable[..., Any], context: Any = _NO_CONTEXT) -> None:
        """Call ``fn(value, x, y, self)`` for every cell in row-major order.

        When ``context`` is given it is passed as a fifth argument.
        """
        extra = () if context is _NO_CONTEXT else (context,)
        for y in range(self._height):
            for x in range(self._width):
                fn(self._rows[y][x], x, y, self, *extra)

    # Geometric transforms ------------------------------------------------

    def clockwise(self) -> "Table[T]":
        """Return a new table rotated 90 degrees clockwise."""
        logger.debug("rotating %dx%d table clockwise", self._width, self._height)
        return Table(self._height, self._width, lambda x, y: self.get(y, self._height - 1 - x))

    def counterclockwise(self) -> "Table[T]":
        """Return a new table rotated 90 degrees counterclockwise."""
        logger.debug("rotating %dx%d table counterclockwise", self._width, self._height)
        return Table(self._height, self._width, lambda x, y: self.get(self._width - 1 - y, x))

    def flip_horizontal(self) -> "Table[T]":
        """Return a new table mirrored left to right."""
        return Table(self._width, self._height, lambda x, y: self.get(self._width - 1 - x, y))

    def flip_vertical(self) -> "Table[T]":
        """Return a new table mirrored top to bottom."""
        return Table(self._width, self._height, lambda x, y: self.get(x, self._height - 1 - y))

    # Rendering -----------------------------------------------------------

    def render(
        self,
        formatter: Optional[Callable[[Any], str]] = None,
        separator: Optional[str] = None,
    ) -> str:
        """Return the table as column-aligned text framed by newlines."""
        formatter = formatter or format_cell
        if separator is None:
            separator = config_loader.CELL_SEPARATOR
        texts = self.map(lambda value, x, y, table: formatter(value))
        widths = [max((len(text) for text in col), default=0) for col in texts.cols]
        lines = [
            separator.join(text.ljust(widths[x]) for x, text in enumerate(row))
            for row in texts.rows
        ]
        return "\n" + "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Table(width={self._width}, height={self._height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self.shape() == other.shape() and self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    # Construction helpers ------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], coalesce: Optional[str] = None) -> "Table[Any]":
        """Return a table holding ``rows``; short rows are padded with ``None``.

        ``coalesce="falsy"`` also turns falsy values (``0``, ``""``, ``False``)
        into ``None``; ``coalesce="none"`` keeps them. Defaults to the
        configured mode.
        """
        keep = _coalescer(coalesce)
        height = len(rows)
        width = max((len(row) for row in rows), default=0)
        logger.debug("building %dx%d table from rows", width, height)
        return cls(width, height, lambda x, y: keep(rows[y][x]) if x < len(rows[y]) else None)

    @classmethod
    def from_cols(cls, cols: Sequence[Sequence[Any]], coalesce: Optional[str] = None) -> "Table[Any]":
        """Return a table holding ``cols``; short columns are padded with ``None``."""
        keep = _coalescer(coalesce)
        width = len(cols)
        height = max((len(col) for col in cols), default=0)
        logger.debug("building %dx%d table from cols", width, height)
        return cls(width, height, lambda x, y: keep(cols[x][y]) if y < len(cols[x]) else None)


__all__ = ["Table", "TableIndexError", "InvalidCoordinatesError", "format_cell"]
