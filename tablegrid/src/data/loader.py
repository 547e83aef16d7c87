"""Read tables from JSON or YAML documents."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from tablegrid.src.core.table import Table
from tablegrid.src.utils.config_loader import load_config
from tablegrid.src.utils.logger import get_logger

logger = get_logger(__name__)


def load_table(path: str | Path, orientation: str = "rows", coalesce: Optional[str] = None) -> Table:
    """Load a :class:`Table` from ``path``.

    Parameters
    ----------
    path:
        ``.json``, ``.yaml`` or ``.yml`` file.
    orientation:
        ``"rows"`` or ``"cols"``; how a bare list of lists is interpreted.
    coalesce:
        Passed through to :meth:`Table.from_rows` / :meth:`Table.from_cols`.

    Returns
    -------
    Table
        The loaded table. A mapping document holding a ``"rows"`` or
        ``"cols"`` key overrides ``orientation``.
    """

    doc = load_config(str(path))
    if isinstance(doc, dict):
        if "rows" in doc:
            orientation, doc = "rows", doc["rows"]
        elif "cols" in doc:
            orientation, doc = "cols", doc["cols"]
        else:
            raise ValueError(f"{path}: expected a 'rows' or 'cols' key")
    if not isinstance(doc, list) or any(not isinstance(line, list) for line in doc):
        raise ValueError(f"{path}: expected a list of lists")
    if orientation == "rows":
        table = Table.from_rows(doc, coalesce=coalesce)
    elif orientation == "cols":
        table = Table.from_cols(doc, coalesce=coalesce)
    else:
        raise ValueError(f"Unknown orientation: {orientation!r}")
    logger.info("loaded %dx%d table from %s", table.width, table.height, path)
    return table


__all__ = ["load_table"]
