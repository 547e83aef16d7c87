from __future__ import annotations

"""Command line viewer for tables stored as JSON or YAML.

The viewer loads a table, applies the requested transforms in order and prints
the column-aligned rendering::

    python table_viewer.py board.yaml --transform cw --transform flip-h

With ``--plot`` the (numeric) result is also written as an image.
"""

import argparse
from typing import List, Optional

from tablegrid.src.core.table import Table
from tablegrid.src.data.loader import load_table
from tablegrid.src.utils import config_loader
from tablegrid.src.utils.logger import get_logger

logger = get_logger(__name__)

TRANSFORMS = {
    "cw": Table.clockwise,
    "ccw": Table.counterclockwise,
    "flip-h": Table.flip_horizontal,
    "flip-v": Table.flip_vertical,
}


def apply_transforms(table: Table, names: List[str]) -> Table:
    """Return ``table`` with each named transform applied in order."""
    for name in names:
        table = TRANSFORMS[name](table)
    return table


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Render a table stored as JSON or YAML")
    parser.add_argument("path")
    parser.add_argument("--cols", action="store_true", help="treat a bare list of lists as columns")
    parser.add_argument("--transform", action="append", default=[], choices=sorted(TRANSFORMS))
    parser.add_argument("--coalesce", choices=config_loader.COALESCE_MODES)
    parser.add_argument("--separator", help="text placed between cells")
    parser.add_argument("--plot", help="save a heat map of the result to this file")
    args = parser.parse_args(argv)

    try:
        table = load_table(args.path, orientation="cols" if args.cols else "rows", coalesce=args.coalesce)
    except (OSError, ValueError) as exc:
        logger.warning("could not load %s: %s", args.path, exc)
        return 1

    table = apply_transforms(table, args.transform)
    print(table.render(separator=args.separator), end="")

    if args.plot:
        from tablegrid.src.data.visualization import visualize

        try:
            visualize(table, out_file=args.plot, title=args.path)
        except ValueError as exc:
            logger.warning("could not plot %s: %s", args.path, exc)
            return 1
        print(f"saved plot to {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
