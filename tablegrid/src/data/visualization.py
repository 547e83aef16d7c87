"""Visualization utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt

from tablegrid.src.core.array_bridge import table_to_array
from tablegrid.src.core.table import Table


def visualize(table: Table, fill_value: Any = 0, out_file: str | Path | None = None, title: str | None = None) -> None:
    """Display numeric ``table`` as a heat map, or save it to ``out_file``."""
    fig, ax = plt.subplots()
    ax.imshow(table_to_array(table, fill_value=fill_value, dtype=float), cmap="viridis", interpolation="none")
    if title:
        ax.set_title(title)
    ax.axis("off")
    if out_file:
        out = Path(out_file)
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out)
        plt.close(fig)
    else:
        plt.show()
