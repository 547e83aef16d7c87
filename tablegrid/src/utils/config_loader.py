"""Loads YAML/JSON configuration files and global table settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

COALESCE_MODES = ("falsy", "none")


def load_config(path: str) -> Any:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f)
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_table_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the table configuration, or an empty mapping if none exists."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "table_config.yaml"
    if path.exists():
        return load_config(str(path)) or {}
    return {}


TABLE_CONFIG: Dict[str, Any] = load_table_config()
COALESCE_MODE: str = str(TABLE_CONFIG.get("coalesce", "falsy"))
NULL_TEXT: str = str(TABLE_CONFIG.get("null_text", "null"))
CELL_SEPARATOR: str = str(TABLE_CONFIG.get("separator", " | "))
LOG_LEVEL: str = str(TABLE_CONFIG.get("log_level", "INFO")).upper()
LOG_FILE: Optional[str] = TABLE_CONFIG.get("log_file") or None


def set_coalesce_mode(value: str) -> None:
    """Override the default coalesce mode used by ``from_rows``/``from_cols``."""
    global COALESCE_MODE
    if value not in COALESCE_MODES:
        raise ValueError(f"Unknown coalesce mode: {value!r}")
    COALESCE_MODE = value
    TABLE_CONFIG["coalesce"] = value


def set_null_text(value: str) -> None:
    """Override the text rendered for empty cells."""
    global NULL_TEXT
    NULL_TEXT = value
    TABLE_CONFIG["null_text"] = value


def set_separator(value: str) -> None:
    """Override the separator placed between rendered cells."""
    global CELL_SEPARATOR
    CELL_SEPARATOR = value
    TABLE_CONFIG["separator"] = value


def set_log_level(value: str) -> None:
    """Override the level applied by ``get_logger``."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    TABLE_CONFIG["log_level"] = LOG_LEVEL


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "coalesce": COALESCE_MODE,
        "null_text": NULL_TEXT,
        "separator": CELL_SEPARATOR,
        "log_level": LOG_LEVEL,
        "log_file": LOG_FILE,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v!r}")
