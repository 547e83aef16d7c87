"""Logging setup shared by the table modules."""

from __future__ import annotations

import logging
from pathlib import Path

from tablegrid.src.utils import config_loader

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_logger(name: str, file_path: str | None = None, level: str | None = None) -> logging.Logger:
    """Return a logger for ``name`` with a stream handler and optional file handler.

    ``file_path`` defaults to the configured ``log_file`` and ``level`` to the
    configured ``log_level``. Handlers are only attached the first time a name
    is requested.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        formatter = logging.Formatter(_FORMAT)
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        logger.addHandler(stream)
        file_path = file_path or config_loader.LOG_FILE
        if file_path:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(file_path, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    logger.setLevel((level or config_loader.LOG_LEVEL).upper())
    return logger
