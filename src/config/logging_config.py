# src/config/logging_config.py

"""Logging setup for the inventory tracker.

Every module logs under the ``inventory_tracker`` namespace:

``inventory_tracker.filters``
    Rejected form values, at DEBUG.
``inventory_tracker.store``
    Adds, updates and removals of in-memory products.
``inventory_tracker.storage``
    Loads and saves of the persisted inventory, including corrupt or
    unavailable storage.
``inventory_tracker.controller``
    User actions and whether their change reached storage.
``inventory_tracker.ui`` / ``inventory_tracker.cli``
    Front-end events, dialog failures and exports.

A launch writes all of it to ``logs/run_<timestamp>.log``; only warnings
and errors reach the terminal, where Textual would otherwise be drawing.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

ROOT_LOGGER_NAME = "inventory_tracker"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_TERMINAL_FORMAT = "%(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _run_log_path(logs_dir: Path) -> Path:
    logs_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return logs_dir / f"run_{stamp}.log"


def _build_file_handler(log_file: Path) -> logging.Handler:
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def _build_terminal_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter(_TERMINAL_FORMAT))
    return handler


def setup_logging() -> Path:
    """Attach the run's file and terminal handlers to ``inventory_tracker``.

    Safe to call more than once; later calls leave the existing handlers
    in place.

    Returns:
        Path of the log file for this run.
    """
    log_file = _run_log_path(Settings.LOGS_DIR)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG)
    if root.handlers:
        return log_file

    root.addHandler(_build_file_handler(log_file))
    root.addHandler(_build_terminal_handler())
    root.info("Logging to %s", log_file)
    return log_file
