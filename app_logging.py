"""Logging configuration helpers."""

import logging
from pathlib import Path

LOG_PATH = Path("macro_tracker.log")


def configure_logging(path=LOG_PATH, level: int = logging.INFO) -> None:
    """Send application logs to a file; the terminal belongs to the UI."""
    logger = logging.getLogger("macro_tracker")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
