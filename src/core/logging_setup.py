"""
Root logger configuration.
Compact lines in production, timestamps and module names in development.
"""
from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "INFO", env: str = "production") -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)

    if env == "development":
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    else:
        handler.setFormatter(logging.Formatter(fmt="[%(levelname)s] %(message)s"))

    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # Quiet noisy libraries
    for lib in ("PySide6", "mutagen"):
        logging.getLogger(lib).setLevel(logging.WARNING)
