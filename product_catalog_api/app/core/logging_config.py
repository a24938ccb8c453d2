"""
Logging configuration for the API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it runs.  When the root
logger already has handlers, for instance under pytest, only the level
of the ``product_catalog_api`` logger is adjusted so ``LOG_LEVEL`` still
takes effect for this package.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PACKAGE_LOGGER = "product_catalog_api"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the process.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to also write log records to.  Resolved relative
        to the current working directory.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
