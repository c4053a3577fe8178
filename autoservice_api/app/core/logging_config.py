"""
Logging configuration for the application.

``setup_logging`` attaches a console handler, and optionally a file
handler, to the root logger.  Level and file default to
``settings.log_level`` and ``settings.log_file``.  Handlers installed
here are tagged so a later call replaces them instead of stacking
duplicates; handlers added by anything else (uvicorn, pytest) are left
in place.
"""

import logging
from pathlib import Path
from typing import List, Optional

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_TAG = "_autoservice_handler"


def _owned_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [handler for handler in logger.handlers if getattr(handler, _HANDLER_TAG, False)]


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : Optional[str]
        Logging level name, case insensitive.  Defaults to
        ``settings.log_level``; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File to mirror log records into, resolved against the current
        working directory.  Defaults to ``settings.log_file``.
    """
    level = level or settings.log_level
    logfile = logfile or settings.log_file

    logger = logging.getLogger()
    for handler in _owned_handlers(logger):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)
