"""
app/core/logger.py

Logging setup shared by the whole service.
Modules obtain their logger with:

    from app.core.logger import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at INFO.
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "pymongo")


def _level() -> int:
    return logging.DEBUG if settings.debug else logging.INFO


def _configure_root_logger() -> None:
    """Attach a stdout handler to the root logger, once, at import time."""
    root = logging.getLogger()
    if root.handlers:
        # Already configured (uvicorn --log-config, pytest's caplog, ...).
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_level())
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root.setLevel(_level())
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_root_logger()


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; the root handler is already in place."""
    return logging.getLogger(name)
