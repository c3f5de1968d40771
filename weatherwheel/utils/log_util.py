"""
log_util.py

Shared logger factory. Every module calls ``app_logger(__name__)`` once at
import time and logs through the returned standard-library logger.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("weatherwheel")
    root.addHandler(handler)
    root.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())
    root.propagate = False
    _configured = True


def app_logger(name: str) -> logging.Logger:
    """
    Get a logger that writes through the shared ``weatherwheel`` handler.

    :param name: Usually the caller's ``__name__``
    :return: Configured logger
    """
    _configure_root()
    if not name.startswith("weatherwheel"):
        name = f"weatherwheel.{name}"
    return logging.getLogger(name)
