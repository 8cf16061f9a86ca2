"""
Logging Utilities

The library only creates module loggers; applications that want to see
its output call configure_logging().
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the jsonapi_client namespace

    Args:
        name: Logger name (usually module or component name)
    """
    if not name.startswith("jsonapi_client"):
        name = f"jsonapi_client.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING", format_string: Optional[str] = None) -> None:
    """
    Attach a stdout handler to the jsonapi_client logger

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
    """
    logger = logging.getLogger("jsonapi_client")
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        if getattr(handler, "_jsonapi_client", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    handler._jsonapi_client = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
