"""Logging configuration for fleetdocs.

The engine itself only emits records (catalog loads at INFO, skipped
documents and report summaries at DEBUG); the host application or a
script decides where they go by calling setup_logging().
"""

import logging
import sys

from fleetdocs.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | None = None) -> None:
    """Configure the fleetdocs logger hierarchy.

    Level is DEBUG when settings.debug is True, otherwise INFO, unless an
    explicit level is passed. Output goes to stdout. Calling it twice does
    not add a second handler.

    Args:
        level: Optional logging level overriding the settings-derived one.
    """
    if level is None:
        level = logging.DEBUG if get_settings().debug else logging.INFO
    package_logger = logging.getLogger("fleetdocs")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
