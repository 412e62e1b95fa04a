"""Logging setup for the vestalia package logger.

Library modules only call logging.getLogger(__name__); the package logger
carries a NullHandler so nothing is printed unless the application asks for
it. configure_logging() attaches a stdout handler to the "vestalia" logger
only and never touches the root logger or handlers owned by the application.
"""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import AppConfig

PACKAGE_LOGGER = "vestalia"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _VestaliaHandler(logging.StreamHandler):
    """Stdout handler installed by configure_logging(), replaced on reconfigure."""


def configure_logging(config: "AppConfig") -> logging.Logger:
    """Send vestalia log records to stdout at the configured level.

    Calling it again replaces the handler it installed earlier rather than
    adding another one.

    Args:
        config: Application configuration

    Returns:
        The configured "vestalia" logger

    Example:
        >>> from vestalia.config import AppConfig
        >>> configure_logging(AppConfig.from_env())
    """
    log_level = getattr(logging, config.log_level, logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    for handler in list(package_logger.handlers):
        if isinstance(handler, _VestaliaHandler):
            package_logger.removeHandler(handler)

    handler = _VestaliaHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(handler)
    return package_logger
