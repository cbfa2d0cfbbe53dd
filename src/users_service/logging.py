"""Console logging setup for the users service."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "users_service.console"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the ``users_service`` logger.

    Safe to call more than once: the level is updated and no second
    handler is added.

    Args:
        level: Level name or number for the package logger.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger("users_service")
    package_logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    return package_logger
