"""Package logger for mcflow.

Every module logs through ``get_logger(__name__)``, so all records end up under
the ``mcflow`` logger. That logger owns a single stderr handler; stdout is left
to the solver's results.
"""

import logging
import sys

ROOT_LOGGER_NAME = "mcflow"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _configure_root_logger() -> logging.Logger:
    """Attach the stderr handler to the ``mcflow`` logger once and return it."""
    global _configured

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return root_logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.handlers = [handler]
    root_logger.setLevel(logging.INFO)
    # pytest's caplog listens on the root logger
    root_logger.propagate = True

    _configured = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, inheriting the ``mcflow`` level."""
    _configure_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``mcflow`` logger and of its handler.

    Args:
        level: A ``logging`` level such as ``logging.DEBUG``.
    """
    root_logger = _configure_root_logger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the handler and level so the next call configures from scratch."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


_configure_root_logger()
