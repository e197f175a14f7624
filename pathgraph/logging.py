"""Logging for pathgraph.

All package loggers live under the ``pathgraph`` logger, which gets one
stdout handler the first time a module asks for a logger. The CLI adjusts
verbosity with ``set_global_log_level``.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pathgraph"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``pathgraph`` logger.

    Only the first call has an effect until ``reset_logging`` runs.

    Args:
        level: Level of the ``pathgraph`` logger.
        format_string: Record format; ``DEFAULT_FORMAT`` if omitted.
        handler: Handler to attach; a stdout ``StreamHandler`` if omitted.
    """
    global _configured
    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = handler if handler is not None else logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, configuring ``pathgraph`` if needed."""
    setup_root_logger()
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the ``pathgraph`` logger and its handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the handler and level so the next call configures afresh."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
