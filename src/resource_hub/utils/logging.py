"""Logging helpers shared by every module."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger (use `logger = get_logger(__name__)`)."""
    return logging.getLogger(name)


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a single stderr handler.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR)

    Raises:
        ValueError: If level is not a known level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_resource_hub", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._resource_hub = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(numeric_level)
