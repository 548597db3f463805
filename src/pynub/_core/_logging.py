"""Logger configuration for pynub applications and tools."""

import logging
import os
import sys

LOG_LEVEL_ENV = "PYNUB_LOG_LEVEL"


def setup_logger(
    name: str = "pynub",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger writing to stdout.

    The library itself only ever attaches a `NullHandler`, call this from scripts that want to see pynub logs.

    Args:
        name: Logger name, `pynub` configures the whole package.
        level: Log level name, defaults to the `PYNUB_LOG_LEVEL` env var or `WARNING`.
        format_string: Custom format string.

    Returns:
        The configured logger.
    """
    level = level or os.getenv(LOG_LEVEL_ENV, "WARNING")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure once
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(getattr(logging, level.upper()))

    return logger
