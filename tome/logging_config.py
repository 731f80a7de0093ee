"""
Logging configuration for tome

Library modules log through ``logging.getLogger("tome")`` children and never
install handlers; the CLI calls :func:`setup_logging` once at startup.
"""

import io
import logging
import sys

LOGGER_NAME = "tome"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return the tome logger, or a child of it

    Args:
        name: Optional child name (e.g., "anchors" gives "tome.anchors")
    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def setup_logging(level=logging.WARNING, stream=None):
    """
    Configure logging for tome

    Args:
        level: Logging level (default: WARNING)
        stream: Stream to write to (default: UTF-8 wrapper around stderr)

    Returns:
        logging.Logger: The configured "tome" logger
    """
    base_logger = get_logger()
    base_logger.setLevel(level)

    # Remove existing handlers
    base_logger.handlers = []

    if stream is None:
        # Stdout belongs to the reader screen; log lines go to stderr.
        stream = io.TextIOWrapper(
            sys.stderr.buffer, encoding="utf-8", errors="replace", write_through=True
        )
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)

    formatter = logging.Formatter("%(levelname)8s %(message)s")
    handler.setFormatter(formatter)

    base_logger.addHandler(handler)

    return base_logger
