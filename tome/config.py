"""Shared configuration for tome."""

import logging
import os

# Bytes of surrounding text recorded on each side of an anchor's target
CONTEXT_WINDOW = 48

# Lines shown by the reader when the terminal height cannot be determined
DEFAULT_VIEW_HEIGHT = 24

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_log_level(name: str) -> int:
    """Validate a log level name and return its numeric level.

    Args:
        name: Level name, case-insensitive (e.g., "debug", "INFO")

    Returns:
        The numeric logging level

    Raises:
        ValueError: If the name is not a known level
    """
    upper = name.strip().upper()
    if upper not in LOG_LEVEL_NAMES:
        raise ValueError(
            f"Invalid log level: '{name}'. Expected one of {', '.join(LOG_LEVEL_NAMES)}"
        )
    return logging.getLevelName(upper)


def validate_view_height(height: int) -> int:
    """Validate the number of lines the reader shows per page.

    Args:
        height: Requested height in lines

    Returns:
        The height, unchanged

    Raises:
        ValueError: If height is smaller than one line
    """
    if height < 1:
        raise ValueError(f"Invalid view height: {height}. Expected at least 1 line")
    return height


def log_level_from_env() -> int:
    """Read TOME_LOG_LEVEL from the environment (default: WARNING)."""
    return validate_log_level(os.environ.get("TOME_LOG_LEVEL", "WARNING"))


def view_height_from_env() -> int:
    """Read TOME_VIEW_HEIGHT from the environment (default: DEFAULT_VIEW_HEIGHT)."""
    raw = os.environ.get("TOME_VIEW_HEIGHT")
    if raw is None:
        return DEFAULT_VIEW_HEIGHT
    try:
        height = int(raw)
    except ValueError as e:
        raise ValueError(
            f"Invalid TOME_VIEW_HEIGHT: '{raw}'. Expected a positive integer"
        ) from e
    return validate_view_height(height)
