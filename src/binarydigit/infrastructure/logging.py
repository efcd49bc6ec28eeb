"""
Logging setup.

Provides consistent logging across the codebase.
"""

import logging
import sys
from typing import Final, Optional


DEFAULT_LOG_LEVEL: Final[str] = "INFO"

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    format_string: Optional[str] = None,
) -> None:
    """
    Setup logging to stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses default if None)

    Raises:
        ValueError: If level is not a known logging level name
    """
    level_value = getattr(logging, level.upper(), None)
    if not isinstance(level_value, int):
        raise ValueError(f"Unknown logging level: {level}")

    logging.basicConfig(
        level=level_value,
        format=format_string or DEFAULT_LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
