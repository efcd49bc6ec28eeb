"""Infrastructure: logging setup."""

from binarydigit.infrastructure.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
