"""Low-level shared utilities for tessera."""

from .fs import NotFoundError, exists, is_directory, is_file
from .logging import get_logger, setup_logging

__all__ = [
    "NotFoundError",
    "exists",
    "is_directory",
    "is_file",
    "get_logger",
    "setup_logging",
]
