"""Configuration loading and the file reader."""

from .loader import load_config, load_logging_config, load_prefix_config
from .reader import ReadFailure, ReadFileOptions, ReadResult, read_file

__all__ = [
    "load_config",
    "load_logging_config",
    "load_prefix_config",
    "ReadFailure",
    "ReadFileOptions",
    "ReadResult",
    "read_file",
]
