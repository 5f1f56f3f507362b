"""Colorized console wrapper and its line prefix."""

from .colors import color_text
from .console import Console, debug, error, get_console, info, warn
from .prefix import LogPrefix, LogPrefixConfig, log_prefix

__all__ = [
    "color_text",
    "Console",
    "debug",
    "error",
    "get_console",
    "info",
    "warn",
    "LogPrefix",
    "LogPrefixConfig",
    "log_prefix",
]
