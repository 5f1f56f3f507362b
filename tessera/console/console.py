"""
tessera.console.console

Colorizing console wrapper on top of the tessera loggers.

Every value is rendered on its own (structured values as indented JSON,
scalars as ``str``), prefixed with the log prefix and written to the
``tessera.console`` logger at the matching level. The record message stays
plain; the severity-colored line rides along as ``record.console_styled`` for
the console handlers to print.
"""

from __future__ import annotations

import json
import logging
import traceback
from collections.abc import Mapping, Set
from datetime import datetime
from functools import lru_cache
from typing import Any, Callable, Optional

from tessera.base.logging import CONSOLE_STYLED_ATTR, get_logger

from .colors import color_text
from .prefix import LogPrefixConfig, log_prefix

JSON_INDENT = 3


def _with_prefix(prefix: str, body: str) -> str:
    return f"{prefix} {body}" if prefix else body


def _is_structured(value: Any) -> bool:
    return isinstance(value, (Mapping, Set, list, tuple))


def _render(value: Any) -> str:
    if _is_structured(value):
        try:
            return json.dumps(value, indent=JSON_INDENT)
        except (TypeError, ValueError):
            return repr(value)
    return str(value)


def _render_error(value: Any) -> str:
    if isinstance(value, BaseException):
        return "".join(traceback.format_exception(type(value), value, value.__traceback__)).rstrip()
    return _render(value)


class Console:
    """Console with ``debug``/``info``/``warn``/``error`` that log colored, prefixed lines."""

    def __init__(
        self,
        prefix_config: Optional[LogPrefixConfig] = None,
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.prefix_config = prefix_config or LogPrefixConfig()
        self.logger = logger or get_logger("console")
        self._clock = clock

    def _log(self, level: int, rendered: list[str], color: str) -> None:
        prefix = log_prefix(self.prefix_config, now=self._clock())
        plain = " ".join(_with_prefix(prefix.plain, text) for text in rendered)
        styled = " ".join(_with_prefix(prefix.text, color_text(text, color)) for text in rendered)
        self.logger.log(level, plain, extra={CONSOLE_STYLED_ATTR: styled})

    def _emit(self, level: int, color: str, values: tuple[Any, ...]) -> None:
        if self.logger.isEnabledFor(level):
            self._log(level, [_render(value) for value in values], color)

    def debug(self, *values: Any) -> None:
        self._emit(logging.DEBUG, "gray", values)

    def info(self, *values: Any) -> None:
        self._emit(logging.INFO, "cyan", values)

    def warn(self, *values: Any) -> None:
        self._emit(logging.WARNING, "yellow", values)

    def error(self, *values: Any) -> None:
        # one record per value so each traceback keeps its own block
        for value in values:
            self._log(logging.ERROR, [_render_error(value)], "red")


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Process-wide console, configured once from the loaded settings."""
    from tessera.shared.loader import load_prefix_config

    return Console(load_prefix_config())


def debug(*values: Any) -> None:
    get_console().debug(*values)


def info(*values: Any) -> None:
    get_console().info(*values)


def warn(*values: Any) -> None:
    get_console().warn(*values)


def error(*values: Any) -> None:
    get_console().error(*values)
