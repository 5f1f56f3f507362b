"""
tessera.console.prefix

Line prefix for console output: ``<pid> │ <MM/DD/YYYY> │ <hh:mm:ss A>``.

Which parts appear is decided by a frozen ``LogPrefixConfig`` that is built once
(see ``tessera.shared.loader.load_prefix_config``) and passed in explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from tessera.date import format_date

from .colors import color_text

SEPARATOR = " │ "
DATE_TEMPLATE = "MM/DD/YYYY"
TIME_TEMPLATE = "hh:mm:ss A"


@dataclass(frozen=True)
class LogPrefixConfig:
    show_pid: bool = True
    show_date: bool = True
    show_time: bool = True


@dataclass(frozen=True)
class LogPrefix:
    text: str
    plain: str

    @property
    def indent(self) -> str:
        return " " * len(self.plain)

    def __str__(self) -> str:
        return self.text


def log_prefix(
    config: LogPrefixConfig,
    now: Optional[datetime] = None,
    pid: Optional[int] = None,
) -> LogPrefix:
    now = now or datetime.now()
    parts: List[Tuple[str, str]] = []

    if config.show_pid:
        process_id = str(pid if pid is not None else os.getpid())
        parts.append((process_id, color_text(process_id, "green")))
    if config.show_date:
        stamp = format_date(now, DATE_TEMPLATE)
        parts.append((stamp, stamp))
    if config.show_time:
        stamp = format_date(now, TIME_TEMPLATE)
        parts.append((stamp, stamp))

    plain = SEPARATOR.join(raw for raw, _ in parts)
    text = color_text(SEPARATOR, "gray").join(colored for _, colored in parts)
    return LogPrefix(text=text, plain=plain)
