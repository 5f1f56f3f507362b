"""
tessera.base.logging

Typed logging for the tessera utilities.

Features:
 - Unified setup for Rich + standard logging
 - Optional file logging (per run)
 - Colorized, emoji-enhanced level output
 - Console-styled messages: records may carry an ANSI-styled twin of their
   plain message (`console_styled`); only console handlers render it
 - Config-driven defaults (logging level, Rich toggle, log directory)
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from rich.logging import RichHandler
from rich.text import Text


# ----------------------------------------------------------------------
# LEVEL STYLE METADATA
# ----------------------------------------------------------------------

ANSI_RESET = "\033[0m"

LEVEL_STYLES: Dict[int, Dict[str, str]] = {
    logging.DEBUG: {"emoji": "🐛", "ansi": "\033[36m", "rich": "bright_cyan"},
    logging.INFO: {"emoji": "ℹ️", "ansi": "\033[32m", "rich": "green"},
    logging.WARNING: {"emoji": "⚠️", "ansi": "\033[33m", "rich": "yellow"},
    logging.ERROR: {"emoji": "❌", "ansi": "\033[31m", "rich": "red"},
    logging.CRITICAL: {"emoji": "💥", "ansi": "\033[95m", "rich": "bold magenta"},
}
DEFAULT_STYLE = LEVEL_STYLES[logging.INFO]

ROOT_LOGGER_NAME = "tessera"
CONSOLE_STYLED_ATTR = "console_styled"

_ORIGINAL_RECORD_FACTORY = logging.getLogRecordFactory()


def _tessera_record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
    record = _ORIGINAL_RECORD_FACTORY(*args, **kwargs)
    style = LEVEL_STYLES.get(record.levelno, DEFAULT_STYLE)
    record.level_emoji = style.get("emoji", "")  # type: ignore[attr-defined]
    record.level_color = style.get("ansi", "")  # type: ignore[attr-defined]
    return record


logging.setLogRecordFactory(_tessera_record_factory)


# ----------------------------------------------------------------------
# FORMATTERS
# ----------------------------------------------------------------------

class ColorEmojiFormatter(logging.Formatter):
    """
    Console formatter that injects colored level names and emojis, and prints
    the ``console_styled`` form of a message when the record carries one.
    """

    def format(self, record: logging.LogRecord) -> str:
        original_msg, original_args = record.msg, record.args
        emoji = getattr(record, "level_emoji", "")
        ansi_color = getattr(record, "level_color", "")

        display = f"{emoji} {record.levelname}" if emoji else record.levelname
        if ansi_color:
            display = f"{ansi_color}{display}{ANSI_RESET}"

        record.level_display = display  # type: ignore[attr-defined]
        styled = getattr(record, CONSOLE_STYLED_ATTR, None)
        if styled is not None:
            record.msg, record.args = styled, None
        try:
            return super().format(record)
        finally:
            record.msg, record.args = original_msg, original_args
            del record.level_display  # type: ignore[attr-defined]


class EmojiFormatter(logging.Formatter):
    """File formatter; always writes the plain message with the level emoji."""

    def format(self, record: logging.LogRecord) -> str:
        if not getattr(record, "level_emoji", ""):
            style = LEVEL_STYLES.get(record.levelno, DEFAULT_STYLE)
            record.level_emoji = style.get("emoji", "")  # type: ignore[attr-defined]
        return super().format(record)


class TesseraRichHandler(RichHandler):
    """Rich console handler with emoji-enhanced level column."""

    def get_level_text(self, record: logging.LogRecord) -> Text:
        style = LEVEL_STYLES.get(record.levelno, DEFAULT_STYLE)
        emoji = getattr(record, "level_emoji", "")
        style_name = style.get("rich", "")

        text = Text()
        if emoji:
            text.append(f"{emoji} ", style=style_name or None)
        text.append(record.levelname, style=style_name)
        return text

    def render_message(self, record: logging.LogRecord, message: str) -> Any:
        styled = getattr(record, CONSOLE_STYLED_ATTR, None)
        if styled is not None:
            return Text.from_ansi(styled)
        return super().render_message(record, message)


# ----------------------------------------------------------------------
# CONFIG-DRIVEN DEFAULTS
# ----------------------------------------------------------------------

def _normalize_level(value: Any) -> str:
    if isinstance(value, str):
        candidate = value.strip().upper()
        if candidate in logging._nameToLevel:  # type: ignore[attr-defined]
            return candidate
    elif isinstance(value, int):
        label = logging.getLevelName(value)
        if isinstance(label, str) and not label.startswith("Level "):
            return label
    return "INFO"


def _normalize_use_rich(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"auto", "default", ""}:
            return None
        if lowered in {"true", "yes", "1", "on"}:
            return True
        if lowered in {"false", "no", "0", "off"}:
            return False
    return None


def _load_default_logging_settings(config_path: Optional[Path | str] = None) -> Dict[str, Any]:
    from tessera.shared.loader import load_logging_config

    raw = load_logging_config(config_path)
    return {
        "level": _normalize_level(raw.get("level")),
        "use_rich": _normalize_use_rich(raw.get("use_rich")),
        "log_dir": raw.get("log_dir"),
        "file_prefix": raw.get("file_prefix"),
    }


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


# ----------------------------------------------------------------------
# BASE LOGGER SETUP
# ----------------------------------------------------------------------

def setup_logging(
    level: str | int | None = None,
    use_rich: Optional[bool] = None,
    log_dir: Optional[Path | str] = None,
    file_prefix: Optional[str] = None,
    config_path: Optional[Path | str] = None,
) -> logging.Logger:
    """
    Configure and return the root tessera logger.

    Args:
        level: Desired logging level. Defaults to the config file value (INFO if unset).
        use_rich: Force-enable or disable the Rich handler. None honors config, then
            falls back to Rich only when stdout is a terminal.
        log_dir: Directory for a per-run log file. No file is written when neither
            this nor the config file names one.
        file_prefix: Prefix for generated log filenames.
        config_path: Explicit config file to read defaults from.
    """
    defaults = _load_default_logging_settings(config_path)
    resolved_level = _normalize_level(level if level is not None else defaults.get("level"))
    resolved_use_rich = use_rich if use_rich is not None else defaults.get("use_rich")
    if resolved_use_rich is None:
        resolved_use_rich = sys.stdout.isatty()
    resolved_log_dir = log_dir or defaults.get("log_dir")
    resolved_file_prefix = file_prefix or defaults.get("file_prefix") or "tessera"

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(resolved_level)

    # Rebuild from scratch so repeated calls pick up new settings.
    _reset_handlers(logger)

    console_handler: logging.Handler
    if resolved_use_rich:
        console_handler = TesseraRichHandler(
            rich_tracebacks=True,
            markup=False,
            show_time=True,
            show_path=False,
            log_time_format="[%X]",
        )
    else:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            ColorEmojiFormatter(
                fmt="%(asctime)s %(level_display)s %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
    logger.addHandler(console_handler)

    log_file_path: Optional[Path] = None
    if resolved_log_dir:
        directory = Path(resolved_log_dir).expanduser()
        directory.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_file_path = directory / f"{resolved_file_prefix}_{timestamp}.log"

        file_handler = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            EmojiFormatter(
                fmt="%(asctime)s %(level_emoji)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    logger.propagate = False
    logger._initialized = True  # type: ignore[attr-defined]
    logger.debug(
        "Logger initialized at level %s (Rich=%s)",
        resolved_level,
        "ON" if resolved_use_rich else "OFF",
    )
    if log_file_path is not None:
        logger.info("📄 Log file created at: %s", log_file_path.resolve())

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Retrieve a namespaced tessera logger (configured later via setup_logging)."""
    base = logging.getLogger(ROOT_LOGGER_NAME)

    if not getattr(base, "_initialized", False) and not base.handlers:
        base.addHandler(logging.NullHandler())

    if not name or name == ROOT_LOGGER_NAME:
        return base
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = name[len(ROOT_LOGGER_NAME) + 1:]

    return base.getChild(name)
