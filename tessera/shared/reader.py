"""
tessera.shared.reader

Read a file, optionally decode it as JSON, and report failures through the
console. Each failure either ends the process or comes back as an absent
``ReadResult``, depending on ``ReadFileOptions.exit_on_err``.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from tessera.base.file_io import read_text
from tessera.base.fs import NotFoundError, exists
from tessera.base.logging import get_logger
from tessera.console.console import Console, get_console

log = get_logger(__name__)

EXIT_FAILURE = 1


class ReadFailure(Enum):
    NOT_FOUND = "not_found"
    READ = "read"
    PARSE = "parse"


@dataclass(frozen=True)
class ReadFileOptions:
    """
    Options for ``read_file``.

    Attributes:
        parse: Decode the content as JSON. When False the raw text is returned.
        verbose: Also report the underlying exception on failure.
        exit_on_err: Exit the process on failure instead of returning an absent result.
        exists_msg: Replaces the default message for a missing file.
        read_msg: Replaces the default message for a read error.
        parse_msg: Replaces the default message for invalid JSON.
    """

    parse: bool = True
    verbose: bool = False
    exit_on_err: bool = True
    exists_msg: Optional[str] = None
    read_msg: Optional[str] = None
    parse_msg: Optional[str] = None


@dataclass(frozen=True)
class ReadResult:
    """Either a value read from ``path`` or the stage at which reading failed."""

    path: Path
    value: Any = None
    failure: Optional[ReadFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self, default: Any = None) -> Any:
        return self.value if self.ok else default


def _fail(
    path: Path,
    failure: ReadFailure,
    message: str,
    exc: BaseException,
    options: ReadFileOptions,
    console: Optional[Console],
) -> ReadResult:
    console = console or get_console()
    console.error(message)
    if options.verbose:
        console.error(exc)
    if options.exit_on_err:
        log.debug("Exiting after %s failure on %s", failure.value, path)
        sys.exit(EXIT_FAILURE)
    return ReadResult(path=path, failure=failure)


def read_file(
    path: str | Path,
    options: Optional[ReadFileOptions] = None,
    *,
    console: Optional[Console] = None,
) -> ReadResult:
    """
    Read the file at ``path``.

    Args:
        path: A filesystem path. Relative paths fall back to their resolved form.
        options: Parsing and failure behavior, see ReadFileOptions.
        console: Where diagnostics go. Defaults to the process-wide console,
            which is only built once a failure has to be reported.

    Returns:
        A ReadResult holding the parsed JSON value, or the raw text when
        ``parse`` is off. On failure with ``exit_on_err`` off, an absent result
        tagged with the failing stage.
    """
    options = options or ReadFileOptions()
    target = Path(path)

    try:
        target = exists(target)
    except NotFoundError as exc:
        message = options.exists_msg or f"File does not exist at {target}."
        return _fail(target, ReadFailure.NOT_FOUND, message, exc, options, console)

    try:
        content = read_text(target)
    except (OSError, UnicodeDecodeError) as exc:
        message = options.read_msg or f"Failed to read file at {target}: {exc}"
        return _fail(target, ReadFailure.READ, message, exc, options, console)

    if not options.parse:
        return ReadResult(path=target, value=content)

    try:
        value = json.loads(content)
    except json.JSONDecodeError as exc:
        message = options.parse_msg or f"Failed to parse file read from {target}: {exc}"
        return _fail(target, ReadFailure.PARSE, message, exc, options, console)

    log.debug("Read %s (%d chars)", target, len(content))
    return ReadResult(path=target, value=value)
