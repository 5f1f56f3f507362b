"""Filesystem helpers: existence checks with a resolved-path fallback."""

from __future__ import annotations

from pathlib import Path


class NotFoundError(FileNotFoundError):
    """Raised when a path exists under neither the joined nor the resolved form."""


def _join(segments: tuple[str | Path, ...]) -> Path:
    return Path(*segments) if segments else Path(".")


def exists(*segments: str | Path) -> Path:
    """
    Return the first existing candidate for the joined path segments.

    The joined path is tried first, then its user-expanded absolute form.
    Raises NotFoundError when neither exists.
    """
    path = _join(segments)
    if path.exists():
        return path
    resolved = path.expanduser().resolve()
    if resolved.exists():
        return resolved
    raise NotFoundError(f"File does not exist at {resolved}.")


def is_file(*segments: str | Path) -> bool:
    try:
        return _join(segments).is_file()
    except OSError:
        return False


def is_directory(*segments: str | Path) -> bool:
    try:
        return _join(segments).is_dir()
    except OSError:
        return False
