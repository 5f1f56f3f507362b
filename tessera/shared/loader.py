"""
Shared configuration loading and validation helpers.

Provides:
 - `load_config`: basic YAML loader
 - `load_logging_config`: validated `logging` section
 - `load_prefix_config`: console prefix flags from the `log_prefix` section,
   overridden by the `log_pid` / `log_date` / `log_time` environment variables

The config file is optional. It is located, in order, from an explicit path,
the ``TESSERA_CONFIG`` environment variable, then ``./tessera.yaml``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from tessera.base.file_io import read_yaml
from tessera.console.prefix import LogPrefixConfig


ConfigDict = Dict[str, Any]

DEFAULT_CONFIG_FILENAME = "tessera.yaml"
CONFIG_ENV_VAR = "TESSERA_CONFIG"
LOGGING_SECTION_KEY = "logging"
PREFIX_SECTION_KEY = "log_prefix"

LOGGING_ALLOWED_KEYS = {"level", "use_rich", "log_dir", "file_prefix"}
PREFIX_FIELDS = {"pid": "show_pid", "date": "show_date", "time": "show_time"}
PREFIX_ENV_VARS = {"log_pid": "show_pid", "log_date": "show_date", "log_time": "show_time"}

YES_VALUES = {"1", "true", "yes", "y", "on"}
NO_VALUES = {"0", "false", "no", "n", "off"}


def resolve_config_path(
    path: str | Path | None = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[Path]:
    if path:
        return Path(path).expanduser()
    env = os.environ if environ is None else environ
    from_env = env.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()
    candidate = Path.cwd() / DEFAULT_CONFIG_FILENAME
    if candidate.exists():
        return candidate
    return None


def load_config(path: str | Path | None) -> Mapping[str, Any] | Dict[str, Any]:
    if not path:
        return {}

    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {cfg_path}")

    data = read_yaml(cfg_path)
    if not isinstance(data, Mapping):
        raise ValueError(f"Configuration root must be a mapping in {cfg_path}")

    return data


def _extract_section(root: Mapping[str, Any], key: str, allowed: set[str]) -> ConfigDict:
    section = root.get(key) or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"Configuration section '{key}' must be a mapping.")
    invalid = [name for name in section if name not in allowed]
    if invalid:
        raise ValueError(
            f"Configuration section '{key}' contains unsupported keys: {', '.join(sorted(invalid))}"
        )
    return dict(section)


def coerce_flag(value: object, key: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in YES_VALUES:
        return True
    if text in NO_VALUES:
        return False
    raise ValueError(f"Setting '{key}' must be a yes/no or true/false value, got {value!r}.")


def load_logging_config(
    config_path: str | Path | None = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ConfigDict:
    root = load_config(resolve_config_path(config_path, environ))
    return _extract_section(root, LOGGING_SECTION_KEY, LOGGING_ALLOWED_KEYS)


def load_prefix_config(
    config_path: str | Path | None = None,
    environ: Optional[Mapping[str, str]] = None,
) -> LogPrefixConfig:
    """
    Build the console prefix flags once. Every flag defaults to on; the config
    file may switch them, and the environment variables win over the file.
    """
    env = os.environ if environ is None else environ
    root = load_config(resolve_config_path(config_path, env))
    section = _extract_section(root, PREFIX_SECTION_KEY, set(PREFIX_FIELDS))

    flags: Dict[str, bool] = {}
    for key, field_name in PREFIX_FIELDS.items():
        if key in section:
            flags[field_name] = coerce_flag(section[key], f"{PREFIX_SECTION_KEY}.{key}")
    for env_name, field_name in PREFIX_ENV_VARS.items():
        if env_name in env:
            flags[field_name] = coerce_flag(env[env_name], env_name)

    return LogPrefixConfig(**flags)
