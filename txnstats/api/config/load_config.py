"""Load StatsConfig from an optional JSON file plus command-line overrides."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .ConfigError import ConfigError
from .get_home_dir import get_home_dir
from .StatsConfig import StatsConfig

_DEFAULT_RAW: dict[str, Any] = {"database": {"type": "mongo", "data": {}}}


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_file(path: Path) -> dict[str, Any]:
    try:
        with path.open() as fh:
            raw = json.load(fh)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object (found: {type(raw).__name__})")
    return raw


def load_config(path: Path | None = None, overrides: dict[str, Any] | None = None) -> StatsConfig:
    """Build and validate the run configuration.

    Values come from, lowest precedence first: built-in defaults, the config
    file (``path``, or ``config.json`` in the txnstats home when it exists),
    then ``overrides``. ``None`` values in overrides are ignored.

    Raises:
        ConfigError: If the file is missing/unreadable or validation fails
    """
    if path is not None:
        if not path.exists():
            raise ConfigError(f"Configuration file not found at {path}")
        raw = _merge(_DEFAULT_RAW, _read_file(path))
    else:
        default_path = get_home_dir("config.json")
        raw = _merge(_DEFAULT_RAW, _read_file(default_path)) if default_path.exists() else dict(_DEFAULT_RAW)

    raw = _merge(raw, overrides or {})

    try:
        return StatsConfig(**raw)
    except ValidationError as e:
        error_list = e.errors() or [{"msg": str(e), "loc": ()}]
        first = error_list[0]
        error_msg = first.get("msg", str(e))
        loc = first.get("loc", ())
        field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
        detail = f"{field}: {error_msg}" if field else error_msg
        raise ConfigError(f"Configuration validation error: {detail}") from e
