"""Runtime configuration for the body metrics library."""

from __future__ import annotations

import argparse
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence

import yaml

from .constants import DEFAULTS, MAX_CREEP_SIZE, CREEP_SPAWN_TIME

_PATH_FIELDS = {"LOG_DIRECTORY"}
_STRING_FIELDS = {"DEBUG_LOG_FILE", "DEBUG_LOG_LEVEL", "DEFAULT_TERRAIN"}
_BOOL_FIELDS = {"LOG_TO_FILE"}

CONFIG_ENV_VAR = "CREEPBODY_CONFIG_FILE"
DEFAULT_CONFIG_FILE = Path("configs/creepbody.yaml")

LOG_DIRECTORY = Path(os.getenv("CREEPBODY_LOG_DIR", "logs"))
DEBUG_LOG_FILE = os.getenv("CREEPBODY_DEBUG_LOG", "creepbody_debug.log")
DEBUG_LOG_LEVEL = os.getenv("CREEPBODY_DEBUG_LOG_LEVEL", DEFAULTS["DEBUG_LOG_LEVEL"])
LOG_TO_FILE = os.getenv("CREEPBODY_LOG_TO_FILE", "0") in {"1", "true", "True"}
SPAWN_TICK_CAP = DEFAULTS["SPAWN_TICK_CAP"]
DEFAULT_TERRAIN = DEFAULTS["DEFAULT_TERRAIN"]


@dataclass(frozen=True)
class RuntimeSettings:
    LOG_DIRECTORY: Path = LOG_DIRECTORY
    DEBUG_LOG_FILE: str = DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL: str = DEBUG_LOG_LEVEL
    LOG_TO_FILE: bool = LOG_TO_FILE
    SPAWN_TICK_CAP: int = SPAWN_TICK_CAP
    DEFAULT_TERRAIN: str = DEFAULT_TERRAIN

    def with_updates(self, overrides: Dict[str, Any]) -> "RuntimeSettings":
        merged = asdict(self)
        merged.update(overrides)
        _validate_settings_dict(merged)
        return RuntimeSettings(**merged)


_ACTIVE_SETTINGS = RuntimeSettings()
_ENV_VARS: Dict[str, str] = {
    "LOG_DIRECTORY": "CREEPBODY_LOG_DIR",
    "DEBUG_LOG_FILE": "CREEPBODY_DEBUG_LOG",
    "DEBUG_LOG_LEVEL": "CREEPBODY_DEBUG_LOG_LEVEL",
    "LOG_TO_FILE": "CREEPBODY_LOG_TO_FILE",
    "SPAWN_TICK_CAP": "CREEPBODY_SPAWN_TICK_CAP",
    "DEFAULT_TERRAIN": "CREEPBODY_DEFAULT_TERRAIN",
}


def _coerce(value: str, field: str) -> Any:
    if field in _PATH_FIELDS:
        return Path(value)
    if field in _STRING_FIELDS:
        return value
    if field in _BOOL_FIELDS:
        return value in {"1", "true", "True"}
    return int(value)


def _collect_env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field, env_name in _ENV_VARS.items():
        raw = env.get(env_name)
        if raw is not None:
            overrides[field] = _coerce(raw, field)
    return overrides


def _normalize_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value in {"1", "true", "True", "TRUE"}
    if isinstance(value, (int, float)):
        return bool(value)
    raise ValueError("Invalid boolean value in config")


def _normalize_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("Invalid numeric value in config")
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        return int(float(value))
    raise ValueError("Invalid numeric value in config")


def _normalize_config_value(field: str, value: Any) -> Any:
    if field in _PATH_FIELDS:
        if isinstance(value, Path):
            return value
        if isinstance(value, str):
            return Path(value)
        raise ValueError(f"Field {field} must be a path or string")
    if field in _STRING_FIELDS:
        if isinstance(value, str):
            return value
        raise ValueError(f"Field {field} must be a string")
    if field in _BOOL_FIELDS:
        return _normalize_bool(value)
    return _normalize_int(value)


_NUMERIC_BOUNDS: Dict[str, tuple[int, int]] = {
    "SPAWN_TICK_CAP": (CREEP_SPAWN_TIME, MAX_CREEP_SIZE * CREEP_SPAWN_TIME * 10),
}

_CHOICE_FIELDS: Dict[str, set[str]] = {
    "DEBUG_LOG_LEVEL": {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
}

_TERRAIN_CHOICES = {"road", "plain", "swamp"}


def _validate_settings_dict(values: Dict[str, Any]) -> None:
    for field, (lower, upper) in _NUMERIC_BOUNDS.items():
        current = values.get(field)
        if current is None:
            continue
        if not (lower <= current <= upper):
            raise ValueError(f"{field} must be between {lower} and {upper}, got {current}")
    for field, choices in _CHOICE_FIELDS.items():
        current = values.get(field)
        if current is None:
            continue
        if isinstance(current, str) and current.upper() in choices:
            values[field] = current.upper()
            continue
        raise ValueError(f"{field} must be one of {sorted(choices)} (got {current})")
    terrain = values.get("DEFAULT_TERRAIN")
    if terrain is not None:
        if not isinstance(terrain, str) or terrain.lower() not in _TERRAIN_CHOICES:
            raise ValueError(f"DEFAULT_TERRAIN must be one of {sorted(_TERRAIN_CHOICES)} (got {terrain})")
        values["DEFAULT_TERRAIN"] = terrain.lower()


def _load_config_overrides(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise ValueError(f"Invalid YAML in config file {path}") from error
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must define a mapping")
    valid_fields = set(RuntimeSettings.__dataclass_fields__.keys())
    overrides: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = str(raw_key).upper()
        if key not in valid_fields:
            raise ValueError(f"Unknown config field: {raw_key}")
        overrides[key] = _normalize_config_value(key, value)
    return overrides


def _resolve_config_path(cli_value: str | None, env: Mapping[str, str]) -> Path | None:
    candidate_strings = [cli_value, env.get(CONFIG_ENV_VAR)]
    for candidate in candidate_strings:
        if not candidate:
            continue
        path = Path(candidate).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path
    if DEFAULT_CONFIG_FILE.exists():
        return DEFAULT_CONFIG_FILE
    return None


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Runtime overrides for creep body calculations")
    parser.add_argument("--config", type=str, help="Path to a YAML config file with runtime settings")
    parser.add_argument("--log-directory", type=str, help="Directory for the debug log file")
    parser.add_argument("--debug-log-file", type=str, help="File name of the debug log")
    parser.add_argument("--debug-log-level", type=str, help="Logging level for the creepbody logger")
    parser.add_argument("--log-to-file", type=int, help="Write the debug log to disk (1 or 0)")
    parser.add_argument("--spawn-tick-cap", type=int, help="Maximum spawn ticks accepted for a body")
    parser.add_argument("--default-terrain", type=str, help="Terrain used when none is supplied")
    return parser


def load_runtime_settings(args: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> RuntimeSettings:
    """Resolve settings from defaults, YAML, environment and ``args``.

    ``args`` is never read from ``sys.argv``; an embedding application passes
    its own argument list explicitly.
    """

    env_mapping = env if env is not None else os.environ
    parser = _build_arg_parser()
    parsed = parser.parse_args(args=[] if args is None else list(args))
    overrides: Dict[str, Any] = {}
    config_path = _resolve_config_path(parsed.config, env_mapping)
    if config_path is not None:
        overrides.update(_load_config_overrides(config_path))
    overrides.update(_collect_env_overrides(env_mapping))
    cli_mapping = {
        "LOG_DIRECTORY": None if parsed.log_directory is None else Path(parsed.log_directory),
        "DEBUG_LOG_FILE": parsed.debug_log_file,
        "DEBUG_LOG_LEVEL": parsed.debug_log_level,
        "LOG_TO_FILE": None if parsed.log_to_file is None else bool(parsed.log_to_file),
        "SPAWN_TICK_CAP": parsed.spawn_tick_cap,
        "DEFAULT_TERRAIN": parsed.default_terrain,
    }
    overrides.update({k: v for k, v in cli_mapping.items() if v is not None})
    return _ACTIVE_SETTINGS.with_updates(overrides)


def apply_runtime_settings(new_settings: RuntimeSettings) -> RuntimeSettings:
    global _ACTIVE_SETTINGS
    global LOG_DIRECTORY, DEBUG_LOG_FILE, DEBUG_LOG_LEVEL, LOG_TO_FILE
    global SPAWN_TICK_CAP, DEFAULT_TERRAIN

    _ACTIVE_SETTINGS = new_settings
    LOG_DIRECTORY = new_settings.LOG_DIRECTORY
    DEBUG_LOG_FILE = new_settings.DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL = new_settings.DEBUG_LOG_LEVEL
    LOG_TO_FILE = new_settings.LOG_TO_FILE
    SPAWN_TICK_CAP = new_settings.SPAWN_TICK_CAP
    DEFAULT_TERRAIN = new_settings.DEFAULT_TERRAIN
    return _ACTIVE_SETTINGS


def current_settings() -> RuntimeSettings:
    return _ACTIVE_SETTINGS
