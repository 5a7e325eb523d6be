"""Tests for the runtime configuration loader."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from creepbody.body import Body
from creepbody.config import settings
from creepbody.metrics import calculator


def _write_tmp_config(tmp_path: Path, content: str) -> Path:
    file_path = tmp_path / "conf.yaml"
    file_path.write_text(content, encoding="utf-8")
    return file_path


def test_defaults_without_overrides():
    conf = settings.load_runtime_settings(args=[], env={})
    assert conf.SPAWN_TICK_CAP == 150
    assert conf.DEFAULT_TERRAIN == "plain"
    assert conf.DEBUG_LOG_LEVEL == "INFO"


def test_env_overrides_take_effect():
    conf = settings.load_runtime_settings(args=[], env={"CREEPBODY_SPAWN_TICK_CAP": "90"})
    assert conf.SPAWN_TICK_CAP == 90


def test_cli_overrides_take_precedence():
    conf = settings.load_runtime_settings(args=["--spawn-tick-cap", "120"], env={})
    assert conf.SPAWN_TICK_CAP == 120


def test_config_file_used_when_provided(tmp_path):
    config = _write_tmp_config(tmp_path, "spawn_tick_cap: 60\ndefault_terrain: Swamp\n")
    conf = settings.load_runtime_settings(args=["--config", str(config)], env={})
    assert conf.SPAWN_TICK_CAP == 60
    assert conf.DEFAULT_TERRAIN == "swamp"


def test_config_file_from_env_variable(tmp_path):
    config = _write_tmp_config(tmp_path, "debug_log_level: debug\n")
    conf = settings.load_runtime_settings(args=[], env={settings.CONFIG_ENV_VAR: str(config)})
    assert conf.DEBUG_LOG_LEVEL == "DEBUG"


def test_env_overrides_config(tmp_path):
    config = _write_tmp_config(tmp_path, "spawn_tick_cap: 60\n")
    env = {"CREEPBODY_SPAWN_TICK_CAP": "75"}
    conf = settings.load_runtime_settings(args=["--config", str(config)], env=env)
    assert conf.SPAWN_TICK_CAP == 75


def test_cli_overrides_config_and_env(tmp_path):
    config = _write_tmp_config(tmp_path, "spawn_tick_cap: 60\n")
    env = {"CREEPBODY_SPAWN_TICK_CAP": "75"}
    conf = settings.load_runtime_settings(args=["--config", str(config), "--spawn-tick-cap", "81"], env=env)
    assert conf.SPAWN_TICK_CAP == 81


def test_invalid_field_in_config_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "unknown_value: 1\n")
    with pytest.raises(ValueError, match="Unknown config field"):
        settings.load_runtime_settings(args=["--config", str(config)], env={})


def test_non_mapping_config_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "- plain\n- swamp\n")
    with pytest.raises(ValueError, match="must define a mapping"):
        settings.load_runtime_settings(args=["--config", str(config)], env={})


def test_broken_yaml_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "spawn_tick_cap: [1, 2\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        settings.load_runtime_settings(args=["--config", str(config)], env={})


def test_missing_config_file_errors(tmp_path):
    missing = tmp_path / "missing.yaml"
    with pytest.raises(FileNotFoundError):
        settings.load_runtime_settings(args=["--config", str(missing)], env={})


def test_invalid_numeric_range_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "spawn_tick_cap: 100000\n")
    with pytest.raises(ValueError, match="SPAWN_TICK_CAP"):
        settings.load_runtime_settings(args=["--config", str(config)], env={})


def test_invalid_terrain_raises():
    with pytest.raises(ValueError, match="DEFAULT_TERRAIN"):
        settings.load_runtime_settings(args=["--default-terrain", "lava"], env={})


def test_invalid_log_level_raises():
    with pytest.raises(ValueError, match="DEBUG_LOG_LEVEL"):
        settings.load_runtime_settings(args=["--debug-log-level", "chatty"], env={})


def test_apply_runtime_settings_changes_spawn_cap():
    original = settings.current_settings()
    body = Body.from_notation("20W")
    try:
        assert calculator.within_spawn_cap(body)
        settings.apply_runtime_settings(original.with_updates({"SPAWN_TICK_CAP": 30}))
        assert settings.SPAWN_TICK_CAP == 30
        assert not calculator.within_spawn_cap(body)
    finally:
        settings.apply_runtime_settings(original)


def test_within_spawn_cap_accepts_explicit_settings():
    conf = settings.load_runtime_settings(args=["--spawn-tick-cap", "9"], env={})
    assert calculator.within_spawn_cap(Body.from_notation("3M"), conf)
    assert not calculator.within_spawn_cap(Body.from_notation("4M"), conf)


def test_host_argv_is_not_parsed(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["host_app", "--verbose"])
    conf = settings.load_runtime_settings(env={})
    assert conf.SPAWN_TICK_CAP == 150
