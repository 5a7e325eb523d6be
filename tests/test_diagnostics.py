"""Tests for logger setup."""

from __future__ import annotations

import logging

import pytest

from creepbody import diagnostics
from creepbody.body import Body
from creepbody.config import settings


@pytest.fixture()
def clean_logger():
    diagnostics.reset_logger()
    yield
    diagnostics.reset_logger()


def test_file_logging_captures_body_events(tmp_path, clean_logger):
    runtime = settings.load_runtime_settings(
        args=["--log-directory", str(tmp_path), "--log-to-file", "1", "--debug-log-level", "debug"],
        env={},
    )
    logger = diagnostics.initialise_logger(runtime)
    assert logger.level == logging.DEBUG
    body = Body.from_notation("2WM")
    body.destroy_part(0)
    for handler in logger.handlers:
        handler.flush()
    text = (tmp_path / runtime.DEBUG_LOG_FILE).read_text(encoding="utf-8")
    assert "Debug logging initialised" in text
    assert "Destroyed work part at index 0" in text
    assert "[DEBUG]" in text


def test_initialise_is_idempotent(clean_logger):
    runtime = settings.load_runtime_settings(args=[], env={})
    first = diagnostics.initialise_logger(runtime)
    second = diagnostics.initialise_logger(runtime)
    assert first is second
    assert len(first.handlers) == 1
    assert isinstance(first.handlers[0], logging.StreamHandler)


def test_reset_restores_propagation(clean_logger):
    logger = diagnostics.initialise_logger(settings.load_runtime_settings(args=[], env={}))
    assert logger.propagate is False
    diagnostics.reset_logger()
    assert logger.handlers == []
    assert logger.propagate is True
