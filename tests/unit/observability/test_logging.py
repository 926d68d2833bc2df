"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from nullsafe.config import LoggingSettings
from nullsafe.observability.logging import JsonLoggerFactory, configure_logging, get_logger


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_installs_single_handler(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert root.level == logging.WARNING

    def test_emits_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("tests.json").info("optional.checked", present=True)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "optional.checked"
        assert payload["present"] is True
        assert payload["level"] == "info"
        assert payload["logger"] == "tests.json"
        assert "timestamp" in payload

    def test_console_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO, json=False)
        get_logger("tests.console").info("plain.event")
        out = capsys.readouterr().err
        assert "plain.event" in out
        with pytest.raises(json.JSONDecodeError):
            json.loads(out.strip().splitlines()[-1])

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("tests.level").debug("hidden")
        assert "hidden" not in capsys.readouterr().err


# ---------------------------------------------------------------------------
# get_logger / configure_logging
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("tests.bound", component="cache").info("bound.event")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["component"] == "cache"


class TestConfigureLogging:
    def test_uses_given_settings(self) -> None:
        settings = LoggingSettings(level="ERROR", json=True)
        assert configure_logging(settings) is settings
        assert logging.getLogger().level == logging.ERROR

    def test_loads_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NULLSAFE_LOG_LEVEL", "debug")
        settings = configure_logging()
        assert settings.level == "DEBUG"
        assert logging.getLogger().level == logging.DEBUG
