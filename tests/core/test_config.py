import logging

import pytest

from packages.core.config import DEFAULT_DB_PATH, DEFAULT_PORT, load_settings
from packages.core.logging_config import configure_logging


def test_load_settings_defaults(monkeypatch):
    for name in ("PORT", "HOST", "EVENTS_DB_PATH", "LOG_LEVEL", "OTEL_ENABLED"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()
    assert settings.port == DEFAULT_PORT == 3000
    assert settings.host == "0.0.0.0"
    assert settings.db_path == DEFAULT_DB_PATH
    assert settings.log_level == "INFO"
    assert settings.otel_enabled is False


def test_load_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("EVENTS_DB_PATH", str(tmp_path / "events.json"))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.port == 8080
    assert settings.db_path == str(tmp_path / "events.json")
    assert settings.log_level == "DEBUG"


def test_invalid_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert load_settings().port == DEFAULT_PORT


def test_configure_logging_to_file(monkeypatch, tmp_path):
    log_file = tmp_path / "scheduler.log"
    monkeypatch.setenv("LOG_DESTINATION", "file")
    monkeypatch.setenv("LOG_FILE", str(log_file))

    configure_logging()
    logging.getLogger("scheduler.test").warning("hello_file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "hello_file" in log_file.read_text()
    monkeypatch.setenv("LOG_DESTINATION", "stdout")
    configure_logging()


def test_configure_logging_file_requires_path(monkeypatch):
    monkeypatch.setenv("LOG_DESTINATION", "file")
    monkeypatch.delenv("LOG_FILE", raising=False)

    with pytest.raises(RuntimeError):
        configure_logging()
