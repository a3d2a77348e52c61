from __future__ import annotations

import importlib
import logging

import pytest

import pysetting.config as config


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(value: str | None):
        if value is None:
            monkeypatch.delenv("PYSETTING_LISTENER_ERRORS", raising=False)
        else:
            monkeypatch.setenv("PYSETTING_LISTENER_ERRORS", value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.delenv("PYSETTING_LISTENER_ERRORS", raising=False)
    importlib.reload(config)


def test_listener_errors_default(reload_config):
    assert reload_config(None).listener_errors == "isolate"


def test_listener_errors_from_env(reload_config):
    assert reload_config(" Raise ").listener_errors == "raise"


def test_invalid_listener_errors_warns(reload_config, caplog):
    with caplog.at_level("WARNING", logger="pysetting.config"):
        mod = reload_config("explode")
    assert mod.listener_errors == "isolate"
    assert "PYSETTING_LISTENER_ERRORS" in caplog.text


def test_configure_logging_only_when_requested(monkeypatch):
    logger = logging.getLogger("pysetting")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers.clear()
    try:
        monkeypatch.delenv("PYSETTING_DEBUG", raising=False)
        config.configure_logging()
        assert logger.handlers == []

        monkeypatch.setenv("PYSETTING_DEBUG", "1")
        config.configure_logging()
        config.configure_logging()
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
    finally:
        logger.handlers[:] = saved_handlers
        logger.setLevel(saved_level)
