"""
Unit tests -- settings, logging and small utilities.
"""
import logging

from promquery.core.config import DEFAULT_BASE_URL, Settings, get_settings
from promquery.core.logging import get_logger
from promquery.core.utils import join_url, timer


def test_defaults(monkeypatch):
    monkeypatch.delenv("PROMQUERY_BASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.request_timeout_seconds == 30.0
    assert settings.log_level == "INFO"


def test_env_override(monkeypatch):
    monkeypatch.setenv("PROMQUERY_BASE_URL", "http://prom:9090/api/v1/")
    monkeypatch.setenv("PROMQUERY_REQUEST_TIMEOUT_SECONDS", "2.5")
    settings = Settings(_env_file=None)
    assert settings.api_url == "http://prom:9090/api/v1"
    assert settings.request_timeout_seconds == 2.5


def test_get_settings_cached():
    assert get_settings() is get_settings()


def test_logger_single_handler():
    first = get_logger("promquery.test")
    second = get_logger("promquery.test")
    assert first is second
    assert len(second.handlers) == 1
    assert isinstance(second.handlers[0], logging.StreamHandler)


def test_timer_records_elapsed():
    with timer() as t:
        pass
    assert t["elapsed_ms"] >= 0


def test_join_url():
    assert join_url("http://h/api/v1", "/query") == "http://h/api/v1/query"
    assert join_url("http://h/api/v1/", "query_range") == "http://h/api/v1/query_range"
