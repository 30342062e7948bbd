import logging

import pytest

import hedgemaze.logging_config as logging_config
from hedgemaze.logging_config import configure_logging


@pytest.fixture
def basic_config_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.delenv("HEDGEMAZE_LOG_LEVEL", raising=False)
    return calls


def test_explicit_level_name_beats_env(basic_config_calls, monkeypatch):
    monkeypatch.setenv("HEDGEMAZE_LOG_LEVEL", "ERROR")
    configure_logging(level_name="debug")
    assert basic_config_calls[0]["level"] == logging.DEBUG


def test_env_used_when_no_level_name(basic_config_calls, monkeypatch):
    monkeypatch.setenv("HEDGEMAZE_LOG_LEVEL", "warning")
    configure_logging()
    assert basic_config_calls[0]["level"] == logging.WARNING


def test_unknown_level_name_falls_back_to_default(basic_config_calls):
    configure_logging(default_level=logging.ERROR, level_name="chatty")
    assert basic_config_calls[0]["level"] == logging.ERROR
