"""Tests for config/settings.py: CONFIG_GUARD_* environment settings."""
from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from config_guard.config import GuardSettings, get_settings, load_settings


def test_defaults(monkeypatch):
    for var in ("CONFIG_GUARD_SCHEMA_TARGET", "CONFIG_GUARD_LOG_LEVEL", "CONFIG_GUARD_JSON_INDENT"):
        monkeypatch.delenv(var, raising=False)
    settings = load_settings()
    assert settings.schema_target is None
    assert settings.log_level == "WARNING"
    assert settings.log_level_value == logging.WARNING
    assert settings.json_indent == 2


def test_from_environment(monkeypatch):
    monkeypatch.setenv("CONFIG_GUARD_SCHEMA_TARGET", "myapp.schema:SCHEMA")
    monkeypatch.setenv("CONFIG_GUARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("CONFIG_GUARD_JSON_INDENT", "4")
    settings = get_settings()
    assert settings.schema_target == "myapp.schema:SCHEMA"
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == logging.DEBUG
    assert settings.json_indent == 4


def test_load_settings_is_cached(monkeypatch):
    first = load_settings()
    monkeypatch.setenv("CONFIG_GUARD_JSON_INDENT", "7")
    assert load_settings() is first

    load_settings.cache_clear()
    assert load_settings().json_indent == 7


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError, match="log_level must be one of"):
        GuardSettings(log_level="LOUD")


def test_negative_indent_rejected():
    with pytest.raises(ValidationError):
        GuardSettings(json_indent=-1)
