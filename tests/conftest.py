"""Pytest fixtures for config-guard tests."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

# Repo root (parent of tests/)
REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Clear the load_settings LRU cache before (and after) every test.

    Each test then sees the CONFIG_GUARD_* variables it sets with monkeypatch.
    """
    from config_guard.config import settings
    settings.load_settings.cache_clear()
    yield
    settings.load_settings.cache_clear()


@pytest.fixture
def schema_module(tmp_path, monkeypatch):
    """Write a throwaway module declaring schemas and put it on sys.path.

    Returns the module name; targets look like ``f"{name}:SCHEMA"``.
    """
    name = "guard_sample_schema"
    (tmp_path / f"{name}.py").write_text(textwrap.dedent('''
        from config_guard import create_schema_builder

        def build_schema():
            return (
                create_schema_builder()
                .string("host").env("DB_HOST").default("localhost").required().end()
                .number("port").min(1).max(65535).integer().default(5432).end()
                .string("password").env("DB_PASSWORD").secret().default("hunter2").end()
                .object("cache", lambda b: b.boolean("enabled").coerce().default(True).end())
                .build()
            )

        SCHEMA = build_schema()
        BUILDER = create_schema_builder().string("name").required().end()
        NOT_A_SCHEMA = 42

        def failing_factory():
            raise RuntimeError("factory exploded")
    '''))
    monkeypatch.syspath_prepend(str(tmp_path))
    return name


@pytest.fixture
def broken_schema_module(tmp_path, monkeypatch):
    """A schema module whose own code fails at import time."""
    name = "guard_broken_schema"
    (tmp_path / f"{name}.py").write_text(textwrap.dedent('''
        from config_guard import create_schema_builder

        SCHEMA = create_schema_builder().string("host").env(UNDEFINED_NAME).end().build()
    '''))
    monkeypatch.syspath_prepend(str(tmp_path))
    return name
