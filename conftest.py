"""Pytest hooks for courtlist. Keep COURTLIST_* overrides from the shell out of the tests."""

import os

import pytest

ENV_KEYS = [
    "COURTLIST_ITEMS_KEY",
    "COURTLIST_FLAG_KEY",
    "COURTLIST_NAME_KEY",
    "COURTLIST_ACRONYM_KEY",
    "COURTLIST_SQL_SCHEMA",
    "COURTLIST_SQL_TYPE",
    "COURTLIST_RUST_ENUM",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_courtlist_env(monkeypatch):
    for key in ENV_KEYS:
        if key in os.environ:
            monkeypatch.delenv(key)
