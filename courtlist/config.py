"""
Config for the court list source keys and generated output names.

Key names are a private contract of the court dataset. Defaults match the
published dataset and can be overridden through the environment (or a .env
file loaded by the CLI).
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceKeys:
    """JSON keys read from the input document."""

    items: str = "items"
    active_flag: str = "busca_documento"
    name: str = "nome"
    acronym: str = "sigla"


@dataclass(frozen=True)
class OutputNames:
    """Names used in the generated declarations."""

    sql_schema: str = "kyc"
    sql_type: str = "courts"
    rust_enum: str = "Courts"


DEFAULT_SOURCE_KEYS = SourceKeys()
DEFAULT_OUTPUT_NAMES = OutputNames()

DEFAULT_LOG_LEVEL = "INFO"


def _env(key: str, default: str) -> str:
    val = os.environ.get(key)
    if val is None or not str(val).strip():
        return default
    return str(val).strip()


def get_source_keys() -> SourceKeys:
    """Return source keys, honoring COURTLIST_*_KEY overrides."""
    return SourceKeys(
        items=_env("COURTLIST_ITEMS_KEY", DEFAULT_SOURCE_KEYS.items),
        active_flag=_env("COURTLIST_FLAG_KEY", DEFAULT_SOURCE_KEYS.active_flag),
        name=_env("COURTLIST_NAME_KEY", DEFAULT_SOURCE_KEYS.name),
        acronym=_env("COURTLIST_ACRONYM_KEY", DEFAULT_SOURCE_KEYS.acronym),
    )


def get_output_names() -> OutputNames:
    """Return output names, honoring COURTLIST_SQL_* and COURTLIST_RUST_ENUM overrides."""
    return OutputNames(
        sql_schema=_env("COURTLIST_SQL_SCHEMA", DEFAULT_OUTPUT_NAMES.sql_schema),
        sql_type=_env("COURTLIST_SQL_TYPE", DEFAULT_OUTPUT_NAMES.sql_type),
        rust_enum=_env("COURTLIST_RUST_ENUM", DEFAULT_OUTPUT_NAMES.rust_enum),
    )


def get_log_level() -> str:
    return _env("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
