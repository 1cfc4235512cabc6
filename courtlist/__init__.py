"""
Court list package exports.
"""

from courtlist.extract import (
    CourtListError,
    EmptyResultError,
    ExtractionError,
    JsonParseError,
    SourceReadError,
    load_courts,
)
from courtlist.render import render_postgres_enum, render_rust_enum
from courtlist.schema import Court, CourtList

__all__ = [
    "Court",
    "CourtList",
    "CourtListError",
    "EmptyResultError",
    "ExtractionError",
    "JsonParseError",
    "SourceReadError",
    "load_courts",
    "render_postgres_enum",
    "render_rust_enum",
]
