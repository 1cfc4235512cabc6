"""
Renderers for the generated court enum declarations.
Both are pure: they take a validated CourtList and return text.
"""

import logging

from courtlist.casing import needs_rename, to_identifier
from courtlist.config import DEFAULT_OUTPUT_NAMES
from courtlist.schema import CourtList

logger = logging.getLogger(__name__)


def render_postgres_enum(
    courts: CourtList,
    schema: str = DEFAULT_OUTPUT_NAMES.sql_schema,
    type_name: str = DEFAULT_OUTPUT_NAMES.sql_type,
) -> str:
    """
    Renders a PostgreSQL enum type with one acronym per line.

    Acronyms are emitted as-is between single quotes (no escaping).
    """
    values = [f"\t'{acronym}'" for acronym in courts.acronyms]
    lines = [f"CREATE TYPE {schema}.{type_name} AS enum("]
    lines.append(",\n".join(values))
    lines.append(");")
    return "\n".join(lines)


def render_rust_enum(courts: CourtList, enum_name: str = DEFAULT_OUTPUT_NAMES.rust_enum) -> str:
    """
    Renders a Rust enum with one documented variant per court.

    Each variant is preceded by a doc comment holding the court name, and by a
    serde rename attribute when the identifier does not round-trip to the acronym.
    When two acronyms map to the same identifier ("TRT1", "TRT-1"), later ones
    get a "_2", "_3", ... suffix and always carry the rename attribute.
    """
    seen = set()
    lines = [f"pub enum {enum_name} {{"]
    for court in courts:
        ident = to_identifier(court.acronym)
        rename = needs_rename(court.acronym)
        if ident in seen:
            n = 2
            while f"{ident}_{n}" in seen:
                n += 1
            logger.warning(f"Acronym {court.acronym!r} duplicates variant {ident}, using {ident}_{n}")
            ident = f"{ident}_{n}"
            rename = True
        seen.add(ident)

        lines.append(f"\t/// {court.name}")
        if rename:
            lines.append(f'\t#[serde(rename = "{court.acronym}")]')
        lines.append(f"\t{ident},")
    lines.append("}")
    return "\n".join(lines)
