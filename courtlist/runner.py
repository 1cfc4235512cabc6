"""
Pipeline runner: orchestrates the full generation pipeline.
Runs load → extraction → rendering and returns the output blocks.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from courtlist.casing import case_samples
from courtlist.config import DEFAULT_OUTPUT_NAMES, DEFAULT_SOURCE_KEYS, OutputNames, SourceKeys
from courtlist.extract import load_courts
from courtlist.render import render_postgres_enum, render_rust_enum


def generate_enums(
    input_path: Union[str, Path],
    keys: SourceKeys = DEFAULT_SOURCE_KEYS,
    names: Optional[OutputNames] = None,
    include_case_samples: bool = False,
) -> Tuple[List[str], dict]:
    """
    Runs the complete generation pipeline for one court dataset.

    Pipeline stages:
        1. Load: read and parse the JSON file
        2. Extraction: select active courts (all-or-nothing)
        3. Rendering: PostgreSQL enum, then Rust enum

    Nothing is rendered unless extraction fully succeeds, so callers never
    see partial output.

    Args:
        input_path: Path to the JSON dataset
        keys: Source key names
        names: Output names for the generated declarations
        include_case_samples: Append the case-conversion sample lines

    Returns:
        Tuple of (output blocks in print order, processing_report dict)
    """
    names = names or DEFAULT_OUTPUT_NAMES
    processing_report = {"stages": {}}

    courts, extraction_report = load_courts(input_path, keys)
    processing_report["stages"]["extraction"] = extraction_report

    blocks = [
        render_postgres_enum(courts, schema=names.sql_schema, type_name=names.sql_type),
        render_rust_enum(courts, enum_name=names.rust_enum),
    ]
    if include_case_samples:
        blocks.append("\n".join(case_samples()))

    processing_report["stages"]["rendering"] = {
        "variant_count": len(courts),
        "block_count": len(blocks),
    }
    return blocks, processing_report
