#!/usr/bin/env python3
"""
Generate PostgreSQL and Rust court enums from a court list JSON file.

Usage:
    courtlist tribunais.json
    courtlist tribunais.json --schema kyc --type-name courts --enum-name Courts
    COURTLIST_FLAG_KEY=ativo courtlist tribunais.json -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from courtlist.config import OutputNames, get_log_level, get_output_names, get_source_keys
from courtlist.extract import CourtListError
from courtlist.runner import generate_enums

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate court enum declarations from a court list JSON file.")
    parser.add_argument("input", help="Path to the court list JSON file.")
    parser.add_argument("--schema", default=None, help="SQL schema for the enum type (default: kyc).")
    parser.add_argument("--type-name", default=None, help="SQL enum type name (default: courts).")
    parser.add_argument("--enum-name", default=None, help="Rust enum name (default: Courts).")
    parser.add_argument(
        "--case-samples",
        action="store_true",
        help="Also print the case-conversion samples (TRT1, Trt1, TreCe).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def _output_names(args: argparse.Namespace) -> OutputNames:
    env_names = get_output_names()
    return OutputNames(
        sql_schema=args.schema or env_names.sql_schema,
        sql_type=args.type_name or env_names.sql_type,
        rust_enum=args.enum_name or env_names.rust_enum,
    )


def _log_level(verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    # getLevelName maps known names to ints and anything else to "Level <name>".
    level = logging.getLevelName(get_log_level())
    return level if isinstance(level, int) else logging.INFO


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    logging.basicConfig(
        level=_log_level(args.verbose),
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        blocks, report = generate_enums(
            args.input,
            keys=get_source_keys(),
            names=_output_names(args),
            include_case_samples=args.case_samples,
        )
    except CourtListError as e:
        logger.error(f"❌ {e}")
        return 1

    logger.debug(f"Processing report: {report}")
    for block in blocks:
        print(block)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
