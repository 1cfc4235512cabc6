"""
Extraction module: loads the court dataset and selects active courts.

A single malformed active record aborts the whole extraction. Non-object
elements of the items array are the only thing skipped with a warning.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from courtlist.config import DEFAULT_SOURCE_KEYS, SourceKeys
from courtlist.schema import Court, CourtList, ItemResult, ItemStatus

logger = logging.getLogger(__name__)


class CourtListError(ValueError):
    """Base class for fatal court list errors."""


class SourceReadError(CourtListError):
    """Input file could not be opened or read."""


class JsonParseError(CourtListError):
    """Input file is not valid UTF-8 JSON."""


class ExtractionError(CourtListError):
    """
    JSON does not have the expected shape.
    position is the index in the items array, or None for top-level shape errors.
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class EmptyResultError(CourtListError):
    """Shape was valid but no element passed the active-flag filter."""


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are Python extensions, not JSON.
    raise ValueError(f"invalid JSON constant {name}")


def load_json(path: Union[str, Path]) -> Any:
    """Read the whole file as UTF-8 and parse it as strict JSON."""
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise SourceReadError(f"Cannot read {path}: {e}") from e
    try:
        return json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except UnicodeDecodeError as e:
        raise JsonParseError(f"{path} is not valid UTF-8: {e}") from e
    except ValueError as e:
        raise JsonParseError(f"{path} is not valid JSON: {e}") from e


def _is_active(value: Any) -> bool:
    # Only the JSON integer 1 counts; true, 1.0 and "1" do not.
    return type(value) is int and value == 1


def check_item(position: int, item: Any, keys: SourceKeys = DEFAULT_SOURCE_KEYS) -> ItemResult:
    """
    Checks one element of the items array.

    Args:
        position: Index of the element in the items array
        item: Decoded JSON value
        keys: Source key names

    Returns:
        ItemResult with status selected, inactive, not_object or invalid
    """
    if not isinstance(item, dict):
        return ItemResult(position=position, status=ItemStatus.NOT_OBJECT)

    if keys.active_flag not in item:
        return ItemResult(
            position=position,
            status=ItemStatus.INVALID,
            error=f"missing '{keys.active_flag}'",
        )

    if not _is_active(item[keys.active_flag]):
        return ItemResult(position=position, status=ItemStatus.INACTIVE)

    fields = {}
    for field, key in (("name", keys.name), ("acronym", keys.acronym)):
        if key not in item:
            return ItemResult(position=position, status=ItemStatus.INVALID, error=f"missing '{key}'")
        value = item[key]
        if not isinstance(value, str):
            return ItemResult(
                position=position,
                status=ItemStatus.INVALID,
                error=f"'{key}' must be a string, got {type(value).__name__}",
            )
        fields[field] = value

    return ItemResult(position=position, status=ItemStatus.SELECTED, court=Court(**fields))


def extract_courts(document: Any, keys: SourceKeys = DEFAULT_SOURCE_KEYS) -> Tuple[CourtList, dict]:
    """
    Selects active courts from a decoded document.

    Returns:
        Tuple of (CourtList, extraction_report dict)

    Raises:
        ExtractionError: items missing or not an array, or an active record is malformed
        EmptyResultError: no record was selected
    """
    if not isinstance(document, dict):
        raise ExtractionError(f"Top-level JSON value must be an object, got {type(document).__name__}")
    if keys.items not in document:
        raise ExtractionError(f"Missing '{keys.items}' key")
    items = document[keys.items]
    if not isinstance(items, list):
        raise ExtractionError(f"'{keys.items}' must be an array, got {type(items).__name__}")

    courts = []
    report = {
        "total_items": len(items),
        "selected": 0,
        "skipped_inactive": 0,
        "skipped_not_object": 0,
    }

    for position, item in enumerate(items):
        result = check_item(position, item, keys)
        if result.status == ItemStatus.INVALID:
            raise ExtractionError(f"Item {position}: {result.error}", position=position)
        if result.status == ItemStatus.NOT_OBJECT:
            logger.warning(f"Item {position} is not an object, skipping: {json.dumps(item, ensure_ascii=False)}")
            report["skipped_not_object"] += 1
        elif result.status == ItemStatus.INACTIVE:
            logger.debug(f"Item {position} is inactive, skipping")
            report["skipped_inactive"] += 1
        else:
            courts.append(result.court)
            report["selected"] += 1

    if not courts:
        raise EmptyResultError(f"No courts parsed from {len(items)} item(s)")

    logger.info(
        f"Parsed {report['selected']} court(s) from {report['total_items']} item(s) "
        f"({report['skipped_inactive']} inactive, {report['skipped_not_object']} not objects)"
    )
    return CourtList(courts=courts), report


def load_courts(path: Union[str, Path], keys: SourceKeys = DEFAULT_SOURCE_KEYS) -> Tuple[CourtList, dict]:
    """Loads a JSON file and extracts its active courts."""
    return extract_courts(load_json(path), keys)
