"""
Data models for court records.
Uses Pydantic for validation and type safety.
"""

from enum import Enum
from typing import Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Court(BaseModel):
    """A single court reduced to its display name and acronym."""
    model_config = ConfigDict(frozen=True, strict=True)

    name: str
    acronym: str


class CourtList(BaseModel):
    """
    Ordered, non-empty list of courts.
    Order is the order of appearance in the source ``items`` array.
    """
    model_config = ConfigDict(frozen=True)

    courts: List[Court] = Field(min_length=1)

    def __iter__(self) -> Iterator[Court]:
        return iter(self.courts)

    def __len__(self) -> int:
        return len(self.courts)

    @property
    def acronyms(self) -> List[str]:
        return [court.acronym for court in self.courts]


class ItemStatus(str, Enum):
    """Outcome category for one element of the ``items`` array."""
    SELECTED = "selected"        # Active record with valid name and acronym (court is set)
    INACTIVE = "inactive"        # Active flag present but not equal to 1
    NOT_OBJECT = "not_object"    # Element is not a JSON object
    INVALID = "invalid"          # Required key missing or wrong type (error is set)


class ItemResult(BaseModel):
    """Outcome of checking one element of the ``items`` array."""
    position: int
    status: ItemStatus
    court: Optional[Court] = None
    error: Optional[str] = None
