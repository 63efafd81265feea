"""Domain Types — value types and enums shared across exercises.

Invariants:
    - RatedItem and Product are frozen: core functions never mutate their inputs
    - Day numbering is Monday=0 .. Sunday=6
    - DayType values are the exact strings callers see ("Weekday" / "Weekend")

Design Decisions:
    - Frozen dataclasses over pydantic in core: validation happens once, in schemas/
    - str Enum for DayType: compares equal to its plain-string value
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NewType, Union


# ─── Value Types ─────────────────────────────────────────────────

Rating = NewType("Rating", float)   # 0.0–5.0
Price = NewType("Price", float)     # >= 0.0

Number = Union[int, float]


@dataclass(frozen=True)
class RatedItem:
    """Something with a title and a star rating (books, mostly)."""
    title: str
    rating: float


@dataclass(frozen=True)
class Product:
    """Something with a name and a price."""
    name: str
    price: float


# ─── Enums ───────────────────────────────────────────────────────

class Day(IntEnum):
    """Days of the week, Monday first."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class DayType(str, Enum):
    """Weekday / weekend classification."""
    WEEKDAY = "Weekday"
    WEEKEND = "Weekend"
