"""
Analytics Rows
==============

Ranked {label, count} rows produced by the kudos-card aggregation queries.
"""
from dataclasses import dataclass
from enum import Enum


class Period(str, Enum):
    """Coarse time bucket used to scope analytics aggregation."""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Case-insensitive membership check."""
        return value.lower() in {period.value for period in cls}


@dataclass(frozen=True)
class RecipientCount:
    recipient_name: str
    count: int


@dataclass(frozen=True)
class TeamCount:
    team_id: int
    team_name: str
    count: int


@dataclass(frozen=True)
class CategoryCount:
    category_id: int
    category_name: str
    count: int


@dataclass(frozen=True)
class KeywordCount:
    keyword: str
    count: int
