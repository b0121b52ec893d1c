"""
Reaction Model
==============

Domain model representing a user's reaction to a kudos card.
A user may add each reaction type at most once per card.
"""
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from kudos.utils.datetime_utils import now


class ReactionType(str, Enum):
    LIKE = "like"
    LOVE = "love"
    CELEBRATE = "celebrate"
    INSIGHTFUL = "insightful"
    CURIOUS = "curious"

    @classmethod
    def parse(cls, value: Union[str, "ReactionType"]) -> "ReactionType":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid reaction type: {value}") from None


@dataclass
class Reaction:
    """Reaction domain model. Build instances through Reaction.create."""
    kudos_card_id: str
    user_id: str
    type: ReactionType
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())

    @classmethod
    def create(
        cls,
        kudos_card_id: str,
        user_id: str,
        type: Union[str, ReactionType],
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> "Reaction":
        """
        Create a validated reaction.

        Raises:
            ValueError: If a reference is missing or the type is unknown
        """
        if not kudos_card_id:
            raise ValueError("Kudos Card ID is required")
        if not user_id:
            raise ValueError("User ID is required")

        return cls(
            kudos_card_id=kudos_card_id,
            user_id=user_id,
            type=ReactionType.parse(type),
            id=id,
            created_at=created_at or now(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ReactionCount:
    """Number of reactions of one type on a kudos card."""
    type: ReactionType
    count: int
