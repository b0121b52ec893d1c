"""
Reaction DTO
============

Pydantic models for reaction API requests and responses.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from kudos.domain.models.reaction import Reaction, ReactionCount
from kudos.utils.datetime_utils import to_iso


class AddReactionRequest(BaseModel):
    """
    DTO for reacting to a kudos card.

    The type is kept as a plain string so unknown values reach the use case
    and fail with a reaction validation error.
    """
    kudos_card_id: str = Field(..., description="Kudos card being reacted to")
    type: str = Field(..., description="One of: like, love, celebrate, insightful, curious")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "kudos_card_id": "0b6f1c39-52a4-4e0e-9a55-3f6d1d2b8c11",
                "type": "celebrate",
            }
        }
    )


class ReactionResponse(BaseModel):
    """DTO for reaction data."""
    id: str
    kudos_card_id: str
    user_id: str
    type: str
    created_at: str

    @classmethod
    def from_entity(cls, reaction: Reaction) -> "ReactionResponse":
        return cls(
            id=reaction.id,
            kudos_card_id=reaction.kudos_card_id,
            user_id=reaction.user_id,
            type=reaction.type.value,
            created_at=to_iso(reaction.created_at),
        )


class ReactionCountResponse(BaseModel):
    type: str
    count: int

    @classmethod
    def from_row(cls, row: ReactionCount) -> "ReactionCountResponse":
        return cls(type=row.type.value, count=row.count)


class AddReactionResponse(BaseModel):
    reaction: ReactionResponse
    reaction_counts: List[ReactionCountResponse]


class GetReactionsResponse(BaseModel):
    reactions: List[ReactionResponse]
    reaction_counts: List[ReactionCountResponse]


class RemoveReactionResponse(BaseModel):
    success: bool
    kudos_card_id: str
    reaction_counts: List[ReactionCountResponse]
