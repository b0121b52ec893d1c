"""
Team DTO
========

Pydantic models for team API requests and responses.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from kudos.domain.models.team import Team
from kudos.utils.datetime_utils import to_iso


class TeamCreateRequest(BaseModel):
    """DTO for creating a team. Name rules are enforced by the Team entity."""
    name: str = Field(..., description="Team name (1-100 characters)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Platform Engineering",
            }
        }
    )


class TeamUpdateRequest(BaseModel):
    """DTO for updating a team. Only provided fields are applied."""
    name: Optional[str] = Field(None, description="New team name")


class TeamResponse(BaseModel):
    """DTO for team data."""
    id: int
    name: str
    created_at: str
    updated_at: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 3,
                "name": "Platform Engineering",
                "created_at": "2025-03-02T09:11:50.840Z",
                "updated_at": "2025-03-02T09:11:50.840Z",
            }
        }
    )

    @classmethod
    def from_entity(cls, team: Team) -> "TeamResponse":
        return cls(
            id=team.id,
            name=team.name,
            created_at=to_iso(team.created_at),
            updated_at=to_iso(team.updated_at),
        )


class TeamDeleteResponse(BaseModel):
    """DTO for team deletion."""
    success: bool
    message: str
