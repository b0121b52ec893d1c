"""
Analytics DTO
=============

Pydantic models for analytics requests and ranked result rows.
"""
from typing import Optional

from pydantic import BaseModel, Field


class AnalyticsRequest(BaseModel):
    """Query shared by every analytics endpoint."""
    limit: Optional[int] = Field(None, description="Maximum number of rows (defaults to 10)")
    period: Optional[str] = Field(
        None,
        description="Time window: daily, weekly, monthly, quarterly or yearly (case-insensitive)",
    )


class TopRecipientResponse(BaseModel):
    recipient_name: str
    count: int


class TopTeamResponse(BaseModel):
    team_id: int
    team_name: str
    count: int


class TrendingCategoryResponse(BaseModel):
    category_id: int
    category_name: str
    count: int


class TrendingKeywordResponse(BaseModel):
    keyword: str
    count: int
