"""
Analytics Controller
====================

FastAPI controller for ranked kudos statistics.
Every endpoint accepts an optional limit (default 10) and period
(daily, weekly, monthly, quarterly, yearly).
"""
from typing import List, Optional

from fastapi import APIRouter, Depends

from kudos.api.v1.dependencies import (
    Actor,
    get_current_actor,
    get_top_recipients_use_case,
    get_top_teams_use_case,
    get_trending_categories_use_case,
    get_trending_keywords_use_case,
)
from kudos.api.v1.errors import to_http_exception
from kudos.application.dto.analytics_dto import (
    AnalyticsRequest,
    TopRecipientResponse,
    TopTeamResponse,
    TrendingCategoryResponse,
    TrendingKeywordResponse,
)
from kudos.application.use_cases.analytics.get_top_recipients import GetTopRecipientsUseCase
from kudos.application.use_cases.analytics.get_top_teams import GetTopTeamsUseCase
from kudos.application.use_cases.analytics.get_trending_categories import GetTrendingCategoriesUseCase
from kudos.application.use_cases.analytics.get_trending_keywords import GetTrendingKeywordsUseCase
from kudos.domain.exceptions import KudosError

router = APIRouter(tags=["analytics"])


@router.get(
    "/top-recipients",
    response_model=List[TopRecipientResponse],
    summary="Top kudos recipients",
)
async def get_top_recipients(
    limit: Optional[int] = None,
    period: Optional[str] = None,
    actor: Actor = Depends(get_current_actor),
    use_case: GetTopRecipientsUseCase = Depends(get_top_recipients_use_case),
) -> List[TopRecipientResponse]:
    try:
        return await use_case.execute(AnalyticsRequest(limit=limit, period=period))
    except KudosError as e:
        raise to_http_exception(e)


@router.get(
    "/top-teams",
    response_model=List[TopTeamResponse],
    summary="Teams receiving the most kudos",
)
async def get_top_teams(
    limit: Optional[int] = None,
    period: Optional[str] = None,
    actor: Actor = Depends(get_current_actor),
    use_case: GetTopTeamsUseCase = Depends(get_top_teams_use_case),
) -> List[TopTeamResponse]:
    try:
        return await use_case.execute(AnalyticsRequest(limit=limit, period=period))
    except KudosError as e:
        raise to_http_exception(e)


@router.get(
    "/trending-categories",
    response_model=List[TrendingCategoryResponse],
    summary="Most used kudos categories",
)
async def get_trending_categories(
    limit: Optional[int] = None,
    period: Optional[str] = None,
    actor: Actor = Depends(get_current_actor),
    use_case: GetTrendingCategoriesUseCase = Depends(get_trending_categories_use_case),
) -> List[TrendingCategoryResponse]:
    try:
        return await use_case.execute(AnalyticsRequest(limit=limit, period=period))
    except KudosError as e:
        raise to_http_exception(e)


@router.get(
    "/trending-keywords",
    response_model=List[TrendingKeywordResponse],
    summary="Most frequent words in kudos messages",
)
async def get_trending_keywords(
    limit: Optional[int] = None,
    period: Optional[str] = None,
    actor: Actor = Depends(get_current_actor),
    use_case: GetTrendingKeywordsUseCase = Depends(get_trending_keywords_use_case),
) -> List[TrendingKeywordResponse]:
    try:
        return await use_case.execute(AnalyticsRequest(limit=limit, period=period))
    except KudosError as e:
        raise to_http_exception(e)
