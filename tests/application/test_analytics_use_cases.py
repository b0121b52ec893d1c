import pytest

from kudos.application.dto.analytics_dto import AnalyticsRequest
from kudos.application.use_cases.analytics.get_top_recipients import GetTopRecipientsUseCase
from kudos.application.use_cases.analytics.get_top_teams import GetTopTeamsUseCase
from kudos.application.use_cases.analytics.get_trending_categories import GetTrendingCategoriesUseCase
from kudos.application.use_cases.analytics.get_trending_keywords import GetTrendingKeywordsUseCase
from kudos.domain.exceptions import AnalyticsValidationError, InvalidPeriodError
from kudos.domain.models.analytics import CategoryCount, KeywordCount, RecipientCount, TeamCount


@pytest.mark.asyncio
async def test_top_recipients_passes_limit_without_period(analytics_repository):
    analytics_repository.get_top_recipients.return_value = [
        RecipientCount(recipient_name="Ada", count=5),
        RecipientCount(recipient_name="Grace", count=3),
        RecipientCount(recipient_name="Linus", count=1),
    ]

    response = await GetTopRecipientsUseCase(analytics_repository).execute(AnalyticsRequest(limit=3))

    analytics_repository.get_top_recipients.assert_awaited_once_with(3, None)
    assert [(row.recipient_name, row.count) for row in response] == [("Ada", 5), ("Grace", 3), ("Linus", 1)]


@pytest.mark.asyncio
async def test_default_limit_is_ten(analytics_repository):
    analytics_repository.get_top_teams.return_value = []

    await GetTopTeamsUseCase(analytics_repository).execute(AnalyticsRequest())

    analytics_repository.get_top_teams.assert_awaited_once_with(10, None)


ALL_QUERIES = [
    (GetTopRecipientsUseCase, "get_top_recipients"),
    (GetTopTeamsUseCase, "get_top_teams"),
    (GetTrendingCategoriesUseCase, "get_trending_categories"),
    (GetTrendingKeywordsUseCase, "get_trending_keywords"),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("use_case_class, method", ALL_QUERIES)
async def test_period_keeps_caller_spelling(analytics_repository, use_case_class, method):
    getattr(analytics_repository, method).return_value = []

    await use_case_class(analytics_repository).execute(AnalyticsRequest(limit=5, period="Monthly"))

    getattr(analytics_repository, method).assert_awaited_once_with(5, "Monthly")


@pytest.mark.asyncio
@pytest.mark.parametrize("use_case_class, method", ALL_QUERIES)
async def test_invalid_period_rejected_before_query(analytics_repository, use_case_class, method):
    with pytest.raises(InvalidPeriodError, match="Invalid period: hourly. Valid periods are: daily, weekly"):
        await use_case_class(analytics_repository).execute(AnalyticsRequest(period="hourly"))

    getattr(analytics_repository, method).assert_not_awaited()


@pytest.mark.asyncio
async def test_trending_categories_map_rows(analytics_repository):
    analytics_repository.get_trending_categories.return_value = [
        CategoryCount(category_id=2, category_name="Teamwork", count=8),
    ]

    response = await GetTrendingCategoriesUseCase(analytics_repository).execute(AnalyticsRequest())

    assert response[0].model_dump() == {"category_id": 2, "category_name": "Teamwork", "count": 8}


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, -3])
async def test_non_positive_limit_rejected(analytics_repository, limit):
    with pytest.raises(AnalyticsValidationError, match="Limit must be greater than 0"):
        await GetTopRecipientsUseCase(analytics_repository).execute(AnalyticsRequest(limit=limit))

    analytics_repository.get_top_recipients.assert_not_awaited()


@pytest.mark.asyncio
async def test_top_teams_and_keywords_map_rows(analytics_repository):
    analytics_repository.get_top_teams.return_value = [TeamCount(team_id=1, team_name="Platform", count=4)]
    analytics_repository.get_trending_keywords.return_value = [KeywordCount(keyword="thanks", count=12)]

    teams = await GetTopTeamsUseCase(analytics_repository).execute(AnalyticsRequest(period="weekly"))
    keywords = await GetTrendingKeywordsUseCase(analytics_repository).execute(AnalyticsRequest(limit=1))

    assert teams[0].model_dump() == {"team_id": 1, "team_name": "Platform", "count": 4}
    assert keywords[0].model_dump() == {"keyword": "thanks", "count": 12}
