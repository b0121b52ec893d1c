from typing import TYPE_CHECKING

from kudos.application.use_cases.analytics.get_top_recipients import GetTopRecipientsUseCase
from kudos.application.use_cases.analytics.get_top_teams import GetTopTeamsUseCase
from kudos.application.use_cases.analytics.get_trending_categories import GetTrendingCategoriesUseCase
from kudos.application.use_cases.analytics.get_trending_keywords import GetTrendingKeywordsUseCase
from kudos.domain.repositories.analytics_repository import AnalyticsRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AnalyticsProvider:
    """Analytics use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        analytics_repository = container.get(AnalyticsRepository)

        for use_case_class in (
            GetTopRecipientsUseCase,
            GetTopTeamsUseCase,
            GetTrendingCategoriesUseCase,
            GetTrendingKeywordsUseCase,
        ):
            container.register_singleton(use_case_class, use_case_class(analytics_repository))
