"""
Get Trending Categories Use Case
================================

Most used kudos categories.
"""
from typing import List

from kudos.application.dto.analytics_dto import AnalyticsRequest, TrendingCategoryResponse
from kudos.application.use_cases.analytics.base import AnalyticsUseCase


class GetTrendingCategoriesUseCase(AnalyticsUseCase):

    async def execute(self, request: AnalyticsRequest) -> List[TrendingCategoryResponse]:
        limit, period = self._validate(request)

        rows = await self._repository.get_trending_categories(limit, period)
        return [
            TrendingCategoryResponse(
                category_id=row.category_id,
                category_name=row.category_name,
                count=row.count,
            )
            for row in rows
        ]
