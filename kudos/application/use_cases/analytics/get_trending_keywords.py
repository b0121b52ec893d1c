"""
Get Trending Keywords Use Case
==============================

Most frequent words in kudos card messages.
"""
from typing import List

from kudos.application.dto.analytics_dto import AnalyticsRequest, TrendingKeywordResponse
from kudos.application.use_cases.analytics.base import AnalyticsUseCase


class GetTrendingKeywordsUseCase(AnalyticsUseCase):

    async def execute(self, request: AnalyticsRequest) -> List[TrendingKeywordResponse]:
        limit, period = self._validate(request)

        rows = await self._repository.get_trending_keywords(limit, period)
        return [TrendingKeywordResponse(keyword=row.keyword, count=row.count) for row in rows]
