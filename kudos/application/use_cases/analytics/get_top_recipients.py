"""
Get Top Recipients Use Case
===========================

Employees who received the most kudos cards.
"""
from typing import List

from kudos.application.dto.analytics_dto import AnalyticsRequest, TopRecipientResponse
from kudos.application.use_cases.analytics.base import AnalyticsUseCase


class GetTopRecipientsUseCase(AnalyticsUseCase):

    async def execute(self, request: AnalyticsRequest) -> List[TopRecipientResponse]:
        """
        Execute the top recipients use case.

        Args:
            request: Optional limit (default 10) and period

        Returns:
            Recipients with their kudos count, highest first
        """
        limit, period = self._validate(request)

        rows = await self._repository.get_top_recipients(limit, period)
        return [TopRecipientResponse(recipient_name=row.recipient_name, count=row.count) for row in rows]
