"""
Get Top Teams Use Case
======================

Teams that received the most kudos cards.
"""
from typing import List

from kudos.application.dto.analytics_dto import AnalyticsRequest, TopTeamResponse
from kudos.application.use_cases.analytics.base import AnalyticsUseCase


class GetTopTeamsUseCase(AnalyticsUseCase):

    async def execute(self, request: AnalyticsRequest) -> List[TopTeamResponse]:
        limit, period = self._validate(request)

        rows = await self._repository.get_top_teams(limit, period)
        return [
            TopTeamResponse(team_id=row.team_id, team_name=row.team_name, count=row.count)
            for row in rows
        ]
