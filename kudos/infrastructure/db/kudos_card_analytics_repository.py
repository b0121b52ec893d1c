"""
Kudos Card Analytics Repository
===============================

AnalyticsRepository backed by the kudos card repository's aggregations.
"""
from typing import List, Optional

from kudos.domain.models.analytics import CategoryCount, KeywordCount, RecipientCount, TeamCount
from kudos.domain.repositories.analytics_repository import AnalyticsRepository
from kudos.domain.repositories.kudos_card_repository import KudosCardRepository


class KudosCardAnalyticsRepository(AnalyticsRepository):
    """Delegates every analytics query to a KudosCardRepository."""

    def __init__(self, kudos_card_repository: KudosCardRepository):
        self._kudos_cards = kudos_card_repository

    async def get_top_recipients(self, limit: int, period: Optional[str] = None) -> List[RecipientCount]:
        return await self._kudos_cards.get_top_recipients(limit, period)

    async def get_top_teams(self, limit: int, period: Optional[str] = None) -> List[TeamCount]:
        return await self._kudos_cards.get_top_teams(limit, period)

    async def get_trending_categories(self, limit: int, period: Optional[str] = None) -> List[CategoryCount]:
        return await self._kudos_cards.get_trending_categories(limit, period)

    async def get_trending_keywords(self, limit: int, period: Optional[str] = None) -> List[KeywordCount]:
        return await self._kudos_cards.get_trending_keywords(limit, period)
