"""
Kudos Card Repository Interface
===============================

The parts of the kudos-card store this service consumes: existence checks
and the ranked aggregation queries behind analytics.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from kudos.domain.models.analytics import CategoryCount, KeywordCount, RecipientCount, TeamCount
from kudos.domain.models.kudos_card import KudosCard


class KudosCardRepository(ABC):

    @abstractmethod
    async def find_by_id(self, kudos_card_id: str) -> Optional[KudosCard]:
        """Find a non-deleted kudos card by its ID."""
        pass

    @abstractmethod
    async def get_top_recipients(self, limit: int, period: Optional[str] = None) -> List[RecipientCount]:
        pass

    @abstractmethod
    async def get_top_teams(self, limit: int, period: Optional[str] = None) -> List[TeamCount]:
        pass

    @abstractmethod
    async def get_trending_categories(self, limit: int, period: Optional[str] = None) -> List[CategoryCount]:
        pass

    @abstractmethod
    async def get_trending_keywords(self, limit: int, period: Optional[str] = None) -> List[KeywordCount]:
        pass
