"""
Analytics Repository Interface
==============================

Ranked kudos statistics. Every method takes a result limit and an optional
period name (daily, weekly, monthly, quarterly, yearly); without a period
the whole history is aggregated.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from kudos.domain.models.analytics import CategoryCount, KeywordCount, RecipientCount, TeamCount


class AnalyticsRepository(ABC):
    """Abstract repository for analytics queries."""

    @abstractmethod
    async def get_top_recipients(self, limit: int, period: Optional[str] = None) -> List[RecipientCount]:
        """
        Get top recipients of kudos cards.

        Args:
            limit: Maximum number of recipients to return
            period: Optional time period for filtering

        Returns:
            Recipients with their kudos count, highest first
        """
        pass

    @abstractmethod
    async def get_top_teams(self, limit: int, period: Optional[str] = None) -> List[TeamCount]:
        """Get teams receiving the most kudos cards, highest first."""
        pass

    @abstractmethod
    async def get_trending_categories(self, limit: int, period: Optional[str] = None) -> List[CategoryCount]:
        """Get the most used kudos categories, highest first."""
        pass

    @abstractmethod
    async def get_trending_keywords(self, limit: int, period: Optional[str] = None) -> List[KeywordCount]:
        """Get the most frequent words in kudos messages, highest first."""
        pass
