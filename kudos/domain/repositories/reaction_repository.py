"""
Reaction Repository Interface
=============================

Abstract interface for reaction data access.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from kudos.domain.models.reaction import Reaction, ReactionCount, ReactionType


class ReactionRepository(ABC):
    """Abstract repository for reaction persistence operations."""

    @abstractmethod
    async def add(self, reaction: Reaction) -> Reaction:
        """
        Add a reaction to a kudos card.

        Returns:
            Stored reaction carrying its assigned id
        """
        pass

    @abstractmethod
    async def remove(self, reaction_id: str) -> bool:
        """
        Permanently delete a reaction.

        Returns:
            True if the reaction existed and was removed, False otherwise
        """
        pass

    @abstractmethod
    async def find_by_id(self, reaction_id: str) -> Optional[Reaction]:
        """Find a reaction by its ID."""
        pass

    @abstractmethod
    async def find_by_user_and_type(
        self,
        kudos_card_id: str,
        user_id: str,
        reaction_type: ReactionType,
    ) -> Optional[Reaction]:
        """Find a user's reaction of a given type on a kudos card."""
        pass

    @abstractmethod
    async def find_by_kudos_card_id(self, kudos_card_id: str) -> List[Reaction]:
        """Get all reactions of a kudos card, oldest first."""
        pass

    @abstractmethod
    async def count_by_type(self, kudos_card_id: str) -> List[ReactionCount]:
        """Get reaction counts of a kudos card grouped by type."""
        pass
