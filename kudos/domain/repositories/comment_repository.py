"""
Comment Repository Interface
============================

Abstract interface for comment data access.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from kudos.domain.models.comment import Comment


class CommentRepository(ABC):
    """Abstract repository for comment persistence operations."""

    @abstractmethod
    async def add(self, comment: Comment) -> Comment:
        """
        Add a comment to a kudos card.

        Args:
            comment: Validated comment entity without an id

        Returns:
            Stored comment carrying its assigned id
        """
        pass

    @abstractmethod
    async def update(self, comment: Comment) -> Optional[Comment]:
        """
        Persist a changed comment.

        Returns:
            Updated comment, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: str) -> bool:
        """
        Mark a comment as deleted without removing it.

        Returns:
            True if a live comment was tombstoned, False otherwise
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: str) -> Optional[Comment]:
        """Find a non-deleted comment by its ID."""
        pass

    @abstractmethod
    async def find_by_kudos_card_id(
        self,
        kudos_card_id: str,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """
        Get the comments of a kudos card, oldest first.

        Args:
            kudos_card_id: Kudos card identifier
            include_deleted: Whether tombstoned comments are returned too
        """
        pass

    @abstractmethod
    async def count_by_kudos_card_id(self, kudos_card_id: str) -> int:
        """Count the non-deleted comments of a kudos card."""
        pass
