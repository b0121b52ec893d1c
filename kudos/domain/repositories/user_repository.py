"""
User Repository Interfaces
==========================

AdminUserRepository covers the admin listing/search queries;
UserRepository covers single-account reads and writes.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from kudos.domain.models.user import User, UserSearchFilters


class AdminUserRepository(ABC):
    """Queries used by the admin views."""

    @abstractmethod
    async def find_pending_users(self, limit: int, offset: int) -> List[User]:
        """
        Get users awaiting approval, newest first.

        Args:
            limit: Maximum number of users to return
            offset: Number of users to skip
        """
        pass

    @abstractmethod
    async def count_pending_users(self) -> int:
        """Count all users awaiting approval."""
        pass

    @abstractmethod
    async def search_users(self, filters: UserSearchFilters) -> List[User]:
        """
        Get users matching the filters.

        The query term matches email, first name or last name, case-insensitively.
        """
        pass

    @abstractmethod
    async def count_users(self, filters: UserSearchFilters) -> int:
        """Count users matching the filters, ignoring limit and offset."""
        pass


class UserRepository(ABC):
    """Single-account access."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Persist a changed user.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """
        Delete a user account.

        Returns:
            True if the account existed and was removed, False otherwise
        """
        pass
