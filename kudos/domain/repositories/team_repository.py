"""
Team Repository Interface
=========================

Abstract interface for team data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from kudos.domain.models.team import Team


class TeamRepository(ABC):
    """
    Abstract repository for team persistence operations.

    This interface defines the contract for team data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    async def find_all(self) -> List[Team]:
        """
        Find all teams, ordered by name.

        Returns:
            List of team entities
        """
        pass

    @abstractmethod
    async def find_by_id(self, team_id: int) -> Optional[Team]:
        """
        Find a team by its ID.

        Args:
            team_id: Store-assigned team identifier

        Returns:
            Team entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, team: Team) -> Team:
        """
        Create a new team.

        Args:
            team: Validated team entity without an id

        Returns:
            Created team entity carrying its assigned id
        """
        pass

    @abstractmethod
    async def update(self, team: Team) -> Team:
        """
        Update an existing team.

        Args:
            team: Team entity with updated data

        Returns:
            Updated team entity
        """
        pass

    @abstractmethod
    async def delete(self, team_id: int) -> bool:
        """
        Delete a team.

        Args:
            team_id: Store-assigned team identifier

        Returns:
            True if the team was found and deleted, False otherwise

        Raises:
            TeamInUseError: If any kudos card still references the team
        """
        pass
