"""
Get Team Use Cases
==================

Read-only team lookups.
"""
from typing import List

from kudos.application.dto.team_dto import TeamResponse
from kudos.domain.exceptions import TeamNotFoundError
from kudos.domain.repositories.team_repository import TeamRepository


class GetTeamByIdUseCase:
    """Use case for fetching one team."""

    def __init__(self, team_repository: TeamRepository):
        self._repository = team_repository

    async def execute(self, team_id: int) -> TeamResponse:
        """
        Raises:
            TeamNotFoundError: If no team has this id
        """
        team = await self._repository.find_by_id(team_id)
        if not team:
            raise TeamNotFoundError(team_id)
        return TeamResponse.from_entity(team)


class GetAllTeamsUseCase:
    """Use case for listing every team, ordered by name."""

    def __init__(self, team_repository: TeamRepository):
        self._repository = team_repository

    async def execute(self) -> List[TeamResponse]:
        teams = await self._repository.find_all()
        return [TeamResponse.from_entity(team) for team in teams]
