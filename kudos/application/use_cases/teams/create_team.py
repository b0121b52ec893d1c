"""
Create Team Use Case
====================

Business use case for creating a new team.
"""
import logging
from typing import Union

from kudos.application.dto.team_dto import TeamCreateRequest, TeamResponse
from kudos.application.use_cases.admin.base import require_role
from kudos.domain.exceptions import TeamValidationError
from kudos.domain.models.role import Role
from kudos.domain.models.team import Team
from kudos.domain.repositories.team_repository import TeamRepository

logger = logging.getLogger(__name__)


class CreateTeamUseCase:
    """
    Use case for creating a team.

    Only admins may create teams. Name validation happens in the Team
    entity; its failures surface as TeamValidationError.
    """

    def __init__(self, team_repository: TeamRepository):
        """
        Initialize use case with repository.

        Args:
            team_repository: Repository for team persistence
        """
        self._repository = team_repository

    async def execute(self, request: TeamCreateRequest, actor_role: Union[Role, int]) -> TeamResponse:
        """
        Execute the create team use case.

        Args:
            request: Team creation data
            actor_role: Role of the caller

        Returns:
            Created team

        Raises:
            UnauthorizedRoleError: If the caller is not an admin
            TeamValidationError: If the team name is invalid
        """
        require_role(actor_role, (Role.ADMIN,))

        try:
            team = Team.create(name=request.name)
        except ValueError as e:
            raise TeamValidationError(str(e)) from e

        created = await self._repository.create(team)
        logger.info("Created team %s (%s)", created.id, created.name)
        return TeamResponse.from_entity(created)
