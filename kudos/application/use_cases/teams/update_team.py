"""
Update Team Use Case
====================

Business use case for partially updating a team.
"""
import logging
from typing import Union

from kudos.application.dto.team_dto import TeamResponse, TeamUpdateRequest
from kudos.application.use_cases.admin.base import require_role
from kudos.domain.exceptions import TeamNotFoundError, TeamValidationError
from kudos.domain.models.role import Role
from kudos.domain.repositories.team_repository import TeamRepository

logger = logging.getLogger(__name__)


class UpdateTeamUseCase:
    """
    Use case for updating a team.

    Admins only. Only the fields present in the request are applied. Entity validation
    failures become TeamValidationError; TeamNotFoundError propagates as is.
    """

    def __init__(self, team_repository: TeamRepository):
        self._repository = team_repository

    async def execute(
        self, team_id: int, request: TeamUpdateRequest, actor_role: Union[Role, int]
    ) -> TeamResponse:
        """
        Execute the update team use case.

        Args:
            team_id: Team to update
            request: Fields to change
            actor_role: Role of the caller

        Returns:
            Updated team

        Raises:
            UnauthorizedRoleError: If the caller is not an admin
            TeamNotFoundError: If no team has this id
            TeamValidationError: If the new values are invalid
        """
        require_role(actor_role, (Role.ADMIN,))

        team = await self._repository.find_by_id(team_id)
        if not team:
            raise TeamNotFoundError(team_id)

        try:
            if request.name is not None:
                team.update_name(request.name)
        except ValueError as e:
            raise TeamValidationError(str(e)) from e

        updated = await self._repository.update(team)
        logger.info("Updated team %s", team_id)
        return TeamResponse.from_entity(updated)
