"""
Delete Team Use Case
====================

Business use case for deleting a team no kudos card refers to.
"""
import logging
from typing import Union

from kudos.application.dto.team_dto import TeamDeleteResponse
from kudos.application.use_cases.admin.base import require_role
from kudos.domain.exceptions import OperationFailedError, TeamNotFoundError
from kudos.domain.models.role import Role
from kudos.domain.repositories.team_repository import TeamRepository

logger = logging.getLogger(__name__)


class DeleteTeamUseCase:
    """Use case for deleting a team. Admins only."""

    def __init__(self, team_repository: TeamRepository):
        self._repository = team_repository

    async def execute(self, team_id: int, actor_role: Union[Role, int]) -> TeamDeleteResponse:
        """
        Execute the delete team use case.

        Raises:
            UnauthorizedRoleError: If the caller is not an admin
            TeamNotFoundError: If no team has this id
            TeamInUseError: If kudos cards still reference the team
            OperationFailedError: If the store did not delete the team
        """
        require_role(actor_role, (Role.ADMIN,))

        team = await self._repository.find_by_id(team_id)
        if not team:
            raise TeamNotFoundError(team_id)

        deleted = await self._repository.delete(team_id)
        if not deleted:
            raise OperationFailedError(f"Failed to delete team with ID {team_id}")

        logger.info("Deleted team %s (%s)", team_id, team.name)
        return TeamDeleteResponse(
            success=True,
            message=f"Team with ID {team_id} has been deleted successfully",
        )
