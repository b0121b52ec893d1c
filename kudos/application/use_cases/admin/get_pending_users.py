"""
Get Pending Users Use Case
==========================

Lists users awaiting approval for admins and leads.
"""
from typing import Union

from kudos.application.dto.admin_dto import GetPendingUsersRequest, PendingUsersResponse, UserResponse
from kudos.application.use_cases.admin.base import require_role, resolve_pagination
from kudos.domain.models.role import Role
from kudos.domain.repositories.user_repository import AdminUserRepository


class GetPendingUsersUseCase:
    """
    Use case for the pending-approval queue.

    The role check runs before any repository access.
    """

    def __init__(self, admin_user_repository: AdminUserRepository):
        """
        Initialize use case with repository.

        Args:
            admin_user_repository: Repository for admin user queries
        """
        self._repository = admin_user_repository

    async def execute(self, request: GetPendingUsersRequest, actor_role: Union[Role, int]) -> PendingUsersResponse:
        """
        Execute the get pending users use case.

        Args:
            request: Pagination (limit defaults to 10, offset to 0)
            actor_role: Role of the requesting user

        Returns:
            One page of pending users and the total pending count

        Raises:
            UnauthorizedRoleError: If the actor is neither admin nor lead
            AdminValidationError: If the pagination values are out of range
        """
        require_role(actor_role)
        limit, offset = resolve_pagination(request.limit, request.offset)

        users = await self._repository.find_pending_users(limit, offset)
        total = await self._repository.count_pending_users()

        return PendingUsersResponse(
            users=[UserResponse.from_entity(user) for user in users],
            total=total,
        )
