"""
Search Users Use Case
=====================

Filtered user search for admins and leads.
"""
from typing import Union

from kudos.application.dto.admin_dto import SearchUsersRequest, SearchUsersResponse, UserResponse
from kudos.application.use_cases.admin.base import require_role, resolve_pagination
from kudos.domain.exceptions import AdminValidationError
from kudos.domain.models.role import ApprovalStatus, Role
from kudos.domain.models.user import UserSearchFilters
from kudos.domain.repositories.user_repository import AdminUserRepository


class SearchUsersUseCase:

    def __init__(self, admin_user_repository: AdminUserRepository):
        self._repository = admin_user_repository

    async def execute(self, request: SearchUsersRequest, actor_role: Union[Role, int]) -> SearchUsersResponse:
        """
        Execute the search users use case.

        Args:
            request: Optional query, role and approval status filters plus pagination
            actor_role: Role of the requesting user

        Raises:
            UnauthorizedRoleError: If the actor is neither admin nor lead
            AdminValidationError: If a filter value is invalid
        """
        require_role(actor_role)
        limit, offset = resolve_pagination(request.limit, request.offset)

        try:
            role = Role.parse(request.role) if request.role is not None else None
            approval_status = (
                ApprovalStatus.parse(request.approval_status)
                if request.approval_status is not None
                else None
            )
        except ValueError as e:
            raise AdminValidationError(str(e)) from e

        filters = UserSearchFilters(
            query=request.query,
            role=role,
            approval_status=approval_status,
            limit=limit,
            offset=offset,
        )

        users = await self._repository.search_users(filters)
        total = await self._repository.count_users(filters)

        return SearchUsersResponse(
            users=[UserResponse.from_entity(user) for user in users],
            total=total,
        )
