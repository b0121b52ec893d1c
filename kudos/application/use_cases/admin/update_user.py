"""
Update User Use Case
====================

Business use case for editing a user account.

Rules:
- non-admins may only update their own account
- only admins may change a role
- only admins and leads may change an approval status, never their own
"""
import logging
from typing import Union

from kudos.application.dto.admin_dto import UpdateUserRequest, UpdateUserResponse
from kudos.domain.exceptions import AdminValidationError, UnauthorizedActionError, UserNotFoundError
from kudos.domain.models.role import ApprovalStatus, Role
from kudos.domain.models.user import validate_email
from kudos.domain.repositories.user_repository import UserRepository
from kudos.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class UpdateUserUseCase:

    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository

    async def execute(
        self,
        request: UpdateUserRequest,
        actor_id: str,
        actor_role: Union[Role, int],
    ) -> UpdateUserResponse:
        """
        Execute the update user use case.

        Args:
            request: Target user and the fields to change
            actor_id: Requesting user
            actor_role: Role of the requesting user

        Returns:
            The updated user

        Raises:
            UnauthorizedActionError: If the actor may not make this change
            AdminValidationError: If a new value is invalid
            UserNotFoundError: If the target user does not exist
        """
        is_admin = actor_role == Role.ADMIN
        is_lead = actor_role == Role.LEAD
        is_self_update = actor_id == request.user_id

        if not is_admin and not is_self_update:
            raise UnauthorizedActionError("Only admin users can update other users")

        if not is_admin and request.role is not None:
            raise UnauthorizedActionError("Only admin users can change user roles")

        approval_status = None
        if request.approval_status is not None:
            if not is_admin and not is_lead:
                raise UnauthorizedActionError("Only admins and leads can update user approval status")
            if is_self_update:
                raise UnauthorizedActionError("You cannot update your own approval status")

        try:
            if request.approval_status is not None:
                approval_status = ApprovalStatus.parse(request.approval_status)
            role = Role.parse(request.role) if request.role is not None else None
            email = validate_email(request.email) if request.email is not None else None
        except ValueError as e:
            raise AdminValidationError(str(e)) from e

        for label, value in (("First name", request.first_name), ("Last name", request.last_name)):
            if value is not None and not value.strip():
                raise AdminValidationError(f"{label} cannot be empty")

        user = await self._repository.find_by_id(request.user_id)
        if not user:
            raise UserNotFoundError(request.user_id)

        if email is not None:
            user.email = email
        if request.first_name is not None:
            user.first_name = request.first_name
        if request.last_name is not None:
            user.last_name = request.last_name
        if request.job_title is not None:
            user.job_title = request.job_title
        if role is not None:
            user.role = role
        if approval_status is not None:
            user.approval_status = approval_status
        user.updated_at = now()

        updated = await self._repository.update(user)
        logger.info("User %s updated account %s", actor_id, request.user_id)
        return UpdateUserResponse.from_entity(updated)
