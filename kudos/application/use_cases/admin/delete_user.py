"""
Delete User Use Case
====================

Business use case for deleting a user account. Admin only.
"""
import logging
from typing import Union

from kudos.application.dto.admin_dto import DeleteUserRequest, DeleteUserResponse
from kudos.domain.exceptions import OperationFailedError, UnauthorizedActionError, UserNotFoundError
from kudos.domain.models.role import Role
from kudos.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:

    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository

    async def execute(
        self,
        request: DeleteUserRequest,
        actor_id: str,
        actor_role: Union[Role, int],
    ) -> DeleteUserResponse:
        """
        Execute the delete user use case.

        Raises:
            UnauthorizedActionError: If the actor is not an admin, targets
                their own account or targets another admin
            UserNotFoundError: If the target user does not exist
            OperationFailedError: If the store did not delete the account
        """
        if actor_role != Role.ADMIN:
            raise UnauthorizedActionError("Only admin users can delete user accounts")

        if actor_id == request.user_id:
            raise UnauthorizedActionError("Admin cannot delete their own account")

        user = await self._repository.find_by_id(request.user_id)
        if not user:
            raise UserNotFoundError(request.user_id)

        if user.is_admin():
            raise UnauthorizedActionError("Cannot delete another admin account")

        deleted = await self._repository.delete(request.user_id)
        if not deleted:
            raise OperationFailedError("Failed to delete user")

        logger.info("Admin %s deleted user %s", actor_id, request.user_id)
        return DeleteUserResponse(
            success=True,
            message=f"User with ID {request.user_id} has been deleted successfully",
        )
