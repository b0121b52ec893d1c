"""
Delete Comment Use Case
=======================

Soft-deletes a comment. Only its author may delete it.
"""
import logging

from kudos.application.dto.comment_dto import DeleteCommentResponse
from kudos.domain.exceptions import CommentNotFoundError, UnauthorizedCommentAccessError
from kudos.domain.repositories.comment_repository import CommentRepository

logger = logging.getLogger(__name__)


class DeleteCommentUseCase:

    def __init__(self, comment_repository: CommentRepository):
        self._repository = comment_repository

    async def execute(self, comment_id: str, user_id: str) -> DeleteCommentResponse:
        """
        Execute the delete comment use case.

        Raises:
            CommentNotFoundError: If the comment does not exist
            UnauthorizedCommentAccessError: If the user is not the author
        """
        comment = await self._repository.find_by_id(comment_id)
        if not comment:
            raise CommentNotFoundError(comment_id)

        if comment.user_id != user_id:
            raise UnauthorizedCommentAccessError(user_id, comment_id)

        deleted = await self._repository.soft_delete(comment_id)
        if deleted:
            logger.info("User %s deleted comment %s", user_id, comment_id)
        return DeleteCommentResponse(deleted=deleted)
