"""
Update Comment Use Case
=======================

Business use case for editing a comment. Only its author may edit it.
"""
import logging

from kudos.application.dto.comment_dto import CommentResponse, UpdateCommentRequest, UpdateCommentResponse
from kudos.domain.exceptions import (
    CommentNotFoundError,
    CommentValidationError,
    UnauthorizedCommentAccessError,
)
from kudos.domain.repositories.comment_repository import CommentRepository

logger = logging.getLogger(__name__)


class UpdateCommentUseCase:

    def __init__(self, comment_repository: CommentRepository):
        self._repository = comment_repository

    async def execute(self, request: UpdateCommentRequest, user_id: str) -> UpdateCommentResponse:
        """
        Execute the update comment use case.

        Args:
            request: Comment id and new content
            user_id: Requesting user

        Returns:
            The updated comment

        Raises:
            CommentNotFoundError: If the comment does not exist
            UnauthorizedCommentAccessError: If the user is not the author
            CommentValidationError: If the new content is invalid
        """
        comment = await self._repository.find_by_id(request.comment_id)
        if not comment:
            raise CommentNotFoundError(request.comment_id)

        if comment.user_id != user_id:
            raise UnauthorizedCommentAccessError(user_id, request.comment_id)

        try:
            comment.update(request.content)
        except ValueError as e:
            raise CommentValidationError(str(e)) from e

        updated = await self._repository.update(comment)
        if not updated:
            # deleted between the lookup and the write
            raise CommentNotFoundError(request.comment_id)

        logger.info("User %s updated comment %s", user_id, request.comment_id)
        return UpdateCommentResponse(comment=CommentResponse.from_entity(updated))
