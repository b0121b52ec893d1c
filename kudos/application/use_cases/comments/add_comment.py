"""
Add Comment Use Case
====================

Business use case for commenting on a kudos card.
"""
import logging

from kudos.application.dto.comment_dto import AddCommentRequest, AddCommentResponse, CommentResponse
from kudos.domain.exceptions import CommentValidationError, KudosCardNotFoundError
from kudos.domain.models.comment import Comment
from kudos.domain.repositories.comment_repository import CommentRepository
from kudos.domain.repositories.kudos_card_repository import KudosCardRepository

logger = logging.getLogger(__name__)


class AddCommentUseCase:
    """
    Use case for adding a comment.

    The kudos card must exist; the response carries the new comment and the
    card's updated comment total.
    """

    def __init__(self, comment_repository: CommentRepository, kudos_card_repository: KudosCardRepository):
        """
        Initialize use case with repositories.

        Args:
            comment_repository: Repository for comment persistence
            kudos_card_repository: Repository used to check the card exists
        """
        self._repository = comment_repository
        self._kudos_cards = kudos_card_repository

    async def execute(self, request: AddCommentRequest, user_id: str) -> AddCommentResponse:
        """
        Execute the add comment use case.

        Args:
            request: Target card and comment text
            user_id: Author of the comment

        Raises:
            KudosCardNotFoundError: If the kudos card does not exist
            CommentValidationError: If the comment is invalid
        """
        kudos_card = await self._kudos_cards.find_by_id(request.kudos_card_id)
        if not kudos_card:
            raise KudosCardNotFoundError(request.kudos_card_id)

        try:
            comment = Comment.create(
                kudos_card_id=request.kudos_card_id,
                user_id=user_id,
                content=request.content,
            )
        except ValueError as e:
            raise CommentValidationError(str(e)) from e

        saved = await self._repository.add(comment)
        total_comments = await self._repository.count_by_kudos_card_id(request.kudos_card_id)
        logger.info("User %s commented on kudos card %s", user_id, request.kudos_card_id)

        return AddCommentResponse(
            comment=CommentResponse.from_entity(saved),
            total_comments=total_comments,
        )
