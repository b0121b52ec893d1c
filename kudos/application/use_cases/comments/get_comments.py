"""
Get Comments Use Case
=====================

Lists the live comments of a kudos card.
"""
from kudos.application.dto.comment_dto import CommentResponse, GetCommentsResponse
from kudos.domain.exceptions import KudosCardNotFoundError
from kudos.domain.repositories.comment_repository import CommentRepository
from kudos.domain.repositories.kudos_card_repository import KudosCardRepository


class GetCommentsUseCase:

    def __init__(self, comment_repository: CommentRepository, kudos_card_repository: KudosCardRepository):
        self._repository = comment_repository
        self._kudos_cards = kudos_card_repository

    async def execute(self, kudos_card_id: str) -> GetCommentsResponse:
        """
        Raises:
            KudosCardNotFoundError: If the kudos card does not exist
        """
        kudos_card = await self._kudos_cards.find_by_id(kudos_card_id)
        if not kudos_card:
            raise KudosCardNotFoundError(kudos_card_id)

        comments = await self._repository.find_by_kudos_card_id(kudos_card_id, include_deleted=False)
        total_comments = await self._repository.count_by_kudos_card_id(kudos_card_id)

        return GetCommentsResponse(
            comments=[CommentResponse.from_entity(comment) for comment in comments],
            total_comments=total_comments,
        )
