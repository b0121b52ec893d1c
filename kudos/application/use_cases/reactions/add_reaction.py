"""
Add Reaction Use Case
=====================

Business use case for reacting to a kudos card.
"""
import logging

from kudos.application.dto.reaction_dto import (
    AddReactionRequest,
    AddReactionResponse,
    ReactionCountResponse,
    ReactionResponse,
)
from kudos.domain.exceptions import DuplicateReactionError, KudosCardNotFoundError, ReactionValidationError
from kudos.domain.models.reaction import Reaction
from kudos.domain.repositories.kudos_card_repository import KudosCardRepository
from kudos.domain.repositories.reaction_repository import ReactionRepository

logger = logging.getLogger(__name__)


class AddReactionUseCase:
    """
    Use case for adding a reaction.

    A user may react to a card once per reaction type. The response carries
    the new reaction and the card's per-type counts.
    """

    def __init__(self, reaction_repository: ReactionRepository, kudos_card_repository: KudosCardRepository):
        """
        Initialize use case with repositories.

        Args:
            reaction_repository: Repository for reaction persistence
            kudos_card_repository: Repository used to check the card exists
        """
        self._repository = reaction_repository
        self._kudos_cards = kudos_card_repository

    async def execute(self, request: AddReactionRequest, user_id: str) -> AddReactionResponse:
        """
        Execute the add reaction use case.

        Raises:
            KudosCardNotFoundError: If the kudos card does not exist
            ReactionValidationError: If the reaction type is unknown
            DuplicateReactionError: If the user already reacted with this type
        """
        kudos_card = await self._kudos_cards.find_by_id(request.kudos_card_id)
        if not kudos_card:
            raise KudosCardNotFoundError(request.kudos_card_id)

        try:
            reaction = Reaction.create(
                kudos_card_id=request.kudos_card_id,
                user_id=user_id,
                type=request.type,
            )
        except ValueError as e:
            raise ReactionValidationError(str(e)) from e

        existing = await self._repository.find_by_user_and_type(request.kudos_card_id, user_id, reaction.type)
        if existing:
            raise DuplicateReactionError(user_id, reaction.type.value)

        saved = await self._repository.add(reaction)
        counts = await self._repository.count_by_type(request.kudos_card_id)
        logger.info("User %s reacted %s on kudos card %s", user_id, reaction.type.value, request.kudos_card_id)

        return AddReactionResponse(
            reaction=ReactionResponse.from_entity(saved),
            reaction_counts=[ReactionCountResponse.from_row(row) for row in counts],
        )
