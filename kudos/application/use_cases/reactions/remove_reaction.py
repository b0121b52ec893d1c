"""
Remove Reaction Use Case
========================

Hard-deletes a reaction. Only the user who added it may remove it.
"""
import logging

from kudos.application.dto.reaction_dto import ReactionCountResponse, RemoveReactionResponse
from kudos.domain.exceptions import OperationFailedError, ReactionNotFoundError, UnauthorizedReactionError
from kudos.domain.repositories.reaction_repository import ReactionRepository

logger = logging.getLogger(__name__)


class RemoveReactionUseCase:

    def __init__(self, reaction_repository: ReactionRepository):
        self._repository = reaction_repository

    async def execute(self, reaction_id: str, user_id: str) -> RemoveReactionResponse:
        """
        Execute the remove reaction use case.

        Returns:
            Success flag, the reaction's kudos card and its remaining counts

        Raises:
            ReactionNotFoundError: If the reaction does not exist
            UnauthorizedReactionError: If the user did not add the reaction
            OperationFailedError: If the store did not remove the reaction
        """
        reaction = await self._repository.find_by_id(reaction_id)
        if not reaction:
            raise ReactionNotFoundError(reaction_id)

        if reaction.user_id != user_id:
            raise UnauthorizedReactionError(user_id, reaction_id)

        removed = await self._repository.remove(reaction_id)
        if not removed:
            raise OperationFailedError(f"Failed to remove reaction with ID {reaction_id}")

        counts = await self._repository.count_by_type(reaction.kudos_card_id)
        logger.info("User %s removed reaction %s", user_id, reaction_id)

        return RemoveReactionResponse(
            success=True,
            kudos_card_id=reaction.kudos_card_id,
            reaction_counts=[ReactionCountResponse.from_row(row) for row in counts],
        )
