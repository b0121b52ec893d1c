"""
Get Reactions Use Case
======================

Lists the reactions of a kudos card with per-type counts.
"""
from kudos.application.dto.reaction_dto import GetReactionsResponse, ReactionCountResponse, ReactionResponse
from kudos.domain.exceptions import KudosCardNotFoundError
from kudos.domain.repositories.kudos_card_repository import KudosCardRepository
from kudos.domain.repositories.reaction_repository import ReactionRepository


class GetReactionsUseCase:

    def __init__(self, reaction_repository: ReactionRepository, kudos_card_repository: KudosCardRepository):
        self._repository = reaction_repository
        self._kudos_cards = kudos_card_repository

    async def execute(self, kudos_card_id: str) -> GetReactionsResponse:
        kudos_card = await self._kudos_cards.find_by_id(kudos_card_id)
        if not kudos_card:
            raise KudosCardNotFoundError(kudos_card_id)

        reactions = await self._repository.find_by_kudos_card_id(kudos_card_id)
        counts = await self._repository.count_by_type(kudos_card_id)

        return GetReactionsResponse(
            reactions=[ReactionResponse.from_entity(reaction) for reaction in reactions],
            reaction_counts=[ReactionCountResponse.from_row(row) for row in counts],
        )
