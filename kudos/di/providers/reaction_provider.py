from typing import TYPE_CHECKING

from kudos.application.use_cases.reactions.add_reaction import AddReactionUseCase
from kudos.application.use_cases.reactions.get_reactions import GetReactionsUseCase
from kudos.application.use_cases.reactions.remove_reaction import RemoveReactionUseCase
from kudos.domain.repositories.kudos_card_repository import KudosCardRepository
from kudos.domain.repositories.reaction_repository import ReactionRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ReactionProvider:
    """Reaction use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        reaction_repository = container.get(ReactionRepository)
        kudos_card_repository = container.get(KudosCardRepository)

        container.register_singleton(
            AddReactionUseCase,
            AddReactionUseCase(reaction_repository, kudos_card_repository),
        )
        container.register_singleton(
            GetReactionsUseCase,
            GetReactionsUseCase(reaction_repository, kudos_card_repository),
        )
        container.register_singleton(RemoveReactionUseCase, RemoveReactionUseCase(reaction_repository))
