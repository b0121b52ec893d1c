from typing import TYPE_CHECKING

from kudos.core.config import Settings
from kudos.domain.repositories.analytics_repository import AnalyticsRepository
from kudos.domain.repositories.comment_repository import CommentRepository
from kudos.domain.repositories.kudos_card_repository import KudosCardRepository
from kudos.domain.repositories.reaction_repository import ReactionRepository
from kudos.domain.repositories.team_repository import TeamRepository
from kudos.domain.repositories.user_repository import AdminUserRepository, UserRepository
from kudos.infrastructure.db.kudos_card_analytics_repository import KudosCardAnalyticsRepository
from kudos.infrastructure.db.mongo_comment_repository import MongoCommentRepository
from kudos.infrastructure.db.mongo_kudos_card_repository import MongoKudosCardRepository
from kudos.infrastructure.db.mongo_reaction_repository import MongoReactionRepository
from kudos.infrastructure.db.mongo_team_repository import MongoTeamRepository
from kudos.infrastructure.db.mongo_user_repository import MongoUserRepository
from .database_provider import MONGO_CONNECTION_KEY

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the database connection from the database provider and creates repository instances.
        """
        settings = container.get(Settings)
        connection = container.get(MONGO_CONNECTION_KEY)

        # Domain interfaces -> Infrastructure implementations
        kudos_card_repository = MongoKudosCardRepository(
            connection,
            collection_name=settings.kudos_cards_collection,
            teams_collection_name=settings.teams_collection,
            categories_collection_name=settings.categories_collection,
        )
        container.register_singleton(KudosCardRepository, kudos_card_repository)

        container.register_singleton(
            AnalyticsRepository,
            KudosCardAnalyticsRepository(kudos_card_repository),
        )

        container.register_singleton(
            TeamRepository,
            MongoTeamRepository(
                connection,
                collection_name=settings.teams_collection,
                kudos_cards_collection_name=settings.kudos_cards_collection,
                counters_collection_name=settings.counters_collection,
            ),
        )

        container.register_singleton(
            CommentRepository,
            MongoCommentRepository(connection, collection_name=settings.comments_collection),
        )

        container.register_singleton(
            ReactionRepository,
            MongoReactionRepository(connection, collection_name=settings.reactions_collection),
        )

        # One user repository serves both the admin queries and account updates
        user_repository = MongoUserRepository(connection, collection_name=settings.users_collection)
        container.register_singleton(AdminUserRepository, user_repository)
        container.register_singleton(UserRepository, user_repository)
