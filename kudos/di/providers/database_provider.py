from typing import TYPE_CHECKING

from kudos.core.config import Settings
from kudos.infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer

MONGO_CONNECTION_KEY = "mongo_connection"


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all database connections in the container.
        This is the ONLY place where database connections are registered.
        The connection is closed by the application on shutdown.
        """
        settings = container.get(Settings)

        # Register MongoDB connection as singleton
        container.register_singleton(MONGO_CONNECTION_KEY, MongoConnection(settings))
