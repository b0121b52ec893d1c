# Standard library imports
from typing import Optional

# Local application imports
from kudos.core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    AdminProvider,
    AnalyticsProvider,
    CommentProvider,
    DatabaseProvider,
    ReactionProvider,
    RepositoryProvider,
    TeamProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    The container is owned by the application (see create_application);
    there is no module-level instance.

    Registration order is important:
    1. Settings
    2. Database connections (DatabaseProvider)
    3. Repositories (RepositoryProvider) - depends on database
    4. Use cases (Team/Comment/Reaction/Admin/Analytics providers) - depend on repositories
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: settings → database → repositories → use cases
        """
        self.register_singleton(Settings, self.settings)

        # Step 1: Register database connections (foundation)
        DatabaseProvider.register(self)

        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self)

        # Step 3: Register use cases (depends on repositories)
        TeamProvider.register(self)
        CommentProvider.register(self)
        ReactionProvider.register(self)
        AdminProvider.register(self)
        AnalyticsProvider.register(self)
