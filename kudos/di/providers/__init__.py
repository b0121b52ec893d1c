"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .team_provider import TeamProvider
from .comment_provider import CommentProvider
from .reaction_provider import ReactionProvider
from .admin_provider import AdminProvider
from .analytics_provider import AnalyticsProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "TeamProvider",
    "CommentProvider",
    "ReactionProvider",
    "AdminProvider",
    "AnalyticsProvider",
]
