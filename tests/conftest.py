"""Shared fixtures: mocked repositories."""
from unittest.mock import AsyncMock

import pytest

from kudos.domain.repositories.analytics_repository import AnalyticsRepository
from kudos.domain.repositories.comment_repository import CommentRepository
from kudos.domain.repositories.kudos_card_repository import KudosCardRepository
from kudos.domain.repositories.reaction_repository import ReactionRepository
from kudos.domain.repositories.team_repository import TeamRepository
from kudos.domain.repositories.user_repository import AdminUserRepository, UserRepository


@pytest.fixture
def team_repository():
    return AsyncMock(spec=TeamRepository)


@pytest.fixture
def comment_repository():
    return AsyncMock(spec=CommentRepository)


@pytest.fixture
def reaction_repository():
    return AsyncMock(spec=ReactionRepository)


@pytest.fixture
def kudos_card_repository():
    return AsyncMock(spec=KudosCardRepository)


@pytest.fixture
def analytics_repository():
    return AsyncMock(spec=AnalyticsRepository)


@pytest.fixture
def admin_user_repository():
    return AsyncMock(spec=AdminUserRepository)


@pytest.fixture
def user_repository():
    return AsyncMock(spec=UserRepository)

