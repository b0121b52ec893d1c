"""Application wired to mocked use cases."""
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from kudos.application.use_cases.admin.delete_user import DeleteUserUseCase
from kudos.application.use_cases.admin.get_pending_users import GetPendingUsersUseCase
from kudos.application.use_cases.admin.search_users import SearchUsersUseCase
from kudos.application.use_cases.admin.update_user import UpdateUserUseCase
from kudos.application.use_cases.analytics.get_top_recipients import GetTopRecipientsUseCase
from kudos.application.use_cases.analytics.get_top_teams import GetTopTeamsUseCase
from kudos.application.use_cases.analytics.get_trending_categories import GetTrendingCategoriesUseCase
from kudos.application.use_cases.analytics.get_trending_keywords import GetTrendingKeywordsUseCase
from kudos.application.use_cases.comments.add_comment import AddCommentUseCase
from kudos.application.use_cases.comments.delete_comment import DeleteCommentUseCase
from kudos.application.use_cases.comments.get_comments import GetCommentsUseCase
from kudos.application.use_cases.comments.update_comment import UpdateCommentUseCase
from kudos.application.use_cases.reactions.add_reaction import AddReactionUseCase
from kudos.application.use_cases.reactions.get_reactions import GetReactionsUseCase
from kudos.application.use_cases.reactions.remove_reaction import RemoveReactionUseCase
from kudos.application.use_cases.teams.create_team import CreateTeamUseCase
from kudos.application.use_cases.teams.delete_team import DeleteTeamUseCase
from kudos.application.use_cases.teams.get_team import GetAllTeamsUseCase, GetTeamByIdUseCase
from kudos.application.use_cases.teams.update_team import UpdateTeamUseCase
from kudos.di.base_container import BaseContainer
from kudos.main import create_application

USE_CASES = (
    CreateTeamUseCase,
    GetTeamByIdUseCase,
    GetAllTeamsUseCase,
    UpdateTeamUseCase,
    DeleteTeamUseCase,
    AddCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
    DeleteCommentUseCase,
    AddReactionUseCase,
    GetReactionsUseCase,
    RemoveReactionUseCase,
    GetPendingUsersUseCase,
    SearchUsersUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    GetTopRecipientsUseCase,
    GetTopTeamsUseCase,
    GetTrendingCategoriesUseCase,
    GetTrendingKeywordsUseCase,
)


@pytest.fixture
def use_cases():
    return {use_case_class: AsyncMock(spec=use_case_class) for use_case_class in USE_CASES}


@pytest.fixture
def client(use_cases):
    container = BaseContainer()
    for use_case_class, mock in use_cases.items():
        container.register_singleton(use_case_class, mock)
    return TestClient(create_application(container))
