"""
Dependency Container
====================

FastAPI dependencies resolving use cases from the application's DI container
and the requesting actor from the auth gateway headers.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status

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
from kudos.domain.models.role import Role


@dataclass(frozen=True)
class Actor:
    """Authenticated user making the request."""
    user_id: str
    role: Role


def get_container(request: Request) -> BaseContainer:
    """
    Get the DI container owned by the running application.

    Returns:
        Container stored on app.state by create_application
    """
    return request.app.state.container


def get_current_actor(
    x_user_id: Optional[str] = Header(None),
    x_user_role: Optional[str] = Header(None),
) -> Actor:
    """
    Resolve the actor from the headers set by the auth gateway.

    Raises:
        HTTPException: 401 if a header is missing, 403 if the role is unknown
    """
    if not x_user_id or not x_user_role:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        role = Role.parse(x_user_role)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))

    return Actor(user_id=x_user_id, role=role)


# ---------------------------------------------------------------------------
# Teams
# ---------------------------------------------------------------------------

def get_create_team_use_case(container: BaseContainer = Depends(get_container)) -> CreateTeamUseCase:
    return container.get(CreateTeamUseCase)


def get_team_by_id_use_case(container: BaseContainer = Depends(get_container)) -> GetTeamByIdUseCase:
    return container.get(GetTeamByIdUseCase)


def get_all_teams_use_case(container: BaseContainer = Depends(get_container)) -> GetAllTeamsUseCase:
    return container.get(GetAllTeamsUseCase)


def get_update_team_use_case(container: BaseContainer = Depends(get_container)) -> UpdateTeamUseCase:
    return container.get(UpdateTeamUseCase)


def get_delete_team_use_case(container: BaseContainer = Depends(get_container)) -> DeleteTeamUseCase:
    return container.get(DeleteTeamUseCase)


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

def get_add_comment_use_case(container: BaseContainer = Depends(get_container)) -> AddCommentUseCase:
    return container.get(AddCommentUseCase)


def get_comments_use_case(container: BaseContainer = Depends(get_container)) -> GetCommentsUseCase:
    return container.get(GetCommentsUseCase)


def get_update_comment_use_case(container: BaseContainer = Depends(get_container)) -> UpdateCommentUseCase:
    return container.get(UpdateCommentUseCase)


def get_delete_comment_use_case(container: BaseContainer = Depends(get_container)) -> DeleteCommentUseCase:
    return container.get(DeleteCommentUseCase)


# ---------------------------------------------------------------------------
# Reactions
# ---------------------------------------------------------------------------

def get_add_reaction_use_case(container: BaseContainer = Depends(get_container)) -> AddReactionUseCase:
    return container.get(AddReactionUseCase)


def get_reactions_use_case(container: BaseContainer = Depends(get_container)) -> GetReactionsUseCase:
    return container.get(GetReactionsUseCase)


def get_remove_reaction_use_case(container: BaseContainer = Depends(get_container)) -> RemoveReactionUseCase:
    return container.get(RemoveReactionUseCase)


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------

def get_pending_users_use_case(container: BaseContainer = Depends(get_container)) -> GetPendingUsersUseCase:
    return container.get(GetPendingUsersUseCase)


def get_search_users_use_case(container: BaseContainer = Depends(get_container)) -> SearchUsersUseCase:
    return container.get(SearchUsersUseCase)


def get_update_user_use_case(container: BaseContainer = Depends(get_container)) -> UpdateUserUseCase:
    return container.get(UpdateUserUseCase)


def get_delete_user_use_case(container: BaseContainer = Depends(get_container)) -> DeleteUserUseCase:
    return container.get(DeleteUserUseCase)


# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------

def get_top_recipients_use_case(container: BaseContainer = Depends(get_container)) -> GetTopRecipientsUseCase:
    return container.get(GetTopRecipientsUseCase)


def get_top_teams_use_case(container: BaseContainer = Depends(get_container)) -> GetTopTeamsUseCase:
    return container.get(GetTopTeamsUseCase)


def get_trending_categories_use_case(
    container: BaseContainer = Depends(get_container),
) -> GetTrendingCategoriesUseCase:
    return container.get(GetTrendingCategoriesUseCase)


def get_trending_keywords_use_case(
    container: BaseContainer = Depends(get_container),
) -> GetTrendingKeywordsUseCase:
    return container.get(GetTrendingKeywordsUseCase)
