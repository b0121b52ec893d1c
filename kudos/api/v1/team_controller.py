"""
Team Controller
===============

FastAPI controller for team management endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from kudos.api.v1.dependencies import (
    Actor,
    get_all_teams_use_case,
    get_create_team_use_case,
    get_current_actor,
    get_delete_team_use_case,
    get_team_by_id_use_case,
    get_update_team_use_case,
)
from kudos.api.v1.errors import to_http_exception
from kudos.application.dto.team_dto import (
    TeamCreateRequest,
    TeamDeleteResponse,
    TeamResponse,
    TeamUpdateRequest,
)
from kudos.application.use_cases.teams.create_team import CreateTeamUseCase
from kudos.application.use_cases.teams.delete_team import DeleteTeamUseCase
from kudos.application.use_cases.teams.get_team import GetAllTeamsUseCase, GetTeamByIdUseCase
from kudos.application.use_cases.teams.update_team import UpdateTeamUseCase
from kudos.domain.exceptions import KudosError

router = APIRouter(tags=["teams"])


@router.get(
    "",
    response_model=List[TeamResponse],
    summary="List teams",
    description="Get all teams ordered by name.",
)
async def list_teams(
    actor: Actor = Depends(get_current_actor),
    use_case: GetAllTeamsUseCase = Depends(get_all_teams_use_case),
) -> List[TeamResponse]:
    """List all teams."""
    return await use_case.execute()


@router.get(
    "/{team_id}",
    response_model=TeamResponse,
    summary="Get team by ID",
    description="Get details of a specific team.",
)
async def get_team(
    team_id: int,
    actor: Actor = Depends(get_current_actor),
    use_case: GetTeamByIdUseCase = Depends(get_team_by_id_use_case),
) -> TeamResponse:
    """Get a specific team by ID."""
    try:
        return await use_case.execute(team_id)
    except KudosError as e:
        raise to_http_exception(e)


@router.post(
    "",
    response_model=TeamResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a team",
    description="""
    Create a new team. Admins only.

    The name must be non-blank and at most 100 characters.
    The team id is assigned by the store.
    """,
)
async def create_team(
    request: TeamCreateRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: CreateTeamUseCase = Depends(get_create_team_use_case),
) -> TeamResponse:
    """Create a team."""
    try:
        return await use_case.execute(request, actor.role)
    except KudosError as e:
        raise to_http_exception(e)


@router.put(
    "/{team_id}",
    response_model=TeamResponse,
    summary="Update a team",
    description="Update the provided fields of a team. Admins only.",
)
async def update_team(
    team_id: int,
    request: TeamUpdateRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: UpdateTeamUseCase = Depends(get_update_team_use_case),
) -> TeamResponse:
    """Update a team."""
    try:
        return await use_case.execute(team_id, request, actor.role)
    except KudosError as e:
        raise to_http_exception(e)


@router.delete(
    "/{team_id}",
    response_model=TeamDeleteResponse,
    summary="Delete a team",
    description="""
    Delete a team. Admins only.

    Fails with 409 while any kudos card still references the team.
    """,
)
async def delete_team(
    team_id: int,
    actor: Actor = Depends(get_current_actor),
    use_case: DeleteTeamUseCase = Depends(get_delete_team_use_case),
) -> TeamDeleteResponse:
    """Delete a team."""
    try:
        return await use_case.execute(team_id, actor.role)
    except KudosError as e:
        raise to_http_exception(e)
