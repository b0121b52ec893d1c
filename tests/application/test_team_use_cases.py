from dataclasses import replace

import pytest

from kudos.application.dto.team_dto import TeamCreateRequest, TeamUpdateRequest
from kudos.application.use_cases.teams.create_team import CreateTeamUseCase
from kudos.application.use_cases.teams.delete_team import DeleteTeamUseCase
from kudos.application.use_cases.teams.get_team import GetAllTeamsUseCase, GetTeamByIdUseCase
from kudos.application.use_cases.teams.update_team import UpdateTeamUseCase
from kudos.domain.exceptions import (
    OperationFailedError,
    TeamInUseError,
    TeamNotFoundError,
    TeamValidationError,
    UnauthorizedRoleError,
)
from kudos.domain.models.role import Role
from tests.factories import make_team


@pytest.mark.asyncio
async def test_create_team_returns_store_assigned_id(team_repository):
    team_repository.create.side_effect = lambda team: replace(team, id=7)

    response = await CreateTeamUseCase(team_repository).execute(TeamCreateRequest(name="Platform"), Role.ADMIN)

    assert response.id == 7
    assert response.name == "Platform"
    team_repository.create.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_team_wraps_validation_errors(team_repository):
    with pytest.raises(TeamValidationError, match="Team name cannot be empty"):
        await CreateTeamUseCase(team_repository).execute(TeamCreateRequest(name="  "), Role.ADMIN)

    team_repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_team_by_id_not_found(team_repository):
    team_repository.find_by_id.return_value = None

    with pytest.raises(TeamNotFoundError, match="Team with ID 42 not found"):
        await GetTeamByIdUseCase(team_repository).execute(42)


@pytest.mark.asyncio
async def test_get_all_teams(team_repository):
    team_repository.find_all.return_value = [make_team(1, "Design"), make_team(2, "Platform")]

    response = await GetAllTeamsUseCase(team_repository).execute()

    assert [team.name for team in response] == ["Design", "Platform"]
    assert response[0].created_at == "2025-03-02T09:11:50.840Z"


@pytest.mark.asyncio
async def test_update_team_applies_name(team_repository):
    team_repository.find_by_id.return_value = make_team(3, "Old")
    team_repository.update.side_effect = lambda team: team

    response = await UpdateTeamUseCase(team_repository).execute(3, TeamUpdateRequest(name="New"), Role.ADMIN)

    assert response.name == "New"
    saved = team_repository.update.await_args.args[0]
    assert saved.updated_at > saved.created_at


@pytest.mark.asyncio
async def test_update_team_without_fields_keeps_name(team_repository):
    team_repository.find_by_id.return_value = make_team(3, "Old")
    team_repository.update.side_effect = lambda team: team

    response = await UpdateTeamUseCase(team_repository).execute(3, TeamUpdateRequest(), Role.ADMIN)

    assert response.name == "Old"


@pytest.mark.asyncio
async def test_update_team_rejects_long_name(team_repository):
    team_repository.find_by_id.return_value = make_team(3, "Old")

    with pytest.raises(TeamValidationError, match="cannot exceed 100 characters"):
        await UpdateTeamUseCase(team_repository).execute(3, TeamUpdateRequest(name="x" * 101), Role.ADMIN)

    team_repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_missing_team(team_repository):
    team_repository.find_by_id.return_value = None

    with pytest.raises(TeamNotFoundError):
        await UpdateTeamUseCase(team_repository).execute(3, TeamUpdateRequest(name="New"), Role.ADMIN)


@pytest.mark.asyncio
async def test_delete_team_success(team_repository):
    team_repository.find_by_id.return_value = make_team(5)
    team_repository.delete.return_value = True

    response = await DeleteTeamUseCase(team_repository).execute(5, Role.ADMIN)

    assert response.success is True
    assert response.message == "Team with ID 5 has been deleted successfully"


@pytest.mark.asyncio
async def test_delete_team_in_use_propagates(team_repository):
    team_repository.find_by_id.return_value = make_team(5)
    team_repository.delete.side_effect = TeamInUseError(5)

    with pytest.raises(TeamInUseError, match="kudos cards associated"):
        await DeleteTeamUseCase(team_repository).execute(5, Role.ADMIN)


@pytest.mark.asyncio
async def test_delete_team_store_failure(team_repository):
    team_repository.find_by_id.return_value = make_team(5)
    team_repository.delete.return_value = False

    with pytest.raises(OperationFailedError, match="Failed to delete team with ID 5"):
        await DeleteTeamUseCase(team_repository).execute(5, Role.ADMIN)


@pytest.mark.asyncio
async def test_delete_missing_team_skips_delete(team_repository):
    team_repository.find_by_id.return_value = None

    with pytest.raises(TeamNotFoundError):
        await DeleteTeamUseCase(team_repository).execute(5, Role.ADMIN)

    team_repository.delete.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("role", [Role.MEMBER, Role.LEAD])
async def test_create_team_requires_admin(team_repository, role):
    with pytest.raises(UnauthorizedRoleError, match="Only admin users can perform this action"):
        await CreateTeamUseCase(team_repository).execute(TeamCreateRequest(name="Platform"), role)

    team_repository.create.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("role", [Role.MEMBER, Role.LEAD])
async def test_update_team_requires_admin(team_repository, role):
    with pytest.raises(UnauthorizedRoleError):
        await UpdateTeamUseCase(team_repository).execute(3, TeamUpdateRequest(name="New"), role)

    team_repository.find_by_id.assert_not_awaited()
    team_repository.update.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("role", [Role.MEMBER, Role.LEAD])
async def test_delete_team_requires_admin(team_repository, role):
    with pytest.raises(UnauthorizedRoleError):
        await DeleteTeamUseCase(team_repository).execute(5, role)

    team_repository.find_by_id.assert_not_awaited()
    team_repository.delete.assert_not_awaited()
