from typing import TYPE_CHECKING

from kudos.application.use_cases.teams.create_team import CreateTeamUseCase
from kudos.application.use_cases.teams.delete_team import DeleteTeamUseCase
from kudos.application.use_cases.teams.get_team import GetAllTeamsUseCase, GetTeamByIdUseCase
from kudos.application.use_cases.teams.update_team import UpdateTeamUseCase
from kudos.domain.repositories.team_repository import TeamRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class TeamProvider:
    """Team use case provider - registers team-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register team use cases.
        Use cases are created with the repository from the container.
        """
        team_repository = container.get(TeamRepository)

        container.register_singleton(CreateTeamUseCase, CreateTeamUseCase(team_repository))
        container.register_singleton(GetTeamByIdUseCase, GetTeamByIdUseCase(team_repository))
        container.register_singleton(GetAllTeamsUseCase, GetAllTeamsUseCase(team_repository))
        container.register_singleton(UpdateTeamUseCase, UpdateTeamUseCase(team_repository))
        container.register_singleton(DeleteTeamUseCase, DeleteTeamUseCase(team_repository))
