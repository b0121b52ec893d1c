import pytest
from fastapi.testclient import TestClient

from kudos.application.dto.admin_dto import PendingUsersResponse, SearchUsersResponse
from kudos.application.dto.analytics_dto import TopRecipientResponse
from kudos.application.dto.comment_dto import GetCommentsResponse
from kudos.application.dto.reaction_dto import GetReactionsResponse
from kudos.application.dto.team_dto import TeamDeleteResponse, TeamResponse
from kudos.application.use_cases.admin.delete_user import DeleteUserUseCase
from kudos.application.use_cases.admin.get_pending_users import GetPendingUsersUseCase
from kudos.application.use_cases.admin.search_users import SearchUsersUseCase
from kudos.application.use_cases.admin.update_user import UpdateUserUseCase
from kudos.application.use_cases.analytics.get_top_recipients import GetTopRecipientsUseCase
from kudos.application.use_cases.comments.delete_comment import DeleteCommentUseCase
from kudos.application.use_cases.comments.get_comments import GetCommentsUseCase
from kudos.application.use_cases.reactions.add_reaction import AddReactionUseCase
from kudos.application.use_cases.reactions.get_reactions import GetReactionsUseCase
from kudos.application.use_cases.teams.create_team import CreateTeamUseCase
from kudos.application.use_cases.teams.delete_team import DeleteTeamUseCase
from kudos.application.use_cases.teams.get_team import GetTeamByIdUseCase
from kudos.di.base_container import BaseContainer
from kudos.domain.exceptions import (
    DuplicateReactionError,
    InvalidPeriodError,
    OperationFailedError,
    TeamInUseError,
    TeamNotFoundError,
    TeamValidationError,
    UnauthorizedCommentAccessError,
    UnauthorizedRoleError,
)
from kudos.domain.models.role import Role
from kudos.main import create_application

ADMIN_HEADERS = {"X-User-Id": "u-1", "X-User-Role": "1"}
MEMBER_HEADERS = {"X-User-Id": "u-3", "X-User-Role": "3"}

TEAM = TeamResponse(
    id=1,
    name="Platform",
    created_at="2025-03-02T09:11:50.840Z",
    updated_at="2025-03-02T09:11:50.840Z",
)


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["service"] == "Kudos API"


class TestActorHeaders:

    def test_missing_headers_is_401(self, client, use_cases):
        response = client.get("/api/v1/teams/1")

        assert response.status_code == 401
        use_cases[GetTeamByIdUseCase].execute.assert_not_awaited()

    def test_missing_role_is_401(self, client):
        response = client.get("/api/v1/teams/1", headers={"X-User-Id": "u-1"})
        assert response.status_code == 401

    def test_unknown_role_is_403(self, client, use_cases):
        response = client.get("/api/v1/teams/1", headers={"X-User-Id": "u-1", "X-User-Role": "7"})

        assert response.status_code == 403
        assert "Invalid role" in response.json()["detail"]
        use_cases[GetTeamByIdUseCase].execute.assert_not_awaited()


class TestTeamRoutes:

    def test_create_returns_201(self, client, use_cases):
        use_cases[CreateTeamUseCase].execute.return_value = TEAM

        response = client.post("/api/v1/teams", json={"name": "Platform"}, headers=ADMIN_HEADERS)

        assert response.status_code == 201
        assert response.json()["id"] == 1
        request, role = use_cases[CreateTeamUseCase].execute.await_args.args
        assert request.name == "Platform"
        assert role is Role.ADMIN

    def test_get_passes_int_id(self, client, use_cases):
        use_cases[GetTeamByIdUseCase].execute.return_value = TEAM

        response = client.get("/api/v1/teams/1", headers=MEMBER_HEADERS)

        assert response.status_code == 200
        use_cases[GetTeamByIdUseCase].execute.assert_awaited_once_with(1)

    def test_non_numeric_id_is_422(self, client):
        assert client.get("/api/v1/teams/abc", headers=MEMBER_HEADERS).status_code == 422

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (TeamNotFoundError(9), 404),
            (TeamValidationError("Team name cannot be empty"), 400),
            (TeamInUseError(9), 409),
            (OperationFailedError("Failed to delete team with ID 9"), 500),
        ],
    )
    def test_errors_map_to_status_codes(self, client, use_cases, error, status_code):
        use_cases[DeleteTeamUseCase].execute.side_effect = error

        response = client.delete("/api/v1/teams/9", headers=ADMIN_HEADERS)

        assert response.status_code == status_code
        assert response.json()["detail"] == error.message

    def test_delete_success(self, client, use_cases):
        use_cases[DeleteTeamUseCase].execute.return_value = TeamDeleteResponse(
            success=True, message="Team with ID 9 has been deleted successfully"
        )

        response = client.delete("/api/v1/teams/9", headers=ADMIN_HEADERS)

        assert response.json() == {"success": True, "message": "Team with ID 9 has been deleted successfully"}
        use_cases[DeleteTeamUseCase].execute.assert_awaited_once_with(9, Role.ADMIN)

    def test_member_write_is_403(self, client, use_cases):
        use_cases[CreateTeamUseCase].execute.side_effect = UnauthorizedRoleError([Role.ADMIN])

        response = client.post("/api/v1/teams", json={"name": "Platform"}, headers=MEMBER_HEADERS)

        assert response.status_code == 403
        assert response.json()["detail"] == "Only admin users can perform this action"
        assert use_cases[CreateTeamUseCase].execute.await_args.args[1] is Role.MEMBER

    @pytest.mark.parametrize("role", ["2", "3"])
    def test_non_admin_delete_never_reaches_store(self, team_repository, role):
        container = BaseContainer()
        container.register_singleton(DeleteTeamUseCase, DeleteTeamUseCase(team_repository))
        client = TestClient(create_application(container))

        response = client.delete("/api/v1/teams/9", headers={"X-User-Id": "u-2", "X-User-Role": role})

        assert response.status_code == 403
        team_repository.find_by_id.assert_not_awaited()
        team_repository.delete.assert_not_awaited()


class TestCommentRoutes:

    def test_listing_is_public(self, client, use_cases):
        use_cases[GetCommentsUseCase].execute.return_value = GetCommentsResponse(comments=[], total_comments=0)

        response = client.get("/api/v1/comments/kudos-cards/k-1")

        assert response.status_code == 200
        assert response.json() == {"comments": [], "total_comments": 0}
        use_cases[GetCommentsUseCase].execute.assert_awaited_once_with("k-1")

    def test_delete_by_non_author_is_403(self, client, use_cases):
        use_cases[DeleteCommentUseCase].execute.side_effect = UnauthorizedCommentAccessError("u-3", "c-1")

        response = client.delete("/api/v1/comments/c-1", headers=MEMBER_HEADERS)

        assert response.status_code == 403
        use_cases[DeleteCommentUseCase].execute.assert_awaited_once_with("c-1", "u-3")


class TestReactionRoutes:

    def test_listing_is_public(self, client, use_cases):
        use_cases[GetReactionsUseCase].execute.return_value = GetReactionsResponse(reactions=[], reaction_counts=[])

        assert client.get("/api/v1/reactions/kudos-cards/k-1").status_code == 200

    def test_duplicate_is_409(self, client, use_cases):
        use_cases[AddReactionUseCase].execute.side_effect = DuplicateReactionError("u-3", "like")

        response = client.post(
            "/api/v1/reactions",
            json={"kudos_card_id": "k-1", "type": "like"},
            headers=MEMBER_HEADERS,
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "User u-3 already reacted with like"


class TestAdminRoutes:

    def test_pending_users_forwards_pagination_and_role(self, client, use_cases):
        use_cases[GetPendingUsersUseCase].execute.return_value = PendingUsersResponse(users=[], total=0)

        response = client.get("/api/v1/admin/users/pending?limit=5&offset=10", headers=ADMIN_HEADERS)

        assert response.status_code == 200
        request, role = use_cases[GetPendingUsersUseCase].execute.await_args.args
        assert (request.limit, request.offset) == (5, 10)
        assert role is Role.ADMIN

    def test_member_is_403(self, client, use_cases):
        use_cases[SearchUsersUseCase].execute.side_effect = UnauthorizedRoleError([Role.ADMIN, Role.LEAD])

        response = client.get("/api/v1/admin/users?query=grace", headers=MEMBER_HEADERS)

        assert response.status_code == 403
        assert response.json()["detail"] == "Only admin, lead users can perform this action"

    def test_search_forwards_filters(self, client, use_cases):
        use_cases[SearchUsersUseCase].execute.return_value = SearchUsersResponse(users=[], total=0)

        client.get("/api/v1/admin/users?query=grace&role=2&approval_status=PENDING", headers=ADMIN_HEADERS)

        request = use_cases[SearchUsersUseCase].execute.await_args.args[0]
        assert (request.query, request.role, request.approval_status) == ("grace", 2, "PENDING")

    def test_update_merges_path_and_body(self, client, use_cases):
        use_cases[UpdateUserUseCase].execute.side_effect = OperationFailedError("boom")

        client.put("/api/v1/admin/users/u-2", json={"job_title": "CTO"}, headers=ADMIN_HEADERS)

        request, actor_id, actor_role = use_cases[UpdateUserUseCase].execute.await_args.args
        assert request.user_id == "u-2"
        assert request.job_title == "CTO"
        assert request.role is None
        assert (actor_id, actor_role) == ("u-1", Role.ADMIN)

    def test_delete_forwards_actor(self, client, use_cases):
        use_cases[DeleteUserUseCase].execute.side_effect = OperationFailedError("Failed to delete user")

        response = client.delete("/api/v1/admin/users/u-2", headers=ADMIN_HEADERS)

        assert response.status_code == 500
        request, actor_id, _ = use_cases[DeleteUserUseCase].execute.await_args.args
        assert (request.user_id, actor_id) == ("u-2", "u-1")


class TestAnalyticsRoutes:

    def test_forwards_query_params(self, client, use_cases):
        use_cases[GetTopRecipientsUseCase].execute.return_value = [
            TopRecipientResponse(recipient_name="Ada", count=5),
        ]

        response = client.get("/api/v1/analytics/top-recipients?limit=3&period=Weekly", headers=MEMBER_HEADERS)

        assert response.json() == [{"recipient_name": "Ada", "count": 5}]
        request = use_cases[GetTopRecipientsUseCase].execute.await_args.args[0]
        assert (request.limit, request.period) == (3, "Weekly")

    def test_invalid_period_is_400(self, client, use_cases):
        use_cases[GetTopRecipientsUseCase].execute.side_effect = InvalidPeriodError("hourly", ["daily"])

        response = client.get("/api/v1/analytics/top-recipients?period=hourly", headers=MEMBER_HEADERS)

        assert response.status_code == 400
