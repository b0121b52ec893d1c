from datetime import timedelta

import pytest

from kudos.domain.models.analytics import Period
from kudos.domain.models.comment import Comment
from kudos.domain.models.reaction import Reaction, ReactionType
from kudos.domain.models.role import ApprovalStatus, Role
from kudos.domain.models.team import Team
from kudos.domain.models.user import validate_email
from kudos.utils.datetime_utils import now
from tests.factories import make_user


class TestTeam:

    def test_create_valid_team_defaults_timestamps_to_now(self):
        before = now()
        team = Team.create(name="Platform")
        after = now()

        assert team.name == "Platform"
        assert team.id is None
        assert before <= team.created_at <= after
        assert before <= team.updated_at <= after

    @pytest.mark.parametrize("name", ["", "   "])
    def test_create_rejects_blank_name(self, name):
        with pytest.raises(ValueError, match="Team name cannot be empty"):
            Team.create(name=name)

    def test_create_rejects_name_over_100_characters(self):
        with pytest.raises(ValueError, match="Team name cannot exceed 100 characters"):
            Team.create(name="a" * 101)

    def test_create_accepts_name_of_exactly_100_characters(self):
        assert Team.create(name="a" * 100).name == "a" * 100

    def test_update_name_bumps_updated_at(self):
        team = Team.create(name="Old", created_at=now() - timedelta(days=1), updated_at=now() - timedelta(days=1))
        previous = team.updated_at

        team.update_name("New")

        assert team.name == "New"
        assert team.updated_at > previous

    def test_update_name_validates(self):
        team = Team.create(name="Old")
        with pytest.raises(ValueError, match="cannot be empty"):
            team.update_name("")
        assert team.name == "Old"

    def test_to_dict_is_a_snapshot(self):
        team = Team.create(name="Platform", id=4)
        snapshot = team.to_dict()
        snapshot["name"] = "changed"

        assert team.name == "Platform"
        assert snapshot["id"] == 4


class TestComment:

    def test_create_requires_references(self):
        with pytest.raises(ValueError, match="Kudos Card ID is required"):
            Comment.create(kudos_card_id="", user_id="u-1", content="hi")
        with pytest.raises(ValueError, match="User ID is required"):
            Comment.create(kudos_card_id="k-1", user_id="", content="hi")

    def test_create_validates_content(self):
        with pytest.raises(ValueError, match="Comment content cannot be empty"):
            Comment.create(kudos_card_id="k-1", user_id="u-1", content="  ")
        with pytest.raises(ValueError, match="cannot exceed 500 characters"):
            Comment.create(kudos_card_id="k-1", user_id="u-1", content="x" * 501)

    def test_mark_as_deleted_sets_tombstone(self):
        comment = Comment.create(kudos_card_id="k-1", user_id="u-1", content="hi")
        assert not comment.is_deleted

        comment.mark_as_deleted()

        assert comment.is_deleted
        assert comment.updated_at == comment.deleted_at

    def test_update_replaces_content(self):
        comment = Comment.create(kudos_card_id="k-1", user_id="u-1", content="hi")
        comment.update("hello")
        assert comment.content == "hello"


class TestReaction:

    def test_create_parses_type(self):
        reaction = Reaction.create(kudos_card_id="k-1", user_id="u-1", type="celebrate")
        assert reaction.type is ReactionType.CELEBRATE

    def test_create_rejects_unknown_type(self):
        with pytest.raises(ValueError, match="Invalid reaction type: wow"):
            Reaction.create(kudos_card_id="k-1", user_id="u-1", type="wow")


class TestRoleAndStatus:

    def test_role_parse_accepts_ints_and_strings(self):
        assert Role.parse(1) is Role.ADMIN
        assert Role.parse("2") is Role.LEAD

    @pytest.mark.parametrize("value", [0, 4, "admin", None])
    def test_role_parse_rejects_unknown_values(self, value):
        with pytest.raises(ValueError, match="Invalid role"):
            Role.parse(value)

    def test_approval_status_parse(self):
        assert ApprovalStatus.parse("APPROVED") is ApprovalStatus.APPROVED
        with pytest.raises(ValueError, match="Must be one of: PENDING, APPROVED, REJECTED"):
            ApprovalStatus.parse("approved")

    def test_period_is_case_insensitive(self):
        assert Period.is_valid("Weekly")
        assert Period.is_valid("YEARLY")
        assert not Period.is_valid("hourly")


class TestUser:

    def test_full_name(self):
        assert make_user().full_name == "Grace Hopper"

    def test_validate_email_normalizes(self):
        assert validate_email("  Grace@Example.COM ") == "grace@example.com"

    def test_validate_email_rejects_malformed(self):
        with pytest.raises(ValueError, match="Invalid email address"):
            validate_email("not-an-email")
