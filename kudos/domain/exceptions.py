"""
Domain Exceptions
=================

Typed errors raised by use cases. Every error carries an ErrorKind so the
HTTP layer can translate it to a status code with a single lookup.
"""
from enum import Enum
from typing import Iterable

from kudos.domain.models.role import Role


class ErrorKind(str, Enum):
    UNAUTHORIZED_ROLE = "unauthorized_role"
    UNAUTHORIZED_ACCESS = "unauthorized_access"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    DUPLICATE = "duplicate"
    CONFLICT = "conflict"
    UNEXPECTED = "unexpected"


class KudosError(Exception):
    """Base class for all application errors."""
    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OperationFailedError(KudosError):
    """A repository reported that a write did not take effect."""
    kind = ErrorKind.UNEXPECTED


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------

class AdminError(KudosError):
    pass


class UnauthorizedRoleError(AdminError):
    kind = ErrorKind.UNAUTHORIZED_ROLE

    def __init__(self, allowed_roles: Iterable[Role]):
        self.allowed_roles = tuple(allowed_roles)
        super().__init__(f"Only {Role.describe(self.allowed_roles)} users can perform this action")


class UnauthorizedActionError(AdminError):
    kind = ErrorKind.UNAUTHORIZED_ACCESS


class AdminValidationError(AdminError):
    kind = ErrorKind.VALIDATION


class UserNotFoundError(AdminError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, user_id: str):
        super().__init__(f"User with identifier {user_id} not found")


# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------

class AnalyticsError(KudosError):
    pass


class AnalyticsValidationError(AnalyticsError):
    kind = ErrorKind.VALIDATION

    def __init__(self, message: str):
        super().__init__(f"Validation error: {message}")


class InvalidPeriodError(AnalyticsValidationError):
    def __init__(self, period: str, valid_periods: Iterable[str]):
        self.period = period
        KudosError.__init__(
            self,
            f"Invalid period: {period}. Valid periods are: {', '.join(valid_periods)}",
        )


# ---------------------------------------------------------------------------
# Kudos cards (shared by comments and reactions)
# ---------------------------------------------------------------------------

class KudosCardNotFoundError(KudosError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, kudos_card_id: str):
        super().__init__(f"Kudos card with ID {kudos_card_id} not found")


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

class CommentNotFoundError(KudosError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, comment_id: str):
        super().__init__(f"Comment with ID {comment_id} not found")


class UnauthorizedCommentAccessError(KudosError):
    kind = ErrorKind.UNAUTHORIZED_ACCESS

    def __init__(self, user_id: str, comment_id: str):
        super().__init__(f"User {user_id} is not authorized to access comment {comment_id}")


class CommentValidationError(KudosError):
    kind = ErrorKind.VALIDATION


# ---------------------------------------------------------------------------
# Reactions
# ---------------------------------------------------------------------------

class ReactionNotFoundError(KudosError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, reaction_id: str):
        super().__init__(f"Reaction with ID {reaction_id} not found")


class DuplicateReactionError(KudosError):
    kind = ErrorKind.DUPLICATE

    def __init__(self, user_id: str, reaction_type: str):
        super().__init__(f"User {user_id} already reacted with {reaction_type}")


class UnauthorizedReactionError(KudosError):
    kind = ErrorKind.UNAUTHORIZED_ACCESS

    def __init__(self, user_id: str, reaction_id: str):
        super().__init__(f"User {user_id} is not authorized to modify reaction {reaction_id}")


class ReactionValidationError(KudosError):
    kind = ErrorKind.VALIDATION


# ---------------------------------------------------------------------------
# Teams
# ---------------------------------------------------------------------------

class TeamError(KudosError):
    pass


class TeamNotFoundError(TeamError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, team_id: int):
        super().__init__(f"Team with ID {team_id} not found")


class TeamValidationError(TeamError):
    kind = ErrorKind.VALIDATION


class TeamInUseError(TeamError):
    kind = ErrorKind.CONFLICT

    def __init__(self, team_id: int):
        super().__init__(
            f"Cannot delete team with ID {team_id} because there are kudos cards associated with it"
        )
