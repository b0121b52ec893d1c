"""
Admin Use Case Helpers
======================

Role gate and pagination checks shared by the admin and team use cases.
"""
from typing import Iterable, Optional, Tuple, Union

from kudos.domain.exceptions import AdminValidationError, UnauthorizedRoleError
from kudos.domain.models.role import Role

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0

# Roles allowed to list and search users
REVIEWER_ROLES = (Role.ADMIN, Role.LEAD)


def require_role(actor_role: Union[Role, int], allowed_roles: Iterable[Role] = REVIEWER_ROLES) -> None:
    """
    Reject actors whose role is not in the allow-list.

    Raises:
        UnauthorizedRoleError: Naming the allowed roles
    """
    allowed = tuple(allowed_roles)
    if actor_role not in allowed:
        raise UnauthorizedRoleError(allowed)


def resolve_pagination(limit: Optional[int], offset: Optional[int]) -> Tuple[int, int]:
    """
    Apply pagination defaults and reject out-of-range values.

    Raises:
        AdminValidationError: If limit <= 0 or offset < 0
    """
    limit = DEFAULT_LIMIT if limit is None else limit
    offset = DEFAULT_OFFSET if offset is None else offset

    if limit <= 0:
        raise AdminValidationError("Limit must be greater than 0")
    if offset < 0:
        raise AdminValidationError("Offset cannot be negative")
    return limit, offset
