"""
Role & Approval Status
======================

Closed enumerations for actor privilege levels and user approval state.
"""
from enum import Enum, IntEnum
from typing import Iterable, Union


class Role(IntEnum):
    """Actor privilege level. Values match the integers stored by the auth module."""
    ADMIN = 1
    LEAD = 2
    MEMBER = 3

    @classmethod
    def parse(cls, value: Union[int, str, "Role"]) -> "Role":
        """Convert a raw role value to a Role, rejecting anything outside the enumeration."""
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise ValueError(f"Invalid role: {value}") from None

    @staticmethod
    def describe(roles: Iterable["Role"]) -> str:
        """Human-readable list of role names, e.g. 'admin, lead'."""
        return ", ".join(role.name.lower() for role in roles)


class ApprovalStatus(str, Enum):
    """Approval state of a newly registered user awaiting admin review."""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    @classmethod
    def parse(cls, value: Union[str, "ApprovalStatus"]) -> "ApprovalStatus":
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(status.value for status in cls)
            raise ValueError(f"Invalid approval status. Must be one of: {valid}") from None
