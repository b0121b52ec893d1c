"""
User Model
==========

Read-mostly view of a user account. Accounts are owned by the external auth
module; the admin module only queries, filters, updates and deletes them.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from kudos.domain.models.role import ApprovalStatus, Role
from kudos.utils.datetime_utils import now

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_email(email: str) -> str:
    """Normalize and check an email address."""
    normalized = (email or "").strip().lower()
    if not _EMAIL_PATTERN.match(normalized):
        raise ValueError(f"Invalid email address: {email}")
    return normalized


@dataclass
class User:
    id: str
    email: str
    first_name: str
    last_name: str
    role: Role = Role.MEMBER
    job_title: str = ""
    approval_status: ApprovalStatus = ApprovalStatus.PENDING
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


@dataclass
class UserSearchFilters:
    """Filter options for user search queries."""
    query: Optional[str] = None
    role: Optional[Role] = None
    approval_status: Optional[ApprovalStatus] = None
    limit: int = 10
    offset: int = 0
