"""
Team Model
==========

Domain model representing a team or department in the organization.
Teams are used to categorize kudos cards by functional area.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from kudos.utils.datetime_utils import now

TEAM_NAME_MAX_LENGTH = 100


def _validate_name(name: Optional[str]) -> None:
    if not name or not name.strip():
        raise ValueError("Team name cannot be empty")
    if len(name) > TEAM_NAME_MAX_LENGTH:
        raise ValueError(f"Team name cannot exceed {TEAM_NAME_MAX_LENGTH} characters")


@dataclass
class Team:
    """
    Team domain model.

    Build instances through Team.create so the name invariant is checked.
    The id is assigned by the store and stays None until the team is persisted.
    """
    name: str
    id: Optional[int] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    @classmethod
    def create(
        cls,
        name: str,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> "Team":
        """
        Create a validated team.

        Raises:
            ValueError: If the name is empty or longer than 100 characters
        """
        _validate_name(name)
        return cls(
            name=name,
            id=id,
            created_at=created_at or now(),
            updated_at=updated_at or now(),
        )

    def update_name(self, new_name: str) -> None:
        """Rename the team."""
        _validate_name(new_name)
        self.name = new_name
        self.updated_at = now()

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the team's fields."""
        return asdict(self)
