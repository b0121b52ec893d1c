"""
Kudos Card Model
================

Recognition message sent to an employee. Owned by the kudos-card module;
comments, reactions and analytics only read it.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from kudos.utils.datetime_utils import now


@dataclass
class KudosCard:
    id: str
    recipient_name: str
    team_id: int
    category_id: int
    message: str
    created_by: str
    sent_by: str
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
