"""
Comment Model
=============

Domain model representing a comment attached to a kudos card.
Comments are soft-deleted: deleting one sets deleted_at and keeps the record.
"""
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from kudos.utils.datetime_utils import now

COMMENT_MAX_LENGTH = 500


def _validate_content(content: Optional[str]) -> None:
    if not content or not content.strip():
        raise ValueError("Comment content cannot be empty")
    if len(content) > COMMENT_MAX_LENGTH:
        raise ValueError(f"Comment content cannot exceed {COMMENT_MAX_LENGTH} characters")


@dataclass
class Comment:
    """Comment domain model. Build instances through Comment.create."""
    kudos_card_id: str
    user_id: str
    content: str
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())
    deleted_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        kudos_card_id: str,
        user_id: str,
        content: str,
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        deleted_at: Optional[datetime] = None,
    ) -> "Comment":
        """
        Create a validated comment.

        Raises:
            ValueError: If a reference is missing or the content is empty or too long
        """
        if not kudos_card_id:
            raise ValueError("Kudos Card ID is required")
        if not user_id:
            raise ValueError("User ID is required")
        _validate_content(content)

        return cls(
            kudos_card_id=kudos_card_id,
            user_id=user_id,
            content=content,
            id=id,
            created_at=created_at or now(),
            updated_at=updated_at or now(),
            deleted_at=deleted_at,
        )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def update(self, content: str) -> "Comment":
        """Replace the comment text."""
        _validate_content(content)
        self.content = content
        self.updated_at = now()
        return self

    def mark_as_deleted(self) -> "Comment":
        """Tombstone the comment."""
        timestamp = now()
        self.deleted_at = timestamp
        self.updated_at = timestamp
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
