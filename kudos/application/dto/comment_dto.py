"""
Comment DTO
===========

Pydantic models for comment API requests and responses.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from kudos.domain.models.comment import Comment
from kudos.utils.datetime_utils import to_iso


class AddCommentRequest(BaseModel):
    """DTO for commenting on a kudos card. Content rules are enforced by the Comment entity."""
    kudos_card_id: str = Field(..., description="Kudos card being commented on")
    content: str = Field(..., description="Comment text (1-500 characters)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "kudos_card_id": "0b6f1c39-52a4-4e0e-9a55-3f6d1d2b8c11",
                "content": "Well deserved!",
            }
        }
    )


class UpdateCommentRequest(BaseModel):
    """DTO for editing a comment."""
    comment_id: str = Field(..., description="Comment to update")
    content: str = Field(..., description="New comment text (1-500 characters)")


class UpdateCommentBody(BaseModel):
    """Body of PUT /comments/{comment_id}."""
    content: str = Field(..., description="New comment text (1-500 characters)")


class CommentResponse(BaseModel):
    """DTO for comment data."""
    id: str
    kudos_card_id: str
    user_id: str
    content: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            kudos_card_id=comment.kudos_card_id,
            user_id=comment.user_id,
            content=comment.content,
            created_at=to_iso(comment.created_at),
            updated_at=to_iso(comment.updated_at),
        )


class AddCommentResponse(BaseModel):
    comment: CommentResponse
    total_comments: int


class GetCommentsResponse(BaseModel):
    comments: List[CommentResponse]
    total_comments: int


class UpdateCommentResponse(BaseModel):
    comment: CommentResponse


class DeleteCommentResponse(BaseModel):
    deleted: bool
