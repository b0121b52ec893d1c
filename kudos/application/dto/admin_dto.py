"""
Admin DTO
=========

Pydantic models for the admin user-management endpoints.
Role and approval status arrive as raw values; the use cases validate them.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from kudos.domain.models.user import User
from kudos.utils.datetime_utils import to_iso


class GetPendingUsersRequest(BaseModel):
    limit: Optional[int] = Field(None, description="Page size (defaults to 10)")
    offset: Optional[int] = Field(None, description="Rows to skip (defaults to 0)")


class SearchUsersRequest(BaseModel):
    query: Optional[str] = Field(None, description="Matches email, first or last name (case-insensitive)")
    role: Optional[int] = Field(None, description="1 = admin, 2 = lead, 3 = member")
    approval_status: Optional[str] = Field(None, description="PENDING, APPROVED or REJECTED")
    limit: Optional[int] = Field(None, description="Page size (defaults to 10)")
    offset: Optional[int] = Field(None, description="Rows to skip (defaults to 0)")


class UserUpdateBody(BaseModel):
    """Body of PUT /admin/users/{user_id}. Only provided fields are applied."""
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    job_title: Optional[str] = None
    role: Optional[int] = None
    approval_status: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "approval_status": "APPROVED",
            }
        }
    )


class UpdateUserRequest(UserUpdateBody):
    user_id: str


class DeleteUserRequest(BaseModel):
    user_id: str


class UserResponse(BaseModel):
    """DTO for user data in admin listings."""
    id: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    role: int
    job_title: str
    approval_status: str
    created_at: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            role=int(user.role),
            job_title=user.job_title,
            approval_status=user.approval_status.value,
            created_at=to_iso(user.created_at),
        )


class PendingUsersResponse(BaseModel):
    users: List[UserResponse]
    total: int


class SearchUsersResponse(BaseModel):
    users: List[UserResponse]
    total: int


class UpdateUserResponse(BaseModel):
    id: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    role: int
    job_title: str
    approval_status: str
    updated_at: str

    @classmethod
    def from_entity(cls, user: User) -> "UpdateUserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            role=int(user.role),
            job_title=user.job_title,
            approval_status=user.approval_status.value,
            updated_at=to_iso(user.updated_at),
        )


class DeleteUserResponse(BaseModel):
    success: bool
    message: str
