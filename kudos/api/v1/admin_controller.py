"""
Admin Controller
================

FastAPI controller for user review and account management.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from kudos.api.v1.dependencies import (
    Actor,
    get_current_actor,
    get_delete_user_use_case,
    get_pending_users_use_case,
    get_search_users_use_case,
    get_update_user_use_case,
)
from kudos.api.v1.errors import to_http_exception
from kudos.application.dto.admin_dto import (
    DeleteUserRequest,
    DeleteUserResponse,
    GetPendingUsersRequest,
    PendingUsersResponse,
    SearchUsersRequest,
    SearchUsersResponse,
    UpdateUserRequest,
    UpdateUserResponse,
    UserUpdateBody,
)
from kudos.application.use_cases.admin.delete_user import DeleteUserUseCase
from kudos.application.use_cases.admin.get_pending_users import GetPendingUsersUseCase
from kudos.application.use_cases.admin.search_users import SearchUsersUseCase
from kudos.application.use_cases.admin.update_user import UpdateUserUseCase
from kudos.domain.exceptions import KudosError

router = APIRouter(tags=["admin"])


@router.get(
    "/users/pending",
    response_model=PendingUsersResponse,
    summary="List pending users",
    description="Users awaiting approval, newest first. Admins and leads only.",
)
async def get_pending_users(
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    actor: Actor = Depends(get_current_actor),
    use_case: GetPendingUsersUseCase = Depends(get_pending_users_use_case),
) -> PendingUsersResponse:
    try:
        return await use_case.execute(GetPendingUsersRequest(limit=limit, offset=offset), actor.role)
    except KudosError as e:
        raise to_http_exception(e)


@router.get(
    "/users",
    response_model=SearchUsersResponse,
    summary="Search users",
    description="""
    Search users by name or email, optionally filtered by role and approval status.
    Admins and leads only.
    """,
)
async def search_users(
    query: Optional[str] = None,
    role: Optional[int] = None,
    approval_status: Optional[str] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    actor: Actor = Depends(get_current_actor),
    use_case: SearchUsersUseCase = Depends(get_search_users_use_case),
) -> SearchUsersResponse:
    request = SearchUsersRequest(
        query=query,
        role=role,
        approval_status=approval_status,
        limit=limit,
        offset=offset,
    )
    try:
        return await use_case.execute(request, actor.role)
    except KudosError as e:
        raise to_http_exception(e)


@router.put(
    "/users/{user_id}",
    response_model=UpdateUserResponse,
    summary="Update a user",
    description="""
    Update a user account.

    Non-admins may only update themselves and cannot change roles.
    Approval status may be changed by admins and leads, never on their own account.
    """,
)
async def update_user(
    user_id: str,
    body: UserUpdateBody,
    actor: Actor = Depends(get_current_actor),
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> UpdateUserResponse:
    request = UpdateUserRequest(user_id=user_id, **body.model_dump())
    try:
        return await use_case.execute(request, actor.user_id, actor.role)
    except KudosError as e:
        raise to_http_exception(e)


@router.delete(
    "/users/{user_id}",
    response_model=DeleteUserResponse,
    summary="Delete a user",
    description="Delete a non-admin user account. Admins only; an admin cannot delete their own account.",
)
async def delete_user(
    user_id: str,
    actor: Actor = Depends(get_current_actor),
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> DeleteUserResponse:
    try:
        return await use_case.execute(DeleteUserRequest(user_id=user_id), actor.user_id, actor.role)
    except KudosError as e:
        raise to_http_exception(e)
