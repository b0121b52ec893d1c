"""
Comment Controller
==================

FastAPI controller for kudos card comments.
"""
from fastapi import APIRouter, Depends, status

from kudos.api.v1.dependencies import (
    Actor,
    get_add_comment_use_case,
    get_comments_use_case,
    get_current_actor,
    get_delete_comment_use_case,
    get_update_comment_use_case,
)
from kudos.api.v1.errors import to_http_exception
from kudos.application.dto.comment_dto import (
    AddCommentRequest,
    AddCommentResponse,
    DeleteCommentResponse,
    GetCommentsResponse,
    UpdateCommentBody,
    UpdateCommentRequest,
    UpdateCommentResponse,
)
from kudos.application.use_cases.comments.add_comment import AddCommentUseCase
from kudos.application.use_cases.comments.delete_comment import DeleteCommentUseCase
from kudos.application.use_cases.comments.get_comments import GetCommentsUseCase
from kudos.application.use_cases.comments.update_comment import UpdateCommentUseCase
from kudos.domain.exceptions import KudosError

router = APIRouter(tags=["comments"])


@router.get(
    "/kudos-cards/{kudos_card_id}",
    response_model=GetCommentsResponse,
    summary="List comments of a kudos card",
    description="Get the non-deleted comments of a kudos card, oldest first. No authentication required.",
)
async def get_comments(
    kudos_card_id: str,
    use_case: GetCommentsUseCase = Depends(get_comments_use_case),
) -> GetCommentsResponse:
    try:
        return await use_case.execute(kudos_card_id)
    except KudosError as e:
        raise to_http_exception(e)


@router.post(
    "",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a kudos card",
    description="Add a comment (1-500 characters) to an existing kudos card.",
)
async def add_comment(
    request: AddCommentRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: AddCommentUseCase = Depends(get_add_comment_use_case),
) -> AddCommentResponse:
    """Add a comment as the requesting user."""
    try:
        return await use_case.execute(request, actor.user_id)
    except KudosError as e:
        raise to_http_exception(e)


@router.put(
    "/{comment_id}",
    response_model=UpdateCommentResponse,
    summary="Edit a comment",
    description="Replace the content of a comment. Only its author may edit it.",
)
async def update_comment(
    comment_id: str,
    body: UpdateCommentBody,
    actor: Actor = Depends(get_current_actor),
    use_case: UpdateCommentUseCase = Depends(get_update_comment_use_case),
) -> UpdateCommentResponse:
    try:
        return await use_case.execute(
            UpdateCommentRequest(comment_id=comment_id, content=body.content),
            actor.user_id,
        )
    except KudosError as e:
        raise to_http_exception(e)


@router.delete(
    "/{comment_id}",
    response_model=DeleteCommentResponse,
    summary="Delete a comment",
    description="Soft-delete a comment. Only its author may delete it.",
)
async def delete_comment(
    comment_id: str,
    actor: Actor = Depends(get_current_actor),
    use_case: DeleteCommentUseCase = Depends(get_delete_comment_use_case),
) -> DeleteCommentResponse:
    try:
        return await use_case.execute(comment_id, actor.user_id)
    except KudosError as e:
        raise to_http_exception(e)
