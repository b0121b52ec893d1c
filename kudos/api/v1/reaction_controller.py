"""
Reaction Controller
===================

FastAPI controller for kudos card reactions.
"""
from fastapi import APIRouter, Depends, status

from kudos.api.v1.dependencies import (
    Actor,
    get_add_reaction_use_case,
    get_current_actor,
    get_reactions_use_case,
    get_remove_reaction_use_case,
)
from kudos.api.v1.errors import to_http_exception
from kudos.application.dto.reaction_dto import (
    AddReactionRequest,
    AddReactionResponse,
    GetReactionsResponse,
    RemoveReactionResponse,
)
from kudos.application.use_cases.reactions.add_reaction import AddReactionUseCase
from kudos.application.use_cases.reactions.get_reactions import GetReactionsUseCase
from kudos.application.use_cases.reactions.remove_reaction import RemoveReactionUseCase
from kudos.domain.exceptions import KudosError

router = APIRouter(tags=["reactions"])


@router.get(
    "/kudos-cards/{kudos_card_id}",
    response_model=GetReactionsResponse,
    summary="List reactions of a kudos card",
    description="Get all reactions of a kudos card with per-type counts. No authentication required.",
)
async def get_reactions(
    kudos_card_id: str,
    use_case: GetReactionsUseCase = Depends(get_reactions_use_case),
) -> GetReactionsResponse:
    try:
        return await use_case.execute(kudos_card_id)
    except KudosError as e:
        raise to_http_exception(e)


@router.post(
    "",
    response_model=AddReactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="React to a kudos card",
    description="""
    Add a reaction (like, love, celebrate, insightful, curious) to a kudos card.

    A user may add each reaction type once per card; a repeat returns 409.
    """,
)
async def add_reaction(
    request: AddReactionRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: AddReactionUseCase = Depends(get_add_reaction_use_case),
) -> AddReactionResponse:
    try:
        return await use_case.execute(request, actor.user_id)
    except KudosError as e:
        raise to_http_exception(e)


@router.delete(
    "/{reaction_id}",
    response_model=RemoveReactionResponse,
    summary="Remove a reaction",
    description="Permanently delete a reaction. Only the user who added it may remove it.",
)
async def remove_reaction(
    reaction_id: str,
    actor: Actor = Depends(get_current_actor),
    use_case: RemoveReactionUseCase = Depends(get_remove_reaction_use_case),
) -> RemoveReactionResponse:
    try:
        return await use_case.execute(reaction_id, actor.user_id)
    except KudosError as e:
        raise to_http_exception(e)
