from dataclasses import replace

import pytest

from kudos.application.dto.reaction_dto import AddReactionRequest
from kudos.application.use_cases.reactions.add_reaction import AddReactionUseCase
from kudos.application.use_cases.reactions.get_reactions import GetReactionsUseCase
from kudos.application.use_cases.reactions.remove_reaction import RemoveReactionUseCase
from kudos.domain.exceptions import (
    DuplicateReactionError,
    KudosCardNotFoundError,
    OperationFailedError,
    ReactionNotFoundError,
    ReactionValidationError,
    UnauthorizedReactionError,
)
from kudos.domain.models.reaction import ReactionCount, ReactionType
from tests.factories import make_kudos_card, make_reaction


@pytest.mark.asyncio
async def test_add_reaction(reaction_repository, kudos_card_repository):
    kudos_card_repository.find_by_id.return_value = make_kudos_card("k-1")
    reaction_repository.find_by_user_and_type.return_value = None
    reaction_repository.add.side_effect = lambda reaction: replace(reaction, id="r-5")
    reaction_repository.count_by_type.return_value = [
        ReactionCount(type=ReactionType.CELEBRATE, count=2),
        ReactionCount(type=ReactionType.LIKE, count=1),
    ]
    use_case = AddReactionUseCase(reaction_repository, kudos_card_repository)

    response = await use_case.execute(AddReactionRequest(kudos_card_id="k-1", type="celebrate"), "u-1")

    assert response.reaction.id == "r-5"
    assert response.reaction.type == "celebrate"
    assert [(row.type, row.count) for row in response.reaction_counts] == [("celebrate", 2), ("like", 1)]
    reaction_repository.find_by_user_and_type.assert_awaited_once_with("k-1", "u-1", ReactionType.CELEBRATE)


@pytest.mark.asyncio
async def test_add_duplicate_reaction_is_not_stored(reaction_repository, kudos_card_repository):
    kudos_card_repository.find_by_id.return_value = make_kudos_card("k-1")
    reaction_repository.find_by_user_and_type.return_value = make_reaction(type=ReactionType.LIKE)
    use_case = AddReactionUseCase(reaction_repository, kudos_card_repository)

    with pytest.raises(DuplicateReactionError, match="User u-1 already reacted with like"):
        await use_case.execute(AddReactionRequest(kudos_card_id="k-1", type="like"), "u-1")

    reaction_repository.add.assert_not_awaited()


@pytest.mark.asyncio
async def test_add_unknown_reaction_type(reaction_repository, kudos_card_repository):
    kudos_card_repository.find_by_id.return_value = make_kudos_card("k-1")
    use_case = AddReactionUseCase(reaction_repository, kudos_card_repository)

    with pytest.raises(ReactionValidationError, match="Invalid reaction type: wow"):
        await use_case.execute(AddReactionRequest(kudos_card_id="k-1", type="wow"), "u-1")

    reaction_repository.find_by_user_and_type.assert_not_awaited()


@pytest.mark.asyncio
async def test_add_reaction_to_missing_card(reaction_repository, kudos_card_repository):
    kudos_card_repository.find_by_id.return_value = None
    use_case = AddReactionUseCase(reaction_repository, kudos_card_repository)

    with pytest.raises(KudosCardNotFoundError):
        await use_case.execute(AddReactionRequest(kudos_card_id="k-404", type="like"), "u-1")


@pytest.mark.asyncio
async def test_get_reactions(reaction_repository, kudos_card_repository):
    kudos_card_repository.find_by_id.return_value = make_kudos_card("k-1")
    reaction_repository.find_by_kudos_card_id.return_value = [make_reaction("r-1"), make_reaction("r-2", user_id="u-2")]
    reaction_repository.count_by_type.return_value = [ReactionCount(type=ReactionType.LIKE, count=2)]

    response = await GetReactionsUseCase(reaction_repository, kudos_card_repository).execute("k-1")

    assert [reaction.id for reaction in response.reactions] == ["r-1", "r-2"]
    assert response.reaction_counts[0].count == 2


@pytest.mark.asyncio
async def test_remove_own_reaction(reaction_repository):
    reaction_repository.find_by_id.return_value = make_reaction("r-1", kudos_card_id="k-3", user_id="u-1")
    reaction_repository.remove.return_value = True
    reaction_repository.count_by_type.return_value = []

    response = await RemoveReactionUseCase(reaction_repository).execute("r-1", "u-1")

    assert response.success is True
    assert response.kudos_card_id == "k-3"
    assert response.reaction_counts == []
    reaction_repository.count_by_type.assert_awaited_once_with("k-3")


@pytest.mark.asyncio
async def test_remove_someone_elses_reaction(reaction_repository):
    reaction_repository.find_by_id.return_value = make_reaction("r-1", user_id="u-1")

    with pytest.raises(UnauthorizedReactionError):
        await RemoveReactionUseCase(reaction_repository).execute("r-1", "u-2")

    reaction_repository.remove.assert_not_awaited()


@pytest.mark.asyncio
async def test_remove_missing_reaction(reaction_repository):
    reaction_repository.find_by_id.return_value = None

    with pytest.raises(ReactionNotFoundError, match="Reaction with ID r-404 not found"):
        await RemoveReactionUseCase(reaction_repository).execute("r-404", "u-1")


@pytest.mark.asyncio
async def test_remove_reaction_store_failure(reaction_repository):
    reaction_repository.find_by_id.return_value = make_reaction("r-1", user_id="u-1")
    reaction_repository.remove.return_value = False

    with pytest.raises(OperationFailedError):
        await RemoveReactionUseCase(reaction_repository).execute("r-1", "u-1")
