from typing import TYPE_CHECKING

from kudos.application.use_cases.comments.add_comment import AddCommentUseCase
from kudos.application.use_cases.comments.delete_comment import DeleteCommentUseCase
from kudos.application.use_cases.comments.get_comments import GetCommentsUseCase
from kudos.application.use_cases.comments.update_comment import UpdateCommentUseCase
from kudos.domain.repositories.comment_repository import CommentRepository
from kudos.domain.repositories.kudos_card_repository import KudosCardRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CommentProvider:
    """Comment use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        comment_repository = container.get(CommentRepository)
        kudos_card_repository = container.get(KudosCardRepository)

        container.register_singleton(
            AddCommentUseCase,
            AddCommentUseCase(comment_repository, kudos_card_repository),
        )
        container.register_singleton(
            GetCommentsUseCase,
            GetCommentsUseCase(comment_repository, kudos_card_repository),
        )
        container.register_singleton(UpdateCommentUseCase, UpdateCommentUseCase(comment_repository))
        container.register_singleton(DeleteCommentUseCase, DeleteCommentUseCase(comment_repository))
