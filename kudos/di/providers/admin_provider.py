from typing import TYPE_CHECKING

from kudos.application.use_cases.admin.delete_user import DeleteUserUseCase
from kudos.application.use_cases.admin.get_pending_users import GetPendingUsersUseCase
from kudos.application.use_cases.admin.search_users import SearchUsersUseCase
from kudos.application.use_cases.admin.update_user import UpdateUserUseCase
from kudos.domain.repositories.user_repository import AdminUserRepository, UserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AdminProvider:
    """Admin use case provider - user review and account management"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        admin_user_repository = container.get(AdminUserRepository)
        user_repository = container.get(UserRepository)

        container.register_singleton(GetPendingUsersUseCase, GetPendingUsersUseCase(admin_user_repository))
        container.register_singleton(SearchUsersUseCase, SearchUsersUseCase(admin_user_repository))
        container.register_singleton(UpdateUserUseCase, UpdateUserUseCase(user_repository))
        container.register_singleton(DeleteUserUseCase, DeleteUserUseCase(user_repository))
