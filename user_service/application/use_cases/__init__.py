from user_service.application.use_cases.create_user import CreateUserUseCase
from user_service.application.use_cases.delete_user import DeleteUserUseCase
from user_service.application.use_cases.get_user import GetUserUseCase
from user_service.application.use_cases.list_users import GetAllUsersUseCase
from user_service.application.use_cases.update_user import UpdateUserUseCase

__all__ = [
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "GetAllUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
]
