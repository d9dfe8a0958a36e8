from fastapi import Depends, Request

from user_service.application.ports import UnitOfWork
from user_service.application.use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetAllUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)


# リクエストごとに新しい UnitOfWork を作る (create_app で app.state に設定)
def get_uow(request: Request) -> UnitOfWork:
    return request.app.state.uow_factory()


def get_create_user_uc(uow: UnitOfWork = Depends(get_uow)) -> CreateUserUseCase:
    return CreateUserUseCase(uow=uow)


def get_get_user_uc(uow: UnitOfWork = Depends(get_uow)) -> GetUserUseCase:
    return GetUserUseCase(uow=uow)


def get_list_users_uc(uow: UnitOfWork = Depends(get_uow)) -> GetAllUsersUseCase:
    return GetAllUsersUseCase(uow=uow)


def get_update_user_uc(uow: UnitOfWork = Depends(get_uow)) -> UpdateUserUseCase:
    return UpdateUserUseCase(uow=uow)


def get_delete_user_uc(uow: UnitOfWork = Depends(get_uow)) -> DeleteUserUseCase:
    return DeleteUserUseCase(uow=uow)
