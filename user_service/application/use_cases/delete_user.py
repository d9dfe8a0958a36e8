from loguru import logger

from user_service.application.ports import UnitOfWork
from user_service.domain.errors import UserNotFoundError
from user_service.domain.user import UserId


class DeleteUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def execute(self, user_id: str) -> None:
        uid = UserId.parse(user_id)
        with self.uow:
            if self.uow.users.find_by_id(uid) is None:
                raise UserNotFoundError(uid)
            self.uow.users.delete_by_id(uid)
            self.uow.commit()
        logger.info("Deleted user {}", uid)
