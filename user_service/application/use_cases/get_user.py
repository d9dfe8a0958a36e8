from user_service.application.dto import UserOutput
from user_service.application.ports import UnitOfWork
from user_service.domain.errors import UserNotFoundError
from user_service.domain.user import UserId


class GetUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def execute(self, user_id: str) -> UserOutput:
        uid = UserId.parse(user_id)
        with self.uow:
            user = self.uow.users.find_by_id(uid)
        if user is None:
            raise UserNotFoundError(uid)
        return UserOutput.from_user(user)
