from user_service.application.dto import UserOutput
from user_service.application.ports import UnitOfWork


class GetAllUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def execute(self) -> list[UserOutput]:
        with self.uow:
            users = self.uow.users.list_all()
            return [UserOutput.from_user(user) for user in users]
