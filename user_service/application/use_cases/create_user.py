from loguru import logger

from user_service.application.dto import CreateUserInput, UserOutput
from user_service.application.ports import UnitOfWork
from user_service.domain.errors import DuplicateEmailError
from user_service.domain.user import Email, User, UserName


class CreateUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def execute(self, input: CreateUserInput) -> UserOutput:
        email = Email.create(input.email)
        name = UserName.create(input.first_name, input.last_name)

        with self.uow:
            # 同時実行時の一意性はストレージの一意制約が保証する
            if self.uow.users.exists_by_email(email):
                logger.warning("Rejected duplicate email {}", email)
                raise DuplicateEmailError(email)
            user = self.uow.users.save(User.create(email=email, name=name))
            self.uow.commit()

        logger.info("Created user {}", user.id)
        return UserOutput.from_user(user)
