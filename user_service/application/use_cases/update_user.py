from loguru import logger

from user_service.application.dto import UpdateUserInput, UserOutput
from user_service.application.ports import UnitOfWork
from user_service.domain.errors import UserNotFoundError
from user_service.domain.user import Email, UserId, UserName


class UpdateUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def execute(self, input: UpdateUserInput) -> UserOutput:
        uid = UserId.parse(input.user_id)

        with self.uow:
            user = self.uow.users.find_by_id(uid)
            if user is None:
                raise UserNotFoundError(uid)

            if input.email is not None:
                user = user.update_email(Email.create(input.email))

            # 氏名は first_name と last_name の両方が指定された場合のみ更新する
            if input.first_name is not None and input.last_name is not None:
                user = user.update_name(UserName.create(input.first_name, input.last_name))
            elif input.first_name is not None or input.last_name is not None:
                logger.debug("Ignoring partial name update for user {}", uid)

            user = self.uow.users.save(user)
            self.uow.commit()

        logger.info("Updated user {}", uid)
        return UserOutput.from_user(user)
