from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from user_service.adapters.db.sqlalchemy import models
from user_service.application.ports import UserRepository
from user_service.domain.errors import DuplicateEmailError
from user_service.domain.user import Email, User, UserId, UserName


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: Session):
        self.session = session

    def save(self, user: User) -> User:
        user_model = self.session.merge(_to_model(user))
        try:
            self.session.flush()
        except IntegrityError as e:
            # users.email の一意制約違反
            raise DuplicateEmailError(user.email) from e
        return _to_domain(user_model)

    def find_by_id(self, user_id: UserId) -> User | None:
        user_model = self.session.get(models.User, user_id.value)
        if user_model:
            return _to_domain(user_model)
        return None

    def find_by_email(self, email: Email) -> User | None:
        user_model = self.session.query(models.User).filter_by(email=email.value).first()
        if user_model:
            return _to_domain(user_model)
        return None

    def list_all(self) -> list[User]:
        user_models = self.session.query(models.User).order_by(models.User.created_at).all()
        return [_to_domain(user_model) for user_model in user_models]

    def delete_by_id(self, user_id: UserId) -> None:
        self.session.query(models.User).filter_by(id=user_id.value).delete()

    def exists_by_email(self, email: Email) -> bool:
        return self.session.query(models.User.id).filter_by(email=email.value).first() is not None


def _to_model(user: User) -> models.User:
    return models.User(
        id=user.id.value,
        email=user.email.value,
        first_name=user.name.first_name,
        last_name=user.name.last_name,
        active=user.active,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def _to_domain(user_model: models.User) -> User:
    return User(
        id=UserId(value=user_model.id),
        email=Email(value=user_model.email),
        name=UserName(first_name=user_model.first_name, last_name=user_model.last_name),
        active=user_model.active,
        created_at=user_model.created_at,
        updated_at=user_model.updated_at,
    )
