from datetime import datetime

from pydantic import BaseModel

from user_service.domain.user import User

# DTO (Data Transfer Object - データ転送オブジェクト)

class CreateUserInput(BaseModel):
    email: str
    first_name: str
    last_name: str


class UpdateUserInput(BaseModel):
    user_id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class UserOutput(BaseModel):
    id: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserOutput":
        return cls(
            id=str(user.id),
            email=user.email.value,
            first_name=user.name.first_name,
            last_name=user.name.last_name,
            full_name=user.name.full_name,
            active=user.active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
