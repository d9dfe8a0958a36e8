import re
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

import pydantic
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from user_service.domain.errors import ValidationError

MAX_NAME_LENGTH = 50

# local-part "@" domain (ドメイン部にはドットが必要)
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

_UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _build(model: type[BaseModel], **fields: Any) -> Any:
    # pydantic の検証エラーをドメインの ValidationError に変換する
    try:
        return model(**fields)
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        cause = error.get("ctx", {}).get("error")
        raise ValidationError(str(cause) if cause is not None else error["msg"]) from e


###################################
# 値オブジェクト
###################################

class UserId(BaseModel):
    value: UUID = Field(default_factory=uuid4)
    model_config = ConfigDict(frozen=True)

    @classmethod
    def generate(cls) -> "UserId":
        return cls()

    @classmethod
    def parse(cls, text: str) -> "UserId":
        # 正規形 (8-4-4-4-12) のみ。UUID() が許す波括弧・urn:uuid:・ハイフン無しは弾く
        if not isinstance(text, str) or not _UUID_PATTERN.fullmatch(text):
            raise ValidationError(f"Invalid user id: {text}")
        return cls(value=UUID(text))

    def __str__(self) -> str:
        return str(self.value)


class Email(BaseModel):
    value: str
    model_config = ConfigDict(frozen=True)

    @field_validator("value")
    @classmethod
    def check_email_format(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Email cannot be blank")
        if not _EMAIL_PATTERN.match(v):
            raise ValueError(f"Invalid email format: {v}")
        return v

    @classmethod
    def create(cls, raw: str) -> "Email":
        return _build(cls, value=raw)

    def __str__(self) -> str:
        return self.value


class UserName(BaseModel):
    first_name: str
    last_name: str
    model_config = ConfigDict(frozen=True)

    @field_validator("first_name", "last_name")
    @classmethod
    def check_name_length(cls, v: str, info: ValidationInfo) -> str:
        label = "First name" if info.field_name == "first_name" else "Last name"
        if not v.strip():
            raise ValueError(f"{label} cannot be blank")
        if len(v) > MAX_NAME_LENGTH:
            raise ValueError(f"{label} cannot exceed {MAX_NAME_LENGTH} characters")
        return v

    @classmethod
    def create(cls, first_name: str, last_name: str) -> "UserName":
        return _build(cls, first_name=first_name, last_name=last_name)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


###################################
# 集約ルート
###################################

class User(BaseModel):
    """User aggregate root.

    Instances are frozen: every state transition returns a new ``User`` and
    bumps ``updated_at``. Email uniqueness is the repository's concern.
    """

    id: UserId
    email: Email
    name: UserName
    active: bool = True
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
    model_config = ConfigDict(frozen=True)

    # タイムゾーンなしの日時は UTC とみなす
    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @model_validator(mode="after")
    def check_timestamps(self) -> "User":
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self

    @classmethod
    def create(cls, email: Email, name: UserName) -> "User":
        now = _utcnow()
        return cls(id=UserId.generate(), email=email, name=name, created_at=now, updated_at=now)

    def update_email(self, new_email: Email) -> "User":
        return self._evolve(email=new_email)

    def update_name(self, new_name: UserName) -> "User":
        return self._evolve(name=new_name)

    def activate(self) -> "User":
        return self._evolve(active=True)

    def deactivate(self) -> "User":
        return self._evolve(active=False)

    def _evolve(self, **changes: Any) -> "User":
        updated_at = max(_utcnow(), self.updated_at)
        return self.model_copy(update={**changes, "updated_at": updated_at})
