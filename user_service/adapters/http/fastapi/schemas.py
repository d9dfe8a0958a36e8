from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON 上は camelCase (firstName, fullName, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateUserRequest(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)
    email: str
    first_name: str
    last_name: str


class UpdateUserRequest(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class UserResponse(CamelModel):
    id: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    active: bool
    created_at: datetime
    updated_at: datetime


class ErrorResponse(CamelModel):
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: int
    error: str
    message: str
    path: str | None = None
    validation_errors: dict[str, str] | None = None
