from user_service.domain.errors import (
    ConflictError,
    DomainError,
    DuplicateEmailError,
    ErrorKind,
    NotFoundError,
    UserNotFoundError,
    ValidationError,
)
from user_service.domain.user import Email, User, UserId, UserName

__all__ = [
    "ConflictError",
    "DomainError",
    "DuplicateEmailError",
    "Email",
    "ErrorKind",
    "NotFoundError",
    "User",
    "UserId",
    "UserName",
    "UserNotFoundError",
    "ValidationError",
]
