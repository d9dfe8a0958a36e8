from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


class DomainError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# 入力値の不正
class ValidationError(DomainError, ValueError):
    kind = ErrorKind.VALIDATION


# 一意制約違反
class ConflictError(DomainError):
    kind = ErrorKind.CONFLICT


class DuplicateEmailError(ConflictError):
    def __init__(self, email: object):
        super().__init__(f"User already exists with email: {email}")
        self.email = str(email)


# 対象が存在しない
class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: object):
        super().__init__(f"User not found with id: {user_id}")
        self.user_id = str(user_id)
