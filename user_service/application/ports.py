from abc import ABC, abstractmethod

from user_service.domain.user import Email, User, UserId


class UserRepository(ABC):
    # id をキーにした upsert。保存後の表現を返す
    @abstractmethod
    def save(self, user: User) -> User: ...

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> User | None: ...

    @abstractmethod
    def find_by_email(self, email: Email) -> User | None: ...

    @abstractmethod
    def list_all(self) -> list[User]: ...

    # 存在しない場合は何もしない
    @abstractmethod
    def delete_by_id(self, user_id: UserId) -> None: ...

    @abstractmethod
    def exists_by_email(self, email: Email) -> bool: ...


# データベースの変更を伴う単一のユースケース全体をラップするトランザクション境界
class UnitOfWork(ABC):
    @abstractmethod
    def __enter__(self) -> "UnitOfWork": ...

    @abstractmethod
    def __exit__(self, exc_type, exc_value, traceback) -> None: ...

    @property
    @abstractmethod
    def users(self) -> UserRepository: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...
