from user_service.application.ports import UserRepository
from user_service.domain.errors import DuplicateEmailError
from user_service.domain.user import Email, User, UserId


# dict 上で動くリポジトリ (テスト・memory バックエンド用)
# commit 用に変更 (upserted / deleted) を記録する
class InMemoryUserRepository(UserRepository):
    def __init__(self, users: dict[UserId, User] | None = None):
        self.users: dict[UserId, User] = {} if users is None else users
        self.upserted: dict[UserId, User] = {}
        self.deleted: set[UserId] = set()

    def save(self, user: User) -> User:
        # SQL 側の users.email 一意制約と同じ振る舞い
        owner = self.find_by_email(user.email)
        if owner is not None and owner.id != user.id:
            raise DuplicateEmailError(user.email)
        self.users[user.id] = user
        self.upserted[user.id] = user
        self.deleted.discard(user.id)
        return user

    def find_by_id(self, user_id: UserId) -> User | None:
        return self.users.get(user_id)

    def find_by_email(self, email: Email) -> User | None:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def list_all(self) -> list[User]:
        return list(self.users.values())

    def delete_by_id(self, user_id: UserId) -> None:
        self.users.pop(user_id, None)
        self.upserted.pop(user_id, None)
        self.deleted.add(user_id)

    def exists_by_email(self, email: Email) -> bool:
        return self.find_by_email(email) is not None
