import threading

from user_service.adapters.db.in_memory.user_repository import InMemoryUserRepository
from user_service.application.ports import UnitOfWork, UserRepository
from user_service.domain.errors import DuplicateEmailError
from user_service.domain.user import User, UserId


class InMemoryUserStore:
    """Process-wide user storage shared by every ``InMemoryUnitOfWork``."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.lock = threading.Lock()


# enter 時のスナップショット上で読み書きし、commit では自分の変更だけを
# 共有ストアの最新状態に適用する
class InMemoryUnitOfWork(UnitOfWork):
    def __init__(self, store: InMemoryUserStore):
        self.store = store
        self._users: InMemoryUserRepository | None = None
        self._loaded_ids: set[UserId] = set()
        self.committed = False

    def __enter__(self) -> "InMemoryUnitOfWork":
        self._reload()
        self.committed = False
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_type:
            self.rollback()
        self._users = None

    @property
    def users(self) -> UserRepository:
        assert self._users is not None, "UnitOfWork is not entered."
        return self._users

    def commit(self) -> None:
        assert self._users is not None, "UnitOfWork is not entered."
        with self.store.lock:
            merged = dict(self.store.users)
            for user_id in self._users.deleted:
                merged.pop(user_id, None)
            for user_id, user in self._users.upserted.items():
                # 読み込み後に他の UnitOfWork が削除した行は復活させない (UPDATE 0 件と同じ)
                if user_id in self._loaded_ids and user_id not in merged:
                    continue
                merged[user_id] = user

            # 一意制約は最新のストアに対して検査する
            owners: dict[str, UserId] = {}
            for user in merged.values():
                owner = owners.setdefault(user.email.value, user.id)
                if owner != user.id:
                    raise DuplicateEmailError(user.email)

            self.store.users = merged
        self.committed = True
        self._reload()

    def rollback(self) -> None:
        assert self._users is not None, "UnitOfWork is not entered."
        self._reload()

    def _reload(self) -> None:
        with self.store.lock:
            snapshot = dict(self.store.users)
        self._users = InMemoryUserRepository(snapshot)
        self._loaded_ids = set(snapshot)
