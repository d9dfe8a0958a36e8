from loguru import logger
from sqlalchemy.orm import Session, sessionmaker

from user_service.adapters.db.sqlalchemy.user_repository import SQLAlchemyUserRepository
from user_service.application.ports import UnitOfWork, UserRepository


# ユースケース 1 回分のトランザクション (セッションはユースケースごとに作る)
# commit せずに抜けた場合は例外の有無に関わらず明示的に rollback する
class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self.session: Session | None = None
        self._users: SQLAlchemyUserRepository | None = None
        self.committed = False

    def __enter__(self) -> "SQLAlchemyUnitOfWork":
        assert self.session is None, "UnitOfWork is already entered."
        self.session = self._session_factory()
        self.session.begin()
        self._users = SQLAlchemyUserRepository(self.session)
        self.committed = False
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        assert self.session is not None
        try:
            if self.session.in_transaction():
                if exc_type:
                    logger.debug("Rolling back after {}", exc_type.__name__)
                else:
                    logger.debug("Discarding uncommitted changes")
                self.session.rollback()
        finally:
            self.session.close()
            self.session = None
            self._users = None

    @property
    def users(self) -> UserRepository:
        assert self._users is not None, "UnitOfWork is not entered."
        return self._users

    def commit(self) -> None:
        assert self.session is not None, "UnitOfWork is not entered."
        self.session.commit()
        self.committed = True

    def rollback(self) -> None:
        assert self.session is not None, "UnitOfWork is not entered."
        self.session.rollback()
