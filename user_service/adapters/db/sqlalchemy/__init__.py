from user_service.adapters.db.sqlalchemy.uow import SQLAlchemyUnitOfWork
from user_service.adapters.db.sqlalchemy.user_repository import SQLAlchemyUserRepository

__all__ = ["SQLAlchemyUnitOfWork", "SQLAlchemyUserRepository"]
