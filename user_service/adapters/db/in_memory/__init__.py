from user_service.adapters.db.in_memory.uow import InMemoryUnitOfWork, InMemoryUserStore
from user_service.adapters.db.in_memory.user_repository import InMemoryUserRepository

__all__ = ["InMemoryUnitOfWork", "InMemoryUserRepository", "InMemoryUserStore"]
