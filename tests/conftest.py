from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import sessionmaker

from user_service.adapters.db.in_memory import InMemoryUnitOfWork, InMemoryUserStore
from user_service.adapters.db.sqlalchemy import SQLAlchemyUnitOfWork
from user_service.adapters.db.sqlalchemy.models import Base
from user_service.adapters.http.fastapi import create_app
from user_service.domain.user import Email, User, UserName
from user_service.runtime.db import build_session_factory
from user_service.runtime.settings import Settings
from tests.utils import make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def john() -> User:
    return User.create(Email.create("john@example.com"), UserName.create("John", "Doe"))


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def memory_uow(store: InMemoryUserStore) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(store)


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return build_session_factory(engine)


@pytest.fixture
def sql_uow(session_factory: sessionmaker) -> SQLAlchemyUnitOfWork:
    return SQLAlchemyUnitOfWork(session_factory)


@pytest.fixture(params=["memory", "sqlalchemy"])
def client(request: pytest.FixtureRequest) -> Iterator[TestClient]:
    """API client running against each repository backend."""
    app = create_app(make_settings(repository_backend=request.param))
    with TestClient(app) as test_client:
        yield test_client
