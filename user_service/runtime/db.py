"""Database engine and session factory used by the SQLAlchemy adapter."""

from loguru import logger
from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import sessionmaker

from user_service.adapters.db.sqlalchemy.models import Base
from user_service.runtime.settings import Settings


def build_engine(settings: Settings) -> Engine:
    url = settings.database_url
    kwargs: dict = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # インメモリ SQLite は接続ごとに別 DB になるので 1 接続を共有する
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    # SQL ログは sqlalchemy.engine ロガーのレベルで制御する (configure_logging)
    return create_engine(url, echo=False, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=True, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(engine)
    logger.info("Database initialized with tables.")
