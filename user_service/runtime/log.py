import logging
import sys

from loguru import logger

from user_service.runtime.settings import Settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Redirect standard 'logging' records (uvicorn, SQLAlchemy) to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # リクエストログはミドルウェアが出す
        if record.name == "uvicorn.access":
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def configure_logging(settings: Settings) -> None:
    logger.remove()
    # {extra[request_id]} が常に存在するようにする
    logger.configure(extra={"request_id": "-"})

    debug_on = settings.environment != "production"
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        colorize=True,
        backtrace=debug_on,
        diagnose=debug_on,
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict.keys()):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True

    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database_echo else logging.WARNING
    )
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.CRITICAL)

    logger.info(
        "Logging configured (level={}, environment={})",
        settings.log_level.upper(),
        settings.environment,
    )
