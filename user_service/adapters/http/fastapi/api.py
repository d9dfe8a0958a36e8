import time
import uuid
from collections.abc import Awaitable, Callable
from functools import partial

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from loguru import logger

from user_service.adapters.db.in_memory import InMemoryUnitOfWork, InMemoryUserStore
from user_service.adapters.db.sqlalchemy import SQLAlchemyUnitOfWork
from user_service.adapters.http.fastapi.deps import (
    get_create_user_uc,
    get_delete_user_uc,
    get_get_user_uc,
    get_list_users_uc,
    get_update_user_uc,
)
from user_service.adapters.http.fastapi.errors import register_exception_handlers
from user_service.adapters.http.fastapi.schemas import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)
from user_service.application.dto import CreateUserInput, UpdateUserInput
from user_service.application.ports import UnitOfWork
from user_service.application.use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetAllUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)
from user_service.runtime.db import build_engine, build_session_factory, init_db
from user_service.runtime.log import configure_logging
from user_service.runtime.settings import Settings, get_settings

router = APIRouter(prefix="/api/v1")


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "UP"}


@router.post("/users", response_model=UserResponse, status_code=201)
def create_user(
    data: CreateUserRequest,
    uc: CreateUserUseCase = Depends(get_create_user_uc),
):
    out = uc.execute(CreateUserInput(**data.model_dump()))
    return UserResponse(**out.model_dump())


@router.get("/users", response_model=list[UserResponse])
def list_users(uc: GetAllUsersUseCase = Depends(get_list_users_uc)):
    return [UserResponse(**out.model_dump()) for out in uc.execute()]


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: str, uc: GetUserUseCase = Depends(get_get_user_uc)):
    out = uc.execute(user_id)
    return UserResponse(**out.model_dump())


@router.put("/users/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    data: UpdateUserRequest,
    uc: UpdateUserUseCase = Depends(get_update_user_uc),
):
    out = uc.execute(UpdateUserInput(user_id=user_id, **data.model_dump()))
    return UserResponse(**out.model_dump())


@router.delete("/users/{user_id}", status_code=204)
def delete_user(user_id: str, uc: DeleteUserUseCase = Depends(get_delete_user_uc)):
    uc.execute(user_id)
    return Response(status_code=204)


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    # 500 のハンドラはこのミドルウェアの外側で動くので state 経由で渡す
    request.state.request_id = request_id
    start = time.perf_counter()
    with logger.contextualize(request_id=request_id):
        logger.info("request.start {} {}", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info("request.end status=500 duration_ms={:.1f}", duration_ms)
            raise
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info("request.end status={} duration_ms={:.1f}", response.status_code, duration_ms)
    response.headers.setdefault("X-Request-ID", request_id)
    return response


def build_uow_factory(settings: Settings) -> Callable[[], UnitOfWork]:
    if settings.repository_backend == "memory":
        return partial(InMemoryUnitOfWork, InMemoryUserStore())

    engine = build_engine(settings)
    if settings.create_tables:
        init_db(engine)
    return partial(SQLAlchemyUnitOfWork, build_session_factory(engine))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)
    settings.validate_runtime()

    app = FastAPI(title="User Service")
    app.state.settings = settings
    app.state.uow_factory = build_uow_factory(settings)

    app.middleware("http")(log_requests)
    register_exception_handlers(app)
    app.include_router(router)

    logger.info("Application created with {} repository backend", settings.repository_backend)
    return app
