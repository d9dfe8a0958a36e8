"""Translate failures into ``ErrorResponse`` bodies.

Domain errors are mapped by their ``ErrorKind``; request body validation
errors become 400 with a per-field ``validationErrors`` map; anything else is
logged and reported as 500.
"""

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from user_service.adapters.http.fastapi.schemas import ErrorResponse
from user_service.domain.errors import DomainError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.NOT_FOUND: 404,
}


def error_response(
    request: Request,
    status_code: int,
    message: str,
    validation_errors: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=request.url.path,
        validation_errors=validation_errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, DomainError)
    status_code = STATUS_BY_KIND.get(exc.kind, 500)
    logger.info("{} -> {}: {}", type(exc).__name__, status_code, exc.message)
    return error_response(request, status_code, exc.message)


async def handle_request_validation_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    validation_errors: dict[str, str] = {}
    for error in exc.errors():
        # ("body", "firstName") -> "firstName"
        loc = [str(part) for part in error["loc"] if part != "body"]
        validation_errors[".".join(loc) or "body"] = error["msg"]
    return error_response(request, 400, "Validation failed", validation_errors)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    with logger.contextualize(request_id=request_id or "-"):
        logger.opt(exception=exc).error(
            "Unhandled error on {} {}", request.method, request.url.path
        )
    response = error_response(request, 500, "An unexpected error occurred")
    if request_id:
        response.headers["X-Request-ID"] = request_id
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
