from datetime import datetime
from http import HTTPStatus
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from commerce_services.applications.interfaces.dtos.error import ErrorResponse
from commerce_services.domain.exceptions import ConflictError, DomainError, NotFoundError, ValidationError
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

_STATUS_BY_ERROR = (
    (NotFoundError, HTTPStatus.NOT_FOUND),
    (ValidationError, HTTPStatus.BAD_REQUEST),
    (ConflictError, HTTPStatus.CONFLICT),
)


def status_for(exc: DomainError) -> HTTPStatus:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return HTTPStatus.INTERNAL_SERVER_ERROR


def error_response(
    request: Request, status: HTTPStatus, message: str, validation_errors: Optional[Dict[str, str]] = None
) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(),
        status=status.value,
        error=status.phrase,
        message=message,
        path=request.url.path,
        validation_errors=validation_errors or None,
    )
    return JSONResponse(status_code=status.value, content=body.model_dump(mode="json", by_alias=True, exclude_none=True))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status = status_for(exc)
    if status == HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error(f"Unexpected error on {request.url.path}", exc_info=exc)
        return error_response(request, status, "An unexpected error occurred")

    logger.warning(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    return error_response(request, status, str(exc), getattr(exc, "errors", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = {}
    for error in exc.errors():
        location = [str(part) for part in error["loc"]]
        field = ".".join(location[1:]) or location[0]
        errors[field] = error["msg"]
    logger.warning(f"Validation error on {request.method} {request.url.path}: {errors}")
    return error_response(request, HTTPStatus.BAD_REQUEST, "Validation failed", errors)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
