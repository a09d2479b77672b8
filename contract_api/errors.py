"""
Error translation for the HTTP boundary.

Every failure leaves the API as an ``ErrorResponse`` with a stable ``code``:

    NotFoundError subclasses      -> 404
    ConflictError subclasses      -> 409  (DUPLICATE_REQUEST, INVALID_STATE)
    ContractRuleError subclasses  -> 400  (INVALID_START_DATE, ...)
    InputValidationError,
    pydantic RequestValidationError -> 400 VALIDATION_ERROR
    routing HTTPException         -> its own status (NOT_FOUND,
                                     METHOD_NOT_ALLOWED, HTTP_ERROR)
    anything else                 -> 500 INTERNAL_ERROR (message is generic;
                                     details go to the log only)
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from contract_api.schemas import ErrorResponse
from contract_kernel.exceptions import (
    ConflictError,
    ContractKernelError,
    ContractRuleError,
    InputValidationError,
    NotFoundError,
)
from contract_kernel.logging_config import get_logger

logger = get_logger("api.errors")

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "An internal server error occurred"
VALIDATION_ERROR_CODE = InputValidationError.code
HTTP_ERROR_CODE = "HTTP_ERROR"

_CODE_BY_HTTP_STATUS: dict[int, str] = {
    status.HTTP_404_NOT_FOUND: NotFoundError.code,
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}

_STATUS_BY_CATEGORY: tuple[tuple[type[ContractKernelError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ContractRuleError, status.HTTP_400_BAD_REQUEST),
    (InputValidationError, status.HTTP_400_BAD_REQUEST),
)


def status_for(exc: ContractKernelError) -> int | None:
    """HTTP status for a client-facing kernel error, None if internal."""
    for category, http_status in _STATUS_BY_CATEGORY:
        if isinstance(exc, category):
            return http_status
    return None


def _now(request: Request):
    return request.app.state.clock.now()


def error_response(
    request: Request,
    code: str,
    message: str,
    http_status: int,
    details: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        code=code,
        message=message,
        details=details or None,
        timestamp=_now(request),
        status=http_status,
    )
    return JSONResponse(
        status_code=http_status,
        content=jsonable_encoder(body, exclude_none=True),
        headers=headers,
    )


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "request"


async def kernel_error_handler(request: Request, exc: ContractKernelError) -> JSONResponse:
    http_status = status_for(exc)
    if http_status is None:
        return await internal_error_handler(request, exc)
    logger.info(
        "request_rejected",
        extra={"error_code": exc.code, "http_status": http_status, "path": request.url.path},
    )
    details = exc.details if isinstance(exc, InputValidationError) else None
    return error_response(request, exc.code, str(exc), http_status, details)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = {_field_name(tuple(err["loc"])): err["msg"] for err in exc.errors()}
    logger.info(
        "request_rejected",
        extra={"error_code": VALIDATION_ERROR_CODE, "fields": sorted(details)},
    )
    return error_response(
        request,
        VALIDATION_ERROR_CODE,
        "Request validation failed",
        status.HTTP_400_BAD_REQUEST,
        details,
    )


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes, wrong methods and other framework-level rejections."""
    code = _CODE_BY_HTTP_STATUS.get(exc.status_code, HTTP_ERROR_CODE)
    logger.info(
        "request_rejected",
        extra={
            "error_code": code,
            "http_status": exc.status_code,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return error_response(
        request,
        code,
        str(exc.detail),
        exc.status_code,
        headers=exc.headers,
    )


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_exception",
        extra={"path": request.url.path, "method": request.method},
        exc_info=exc,
    )
    return error_response(
        request,
        INTERNAL_ERROR_CODE,
        INTERNAL_ERROR_MESSAGE,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ContractKernelError, kernel_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
