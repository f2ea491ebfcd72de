"""Translate userbase errors into JSON responses.

Every error body has ``detail`` and ``code``; validation and conflict
errors add the offending ``field``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from userbase.domain.shared.exceptions import DomainException, ErrorCode, StoreError

logger = logging.getLogger(__name__)

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.STORE_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

STORE_UNAVAILABLE_MESSAGE = "The data store is currently unavailable"


def error_response(
    status_code: int,
    detail: str,
    code: ErrorCode,
    field: str | None = None,
) -> JSONResponse:
    content = {"detail": detail, "code": code.value}
    if field is not None:
        content["field"] = field
    return JSONResponse(status_code=status_code, content=content)


async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    # Driver messages can leak connection details, so clients get a fixed text.
    logger.error(
        "Store failure on %s %s: %s %s",
        request.method,
        request.url.path,
        exc.message,
        exc.details,
        exc_info=exc,
    )
    return error_response(
        STATUS_BY_CODE[exc.code],
        STORE_UNAVAILABLE_MESSAGE,
        exc.code,
    )


async def handle_domain_error(request: Request, exc: DomainException) -> JSONResponse:
    logger.warning(
        "%s %s rejected: %s (%s)",
        request.method,
        request.url.path,
        exc.message,
        exc.code.value,
    )
    return error_response(
        STATUS_BY_CODE[exc.code],
        exc.message,
        exc.code,
        field=exc.details.get("field"),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal error occurred",
        ErrorCode.INTERNAL_ERROR,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the handlers; the most specific exception class wins."""
    app.add_exception_handler(StoreError, handle_store_error)
    app.add_exception_handler(DomainException, handle_domain_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
