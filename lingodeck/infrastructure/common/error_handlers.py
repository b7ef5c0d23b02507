"""Render application errors as plain-text HTTP responses."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from lingodeck.domain.common.exceptions import DomainError
from lingodeck.domain.common.exceptions import ValidationError as DomainValidationError
from lingodeck.exceptions import LingoDeckError

logger = structlog.get_logger(__name__)


async def lingodeck_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    assert isinstance(exc, LingoDeckError)
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("request_failed", path=request.url.path, error=exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def domain_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    assert isinstance(exc, DomainError)
    if isinstance(exc, DomainValidationError):
        logger.info("request_rejected", path=request.url.path, error=exc.message, field=exc.field)
        return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)
    logger.error("domain_error", path=request.url.path, error=str(exc))
    return PlainTextResponse(
        "Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


async def request_validation_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Malformed bodies (not JSON, not an object, wrong field types) are client errors."""
    assert isinstance(exc, RequestValidationError)
    fields = sorted(
        {
            ".".join(str(part) for part in error.get("loc", ()) if part != "body") or "body"
            for error in exc.errors()
        }
    )
    logger.info("request_rejected", path=request.url.path, fields=fields)
    return PlainTextResponse(
        f"Invalid request body: {', '.join(fields)}",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LingoDeckError, lingodeck_error_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
