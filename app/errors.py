"""Exception handlers that render every failure in the shared envelope.

    {"success": false, "message": "...", "errors": [...]}
"""
import logging
from typing import List, Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.currency.errors import CurrencyServiceError

logger = logging.getLogger(__name__)


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Failure envelope shared by every endpoint."""
    success: bool = False
    message: str
    errors: Optional[List[FieldError]] = None
    error: Optional[str] = None  # exception text, development only


def _render(status_code: int, body: ErrorResponse, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def currency_error_handler(request: Request, exc: CurrencyServiceError):
    logger.info(f"{request.method} {request.url.path} rejected: {exc.kind.value}: {exc.message}")
    return _render(status.HTTP_400_BAD_REQUEST, ErrorResponse(message=exc.message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _render(exc.status_code, ErrorResponse(message=message), getattr(exc, "headers", None))


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        # loc is like ("body", "email") or ("query", "days")
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        errors.append(FieldError(field=".".join(loc) or "request", message=err.get("msg", "Invalid value")))
    return _render(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(message="Validation failed", errors=errors),
    )


async def server_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _render(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(
            message="Internal server error",
            error=str(exc) if settings.is_development else None,
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CurrencyServiceError, currency_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, server_error_handler)
