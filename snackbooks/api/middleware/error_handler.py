"""
Error responses for the SnackBooks API.

Every failure, whether a domain error, a schema error, an HTTP error or an
unexpected exception, is rendered as an ErrorResponse with a
machine-readable `error_code` and a `hint` for the caller.
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from snackbooks.application.dto.responses import ErrorResponse
from snackbooks.config import get_logger
from snackbooks.core.exceptions import (
    DatabaseError,
    RecordNotFoundError,
    SnackBooksError,
    ValidationError,
)

logger = get_logger(__name__)

# Checked in order; subclasses before their bases
DOMAIN_STATUS: tuple[tuple[type[SnackBooksError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (RecordNotFoundError, status.HTTP_404_NOT_FOUND),
    (DatabaseError, status.HTTP_503_SERVICE_UNAVAILABLE),
)

HINTS: dict[str, str] = {
    "ORDER_NOT_FOUND": "Check the order ID and try GET /api/orders to list orders.",
    "INCOME_NOT_FOUND": "Check the entry ID and try GET /api/income to list income.",
    "EXPENSE_NOT_FOUND": "Check the expense ID and try GET /api/expenses to list expenses.",
    "MATERIAL_NOT_FOUND": "Check the material ID and try GET /api/materials to list materials.",
    "EMPTY_ORDER": "Give at least one packet size a quantity above zero.",
    "DATABASE_ERROR": "The database is busy or unavailable. Retry shortly.",
}

STATUS_HINTS: dict[int, str] = {
    400: "Check the request parameters and body.",
    404: "The requested resource was not found. Verify the path and ID.",
    405: "This path does not accept that HTTP method.",
    422: "Check the request body fields and types.",
    500: "An internal error occurred. Check server logs.",
}

HTTP_ERROR_CODES: dict[int, str] = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def _status_for(exc: Exception) -> int:
    for exc_type, code in DOMAIN_STATUS:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _hint_for(exc: Exception, error_code: str, status_code: int) -> str:
    if isinstance(exc, ValidationError) and error_code == "VALIDATION_ERROR":
        return f"Check the '{exc.details['field']}' value."
    return HINTS.get(error_code) or STATUS_HINTS.get(status_code, "")


def _render(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    hint: str,
    detail: str | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error_code=error_code,
            message=message,
            hint=hint,
            detail=detail,
            path=request.url.path,
        ).model_dump(mode="json"),
    )


def error_response(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain or unexpected exception; 5xx are logged with a traceback."""
    status_code = _status_for(exc)

    if isinstance(exc, SnackBooksError):
        error_code = exc.code
        message = exc.message
        detail = str(exc.details) if exc.details else None
    else:
        error_code = exc.__class__.__name__
        message = str(exc)
        detail = None

    if status_code >= 500:
        logger.error(
            "request_error",
            error_type=error_code,
            error=message,
            traceback="".join(traceback.format_exception(exc)),
        )
    else:
        logger.warning("request_rejected", error_type=error_code, error=message)

    return _render(
        request, status_code, error_code, message, _hint_for(exc, error_code, status_code), detail
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Last line of defence: anything the exception handlers missed becomes a 500."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            return error_response(request, e)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers for domain, schema and HTTP errors."""

    @app.exception_handler(SnackBooksError)
    async def domain_exception_handler(request: Request, exc: SnackBooksError) -> JSONResponse:
        return error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        problems = [
            f"{' -> '.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        return _render(
            request,
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "VALIDATION_ERROR",
            "Request validation failed",
            STATUS_HINTS[422],
            "; ".join(problems),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        error_code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
        return _render(
            request,
            exc.status_code,
            error_code,
            str(exc.detail or "An error occurred"),
            STATUS_HINTS.get(exc.status_code, ""),
        )
