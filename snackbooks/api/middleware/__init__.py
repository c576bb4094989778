"""API middleware."""

from snackbooks.api.middleware.error_handler import ErrorHandlerMiddleware, setup_exception_handlers
from snackbooks.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware", "setup_exception_handlers"]
