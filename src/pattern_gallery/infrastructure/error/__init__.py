"""Error classification and reporting."""

from .context import ExceptionContext
from .exception_handler import (
    ErrorCategory,
    ErrorCode,
    ErrorResponse,
    ExceptionHandler,
    get_exception_handler,
)

__all__ = [
    "ExceptionContext",
    "ExceptionHandler",
    "ErrorResponse",
    "ErrorCategory",
    "ErrorCode",
    "get_exception_handler",
]
