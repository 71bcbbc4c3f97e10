"""Maps exceptions to structured error responses."""
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from pattern_gallery.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from pattern_gallery.infrastructure.error.context import ExceptionContext
from pattern_gallery.infrastructure.logging.logger import get_logger


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFIGURATION = "configuration"
    DOMAIN = "domain"
    INTERNAL = "internal"


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse:
    """Error details presented to a caller."""

    def __init__(self, error_code: str, message: str, category: ErrorCategory,
                 details: Optional[Dict[str, Any]] = None):
        self.error_code = error_code
        self.message = message
        self.category = category
        self.details = details or {}

    @property
    def exit_code(self) -> int:
        return 2 if self.category == ErrorCategory.INTERNAL else 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }


class ExceptionHandler:
    """Translates exceptions into :class:`ErrorResponse` objects and logs them."""

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    def handle(self, exc: BaseException,
               context: Optional[ExceptionContext] = None) -> ErrorResponse:
        response = self._to_response(exc)
        log_context = context.to_dict() if context else {}
        if response.category == ErrorCategory.INTERNAL:
            self._logger.error(f"Unexpected error: {exc}", exc_info=exc, **log_context)
        else:
            self._logger.debug(f"{response.error_code}: {response.message}", **log_context)
        return response

    def _to_response(self, exc: BaseException) -> ErrorResponse:
        if isinstance(exc, ValidationError):
            category = ErrorCategory.VALIDATION
        elif isinstance(exc, EntityNotFoundError):
            category = ErrorCategory.NOT_FOUND
        elif isinstance(exc, ConfigurationError):
            category = ErrorCategory.CONFIGURATION
        elif isinstance(exc, DomainException):
            category = ErrorCategory.DOMAIN
        elif isinstance(exc, PydanticValidationError):
            return ErrorResponse(ErrorCode.VALIDATION_ERROR.value, str(exc),
                                 ErrorCategory.VALIDATION,
                                 {"errors": exc.errors(include_url=False)})
        else:
            return ErrorResponse(ErrorCode.INTERNAL_ERROR.value, str(exc) or type(exc).__name__,
                                 ErrorCategory.INTERNAL, {"type": type(exc).__name__})

        return ErrorResponse(exc.error_code, exc.message, category, dict(exc.details))


_exception_handler: Optional[ExceptionHandler] = None


def get_exception_handler() -> ExceptionHandler:
    global _exception_handler
    if _exception_handler is None:
        _exception_handler = ExceptionHandler()
    return _exception_handler
