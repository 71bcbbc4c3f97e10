"""Tests for exception mapping and error context."""
import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from pattern_gallery.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    ValidationError,
)
from pattern_gallery.domain.catalog import ExampleNotFoundError
from pattern_gallery.infrastructure.error import (
    ErrorCategory,
    ExceptionContext,
    ExceptionHandler,
    get_exception_handler,
)


class _Sized(BaseModel):
    size: int


class TestExceptionHandler:
    """Test exception to response mapping."""

    def setup_method(self):
        self.handler = ExceptionHandler()

    @pytest.mark.parametrize("exc, category, code", [
        (ValidationError("Pizza size is required", field="size"), ErrorCategory.VALIDATION, "VALIDATION_ERROR"),
        (ExampleNotFoundError("builder", "burger"), ErrorCategory.NOT_FOUND, "ENTITY_NOT_FOUND"),
        (ConfigurationError("bad file"), ErrorCategory.CONFIGURATION, "CONFIGURATION_ERROR"),
        (DomainException("rule broken", "RULE"), ErrorCategory.DOMAIN, "RULE"),
    ])
    def test_domain_exceptions(self, exc, category, code):
        response = self.handler.handle(exc)

        assert response.category == category
        assert response.error_code == code
        assert response.message == exc.message
        assert response.exit_code == 1

    def test_details_are_copied(self):
        response = self.handler.handle(ValidationError("Pizza size is required", field="size"))

        assert response.to_dict() == {
            "error": "VALIDATION_ERROR",
            "category": "validation",
            "message": "Pizza size is required",
            "details": {"field": "size"},
        }

    def test_pydantic_validation_error(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            _Sized(size="large")

        response = self.handler.handle(exc_info.value)

        assert response.category == ErrorCategory.VALIDATION
        assert response.details["errors"][0]["loc"] == ("size",)

    def test_unexpected_exception_is_internal(self):
        response = self.handler.handle(RuntimeError("boom"), ExceptionContext("run", "cli", slug="pizza"))

        assert response.category == ErrorCategory.INTERNAL
        assert response.error_code == "INTERNAL_ERROR"
        assert response.details == {"type": "RuntimeError"}
        assert response.exit_code == 2

    def test_exception_without_message_uses_type_name(self):
        response = self.handler.handle(KeyError())

        assert response.message == "KeyError"

    def test_global_handler(self):
        assert get_exception_handler() is get_exception_handler()


def test_exception_context_to_dict():
    context = ExceptionContext("examples.run", "cli", pattern="builder")

    data = context.to_dict()

    assert data["operation"] == "examples.run"
    assert data["layer"] == "cli"
    assert data["pattern"] == "builder"
    assert "timestamp" in data
