"""Base domain exceptions shared by the catalog and every pattern example."""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a serializable dictionary."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class ValidationError(DomainException):
    """Raised when a value fails a domain validation rule."""

    def __init__(self, message: str, field: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        if field is not None:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundError(DomainException):
    """Raised when a looked-up entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        message = f"{entity_type} not found: {entity_id}"
        super().__init__(message, "ENTITY_NOT_FOUND", {
            "entity_type": entity_type,
            "entity_id": entity_id,
        })
        self.entity_type = entity_type
        self.entity_id = entity_id


class ConfigurationError(DomainException):
    """Raised when configuration is missing or invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", details)
