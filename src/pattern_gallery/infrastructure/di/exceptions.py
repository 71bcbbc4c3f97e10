"""Dependency injection exceptions."""
from typing import Any, List, Optional, Type

from pattern_gallery.domain.base.exceptions import DomainException


def _type_name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, '__name__') else str(cls)


class DependencyResolutionError(DomainException):
    """Raised when the container cannot build a dependency."""

    def __init__(self, dependency_type: Any, message: str,
                 parent_type: Optional[Type] = None,
                 parameter_name: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        details = {"dependency": _type_name(dependency_type)}
        if parent_type is not None:
            details["parent"] = _type_name(parent_type)
        if parameter_name is not None:
            details["parameter"] = parameter_name
        super().__init__(f"Cannot resolve {_type_name(dependency_type)}: {message}",
                         "DEPENDENCY_RESOLUTION_ERROR", details)
        self.dependency_type = dependency_type
        self.cause = cause


class UntypedParameterError(DependencyResolutionError):
    """Raised when a constructor parameter has no annotation and no default."""

    def __init__(self, cls: Type, parameter_name: str):
        super().__init__(cls, f"parameter '{parameter_name}' has no type annotation",
                         cls, parameter_name)


class CircularDependencyError(DependencyResolutionError):
    """Raised when resolving a type requires the type itself."""

    def __init__(self, chain: List[Any]):
        path = " -> ".join(_type_name(item) for item in chain)
        super().__init__(chain[-1], f"circular dependency {path}")
        self.chain = chain
