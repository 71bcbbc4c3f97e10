"""
Dependency injection container.

A type is registered as a fixed instance, as a singleton built on first
lookup, or as a factory called on every lookup. Concrete classes that are not
registered at all are built by autowiring their annotated constructor
parameters.
"""
import inspect
import typing
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar

from pattern_gallery.infrastructure.di.exceptions import (
    CircularDependencyError,
    DependencyResolutionError,
    UntypedParameterError,
)
from pattern_gallery.infrastructure.logging.logger import get_logger

T = TypeVar('T')
Chain = Tuple[type, ...]
logger = get_logger(__name__)


@dataclass(frozen=True)
class _Registration:
    provide: Callable[["DIContainer", Chain], Any]
    shared: bool


class DIContainer:
    """Type-keyed service registry with constructor autowiring."""

    def __init__(self):
        self._registrations: Dict[type, _Registration] = {}
        self._resolved: Dict[type, Any] = {}

    def is_registered(self, cls: Type) -> bool:
        return cls in self._resolved or cls in self._registrations

    def has(self, service_type: Type[T]) -> bool:
        return self.is_registered(service_type)

    def register_instance(self, cls: Type[T], instance: T) -> None:
        self._registrations.pop(cls, None)
        self._resolved[cls] = instance
        logger.debug(f"Registered instance for {cls.__name__}")

    def register_singleton(self, cls: Type[T], instance_or_factory: Any = None) -> None:
        """
        Share one ``cls`` between all lookups.

        ``instance_or_factory`` may be omitted to autowire ``cls`` itself, or be
        a class to autowire instead, a function receiving the container, or a
        ready instance. Nothing is built before the first lookup.
        """
        if instance_or_factory is None or isinstance(instance_or_factory, type):
            target = instance_or_factory or cls
            self._add(cls, lambda container, chain: container._build(target, chain), shared=True)
        elif inspect.isfunction(instance_or_factory) or inspect.ismethod(instance_or_factory):
            self._add(cls, lambda container, chain: instance_or_factory(container), shared=True)
        else:
            self.register_instance(cls, instance_or_factory)

    def register_factory(self, cls: Type[T], factory: Callable[..., T]) -> None:
        """Call ``factory(container)`` on every lookup of ``cls``."""
        self._add(cls, lambda container, chain: factory(container), shared=False)

    def _add(self, cls: type, provide: Callable[["DIContainer", Chain], Any], shared: bool) -> None:
        self._resolved.pop(cls, None)
        self._registrations[cls] = _Registration(provide, shared)
        logger.debug(f"Registered {'singleton' if shared else 'factory'} for {cls.__name__}")

    def get(self, cls: Type[T], _chain: Chain = ()) -> T:
        """
        Return the service registered for ``cls``, building it when needed.

        Raises:
            DependencyResolutionError: If ``cls`` or one of its dependencies cannot be built
        """
        if cls in self._resolved:
            return self._resolved[cls]
        if cls in _chain:
            raise CircularDependencyError([*_chain, cls])
        chain = _chain + (cls,)

        registration = self._registrations.get(cls)
        if registration is not None:
            instance = registration.provide(self, chain)
            if registration.shared:
                self._resolved[cls] = instance
            return instance

        if inspect.isclass(cls) and not inspect.isabstract(cls):
            return self._build(cls, chain)
        raise DependencyResolutionError(cls, "type is not registered and cannot be built")

    def _build(self, cls: Type[T], chain: Chain) -> T:
        logger.debug(f"Building {cls.__name__}")
        try:
            hints = typing.get_type_hints(cls.__init__)
        except (NameError, TypeError):
            hints = {}

        kwargs: Dict[str, Any] = {}
        parameters = list(inspect.signature(cls.__init__).parameters.items())[1:]
        for name, param in parameters:
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue
            has_default = param.default is not param.empty
            annotation = hints.get(name, param.annotation)
            if annotation is param.empty:
                if has_default:
                    continue
                raise UntypedParameterError(cls, name)

            target = _unwrap_optional(annotation) or annotation
            # Defaulted parameters are only injected when explicitly registered
            if has_default and not self.is_registered(target):
                continue
            try:
                kwargs[name] = self.get(target, chain)
            except DependencyResolutionError as e:
                raise DependencyResolutionError(target, str(e), cls, name, e) from e

        return cls(**kwargs)

    def clear(self) -> None:
        self._registrations.clear()
        self._resolved.clear()


def _unwrap_optional(annotation: Any) -> Optional[Any]:
    """``X`` for ``Optional[X]``, otherwise None."""
    if typing.get_origin(annotation) is typing.Union:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return None


_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Process-wide container, created on first use."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the process-wide container and everything registered in it."""
    global _container
    if _container is not None:
        _container.clear()
    _container = None
