"""Lookup of process-wide services such as the configuration manager and the example catalog."""

from typing import Any, Type, TypeVar, cast

from pattern_gallery.infrastructure.logging.logger import get_logger
from pattern_gallery.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Return the shared ``singleton_class`` instance.

    A registration in the DI container takes precedence. Without one the
    :class:`SingletonRegistry` builds the instance from ``args`` and
    ``kwargs`` on first use and hands back the same object afterwards.
    """
    from pattern_gallery.infrastructure.di.container import get_container

    container = get_container()
    if container.is_registered(singleton_class):
        return cast(T, container.get(singleton_class))

    get_logger(__name__).debug(f"{singleton_class.__name__} not in container, using singleton registry")
    return SingletonRegistry.get_instance().get(singleton_class, *args, **kwargs)
