"""Infrastructure-level pattern helpers."""
from .singleton_access import get_singleton
from .singleton_registry import SingletonRegistry

__all__ = ["get_singleton", "SingletonRegistry"]
