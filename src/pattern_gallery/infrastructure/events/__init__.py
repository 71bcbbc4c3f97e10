"""Event publishing infrastructure."""
from .publisher import ConfigurableEventPublisher

__all__ = ["ConfigurableEventPublisher"]
