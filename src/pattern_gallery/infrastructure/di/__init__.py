"""Dependency injection and CQRS bus infrastructure."""
from .buses import BusFactory, CommandBus, QueryBus
from .container import DIContainer, get_container, reset_container

__all__ = ["DIContainer", "get_container", "reset_container", "QueryBus", "CommandBus", "BusFactory"]
