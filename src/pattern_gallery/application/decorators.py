"""
CQRS handler registration.

Handlers announce the message type they process with ``@query_handler`` or
``@command_handler``. Registration happens when the handler module is
imported, which is why ``register_services`` imports ``application.queries``
and ``application.commands`` before it builds the buses.
"""
from typing import Callable, Dict, Type, TypeVar

from pattern_gallery.application.interfaces.command_query import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
)

THandler = TypeVar('THandler', bound=type)

_query_handlers: Dict[Type[Query], Type[QueryHandler]] = {}
_command_handlers: Dict[Type[Command], Type[CommandHandler]] = {}


def query_handler(query_type: Type[Query]) -> Callable[[THandler], THandler]:
    """
    Mark a class as the handler for ``query_type``.

    Usage:
        @query_handler(ListExamplesQuery)
        class ListExamplesHandler(QueryHandler[ListExamplesQuery, List[ExampleDTO]]):
            ...
    """
    def decorator(handler_class: THandler) -> THandler:
        _query_handlers[query_type] = handler_class
        return handler_class

    return decorator


def command_handler(command_type: Type[Command]) -> Callable[[THandler], THandler]:
    """Mark a class as the handler for ``command_type``."""
    def decorator(handler_class: THandler) -> THandler:
        _command_handlers[command_type] = handler_class
        return handler_class

    return decorator


def _lookup(registry: Dict[type, type], message_type: type, kind: str) -> type:
    handler_class = registry.get(message_type)
    if handler_class is None:
        raise KeyError(f"No handler registered for {kind} type: {message_type.__name__}")
    return handler_class


def query_handler_class(query_type: type) -> Type[QueryHandler]:
    """
    Handler class registered for exactly ``query_type``.

    Raises:
        KeyError: If no handler was registered for it
    """
    return _lookup(_query_handlers, query_type, "query")


def command_handler_class(command_type: type) -> Type[CommandHandler]:
    """
    Handler class registered for exactly ``command_type``.

    Raises:
        KeyError: If no handler was registered for it
    """
    return _lookup(_command_handlers, command_type, "command")
