"""CQRS handler interfaces."""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pattern_gallery.application.dto.base import BaseCommand, BaseQuery

Query = BaseQuery
Command = BaseCommand

TQuery = TypeVar('TQuery', bound=BaseQuery)
TCommand = TypeVar('TCommand', bound=BaseCommand)
TResult = TypeVar('TResult')


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Handles one query type and returns its result."""

    @abstractmethod
    def handle(self, query: TQuery) -> TResult:
        """Handle the query."""


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """Handles one command type."""

    @abstractmethod
    def handle(self, command: TCommand) -> TResult:
        """Handle the command."""
