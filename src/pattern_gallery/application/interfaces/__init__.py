"""Application interfaces."""
from .command_query import Command, CommandHandler, Query, QueryHandler

__all__ = ["Command", "CommandHandler", "Query", "QueryHandler"]
