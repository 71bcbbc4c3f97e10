"""Catalog query handlers."""
from .handlers import GetExampleHandler, ListExamplesHandler, ListPatternsHandler

__all__ = ["ListPatternsHandler", "ListExamplesHandler", "GetExampleHandler"]
