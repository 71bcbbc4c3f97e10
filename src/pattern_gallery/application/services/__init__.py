"""Application services."""
from .example_runner import ExampleRunner

__all__ = ["ExampleRunner"]
