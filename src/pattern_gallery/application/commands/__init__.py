"""Run command handlers."""
from .handlers import CompareExampleHandler, RunAllExamplesHandler, RunExampleHandler

__all__ = ["RunExampleHandler", "CompareExampleHandler", "RunAllExamplesHandler"]
