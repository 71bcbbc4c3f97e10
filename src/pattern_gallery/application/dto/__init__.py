"""Application DTOs."""
from .base import BaseCommand, BaseDTO, BaseQuery, BaseResponse
from .commands import CompareExampleCommand, RunAllExamplesCommand, RunExampleCommand
from .queries import GetExampleQuery, ListExamplesQuery, ListPatternsQuery
from .responses import ComparisonDTO, ExampleDTO, PatternDTO, RunResultDTO, RunSummaryResponse

__all__ = [
    "BaseDTO",
    "BaseCommand",
    "BaseQuery",
    "BaseResponse",
    "RunExampleCommand",
    "CompareExampleCommand",
    "RunAllExamplesCommand",
    "ListPatternsQuery",
    "ListExamplesQuery",
    "GetExampleQuery",
    "PatternDTO",
    "ExampleDTO",
    "RunResultDTO",
    "ComparisonDTO",
    "RunSummaryResponse",
]
