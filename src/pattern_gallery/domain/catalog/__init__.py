"""Catalog domain: patterns, examples and run outcomes."""
from .context import DemoContext
from .descriptor import ExampleDescriptor
from .exceptions import (
    ExampleNotFoundError,
    InvalidExampleModuleError,
    PatternNotFoundError,
    VariantNotAvailableError,
)
from .run_result import RunResult
from .value_objects import PATTERN_CATEGORIES, PatternCategory, PatternName, Variant

__all__ = [
    "DemoContext",
    "ExampleDescriptor",
    "RunResult",
    "PatternName",
    "PatternCategory",
    "PATTERN_CATEGORIES",
    "Variant",
    "PatternNotFoundError",
    "ExampleNotFoundError",
    "VariantNotAvailableError",
    "InvalidExampleModuleError",
]
