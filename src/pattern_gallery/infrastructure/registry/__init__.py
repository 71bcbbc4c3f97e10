"""Registries."""
from .example_catalog import ExampleCatalog, get_example_catalog, parse_pattern

__all__ = ["ExampleCatalog", "get_example_catalog", "parse_pattern"]
