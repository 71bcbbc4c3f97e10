"""Query handlers for browsing the example catalog."""
from typing import List

from pattern_gallery.application.decorators import query_handler
from pattern_gallery.application.dto import (
    ExampleDTO,
    GetExampleQuery,
    ListExamplesQuery,
    ListPatternsQuery,
    PatternDTO,
)
from pattern_gallery.application.interfaces import QueryHandler
from pattern_gallery.infrastructure.registry.example_catalog import ExampleCatalog


@query_handler(ListPatternsQuery)
class ListPatternsHandler(QueryHandler[ListPatternsQuery, List[PatternDTO]]):
    """Handler for listing patterns."""

    def __init__(self, catalog: ExampleCatalog):
        self._catalog = catalog

    def handle(self, query: ListPatternsQuery) -> List[PatternDTO]:
        return [
            PatternDTO(
                name=pattern.value,
                category=pattern.category.value,
                example_count=len(examples),
                examples=[descriptor.slug for descriptor in examples],
            )
            for pattern, examples in self._catalog.list_patterns().items()
        ]


@query_handler(ListExamplesQuery)
class ListExamplesHandler(QueryHandler[ListExamplesQuery, List[ExampleDTO]]):
    """Handler for listing examples."""

    def __init__(self, catalog: ExampleCatalog):
        self._catalog = catalog

    def handle(self, query: ListExamplesQuery) -> List[ExampleDTO]:
        return [ExampleDTO.from_descriptor(d) for d in self._catalog.list_examples(query.pattern)]


@query_handler(GetExampleQuery)
class GetExampleHandler(QueryHandler[GetExampleQuery, ExampleDTO]):
    """Handler for retrieving a single example."""

    def __init__(self, catalog: ExampleCatalog):
        self._catalog = catalog

    def handle(self, query: GetExampleQuery) -> ExampleDTO:
        return ExampleDTO.from_descriptor(self._catalog.get_example(query.pattern, query.slug))
