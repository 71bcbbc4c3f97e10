"""Catalog queries."""
from typing import Optional

from pattern_gallery.application.dto.base import BaseQuery
from pattern_gallery.domain.catalog import PatternName


class ListPatternsQuery(BaseQuery):
    """List every pattern with its category and example count."""


class ListExamplesQuery(BaseQuery):
    """List examples, optionally restricted to one pattern."""
    pattern: Optional[PatternName] = None


class GetExampleQuery(BaseQuery):
    """Fetch the descriptor of a single example."""
    pattern: PatternName
    slug: str
