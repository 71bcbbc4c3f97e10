"""Geometric shapes with an area."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.FACTORY,
    slug="shapes",
    title="Shape factory",
    summary="Create circles and rectangles from a type key instead of naming their classes.",
    package=__name__,
)
