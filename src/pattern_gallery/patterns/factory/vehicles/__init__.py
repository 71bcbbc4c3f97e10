"""Vehicles that can be driven."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.FACTORY,
    slug="vehicles",
    title="Vehicle factory",
    summary="Create cars and motorcycles from a type key.",
    package=__name__,
)
