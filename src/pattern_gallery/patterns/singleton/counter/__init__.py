"""Shared counter."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.SINGLETON,
    slug="counter",
    title="Shared counter",
    summary="A counter that refuses a second instance, so every caller increments the same count.",
    package=__name__,
)
