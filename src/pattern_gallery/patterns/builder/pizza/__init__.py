"""Pizza ordering with many optional parts."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.BUILDER,
    slug="pizza",
    title="Pizza builder",
    summary="Replace a telescoping pizza constructor with a validated fluent builder and a director of house recipes.",
    package=__name__,
)
