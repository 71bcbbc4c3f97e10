"""Coffee with optional extras."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.DECORATOR,
    slug="coffee",
    title="Coffee extras",
    summary="Price coffee extras by wrapping a base coffee instead of writing one subclass per combination.",
    package=__name__,
)
