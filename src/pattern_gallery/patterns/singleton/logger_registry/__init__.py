"""Per-module logger registry."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.SINGLETON,
    slug="logger-registry",
    title="Logger registry",
    summary="One logger per module name, with global level and formatting applied to every active logger.",
    package=__name__,
)
