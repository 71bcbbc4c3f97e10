"""Shared configuration manager."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.SINGLETON,
    slug="config-manager",
    title="Configuration manager",
    summary="Modules read and write one shared configuration, so a change made by one is seen by all.",
    package=__name__,
)
