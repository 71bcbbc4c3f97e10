"""Social network notification system."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.OBSERVER,
    slug="social-network",
    title="Social network notifications",
    summary="Users observe each other for posts, likes and follows while a central system logs every event.",
    package=__name__,
)
