"""Notification channels."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.FACTORY,
    slug="notifications",
    title="Notification channel factory",
    summary="Create email, SMS and push channels from a type key.",
    package=__name__,
)
