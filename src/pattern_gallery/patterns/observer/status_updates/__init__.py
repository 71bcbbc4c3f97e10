"""User status updates pushed to followers."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.OBSERVER,
    slug="status-updates",
    title="Status updates",
    summary="Followers subscribe to a user's status changes instead of being called directly.",
    package=__name__,
)
