"""Restaurant order manager."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.COMMAND,
    slug="order-manager",
    title="Order manager",
    summary="Move place, track and cancel operations out of the manager into command objects.",
    package=__name__,
)
