"""Home cinema with six components."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.FACADE,
    slug="home-cinema",
    title="Home cinema",
    summary="Hide the start-up and shut-down sequence of six home cinema components behind one facade.",
    package=__name__,
)
