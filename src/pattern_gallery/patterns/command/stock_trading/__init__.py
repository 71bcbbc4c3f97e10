"""Stock trading with reversible orders."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.COMMAND,
    slug="stock-trading",
    title="Stock trading",
    summary="Represent buy and sell orders as commands that can be undone.",
    package=__name__,
)
