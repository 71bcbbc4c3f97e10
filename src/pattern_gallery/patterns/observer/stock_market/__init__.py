"""Stock market with investors and analysts."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.OBSERVER,
    slug="stock-market",
    title="Stock market",
    summary="Investors and analysts subscribe to market events by type and react to price moves on their own.",
    package=__name__,
)
