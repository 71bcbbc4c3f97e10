"""Payment processor with swappable payment strategies."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.STRATEGY,
    slug="payment-processor",
    title="Payment processor",
    summary="A payment processor delegates to a credit card, PayPal or bank transfer strategy that can change at runtime.",
    package=__name__,
)
