"""Payment methods."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.FACTORY,
    slug="payment-methods",
    title="Payment method factory",
    summary="Create credit card, PayPal and Bitcoin payment methods from a type key.",
    package=__name__,
)
