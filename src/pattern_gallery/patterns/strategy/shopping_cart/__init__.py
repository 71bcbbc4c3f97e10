"""Shopping cart checkout with validated payment strategies."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.STRATEGY,
    slug="shopping-cart",
    title="Shopping cart checkout",
    summary="A cart with discounts checks out through card, PayPal, bank transfer or cryptocurrency strategies picked by a factory.",
    package=__name__,
)
