"""Restaurant menu with categories and discounted set menus."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.COMPOSITE,
    slug="restaurant-menu",
    title="Restaurant menu",
    summary="Nest dishes, categories and discounted set menus to any depth behind a single menu component.",
    package=__name__,
)
