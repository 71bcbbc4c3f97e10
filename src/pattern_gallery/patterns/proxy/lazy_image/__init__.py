"""Image gallery that loads heavy images on first display."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.PROXY,
    slug="lazy-image",
    title="Lazy image loading",
    summary="An image proxy answers metadata at once and defers loading the real image until it is displayed.",
    package=__name__,
)
