"""Video conversion toolkit."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.FACADE,
    slug="video-converter",
    title="Video converter",
    summary="Offer convert, filter and audio extraction as single calls over codecs, resizers, compressors and audio tools.",
    package=__name__,
)
