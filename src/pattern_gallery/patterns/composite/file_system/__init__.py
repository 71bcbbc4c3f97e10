"""Files, directories and shortcuts."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.COMPOSITE,
    slug="file-system",
    title="File system tree",
    summary="Handle files, directories and shortcuts through one component interface instead of type checks.",
    package=__name__,
)
