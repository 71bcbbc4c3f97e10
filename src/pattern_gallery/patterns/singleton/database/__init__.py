"""Single database connection."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.SINGLETON,
    slug="database",
    title="Database connection",
    summary="Services share one database connection instead of opening their own.",
    package=__name__,
)
