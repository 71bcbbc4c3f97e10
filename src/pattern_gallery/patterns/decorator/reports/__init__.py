"""Reports with stackable post-processing."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.DECORATOR,
    slug="reports",
    title="Report generation",
    summary="Stack compression, encryption, timestamps and signatures on any report format at run time.",
    package=__name__,
)
