"""Remote control for a TV."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.COMMAND,
    slug="remote-control",
    title="TV remote control",
    summary="Decouple a remote from the TV it drives and undo the last button press.",
    package=__name__,
)
