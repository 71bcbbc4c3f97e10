"""Drawing app with undo."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.COMMAND,
    slug="drawing-app",
    title="Drawing app",
    summary="Record each drawing action as a command so it can be undone.",
    package=__name__,
)
