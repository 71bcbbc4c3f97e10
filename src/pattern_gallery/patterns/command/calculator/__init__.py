"""Calculator with an operation history."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.COMMAND,
    slug="calculator",
    title="Undoable calculator",
    summary="Wrap arithmetic operations in commands so the calculator can undo them.",
    package=__name__,
)
