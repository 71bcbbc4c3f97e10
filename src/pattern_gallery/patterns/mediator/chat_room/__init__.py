"""Chat application with private, broadcast and themed-room messages."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.MEDIATOR,
    slug="chat-room",
    title="Chat room",
    summary="Let users talk, broadcast, block and join themed rooms through a chat room instead of holding references to each other.",
    package=__name__,
)
