"""PNG-only image editor extended to JPEG and GIF through adapters."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.ADAPTER,
    slug="image-editor",
    title="Image editor formats",
    summary="Wrap legacy JPEG and GIF processors so a PNG editor can open, edit and save them.",
    package=__name__,
)
