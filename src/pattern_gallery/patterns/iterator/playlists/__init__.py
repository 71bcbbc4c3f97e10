"""Playlists stored in different data structures."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.ITERATOR,
    slug="playlists",
    title="Playlists",
    summary="Walk list, set and map backed playlists with one display function through a shared iterator interface.",
    package=__name__,
)
