"""Weather stations feeding displays and alerts."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.OBSERVER,
    slug="weather-station",
    title="Weather stations",
    summary="Displays, loggers and alert systems subscribe to weather stations and receive each new measurement.",
    package=__name__,
)
