"""European weather API consumed by an app that expects imperial units."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.ADAPTER,
    slug="weather-forecast",
    title="Weather forecast",
    summary="Convert a Celsius/hectopascal forecast API for an app that works in Fahrenheit and inches of mercury.",
    package=__name__,
)
