"""Car production line cloning configured prototypes."""
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName

EXAMPLE = ExampleDescriptor(
    pattern=PatternName.PROTOTYPE,
    slug="car-factory",
    title="Car factory",
    summary="Cars are cloned from registered prototypes and reconfigured, so costly set-up only reruns where options change.",
    package=__name__,
)
