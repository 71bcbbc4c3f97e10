"""Every image loads as soon as it is created."""
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns.proxy.lazy_image.heavy import HeavyImage


def run(context: DemoContext) -> None:
    console = context.console
    console.print("Starting the application...")
    holidays = HeavyImage("holidays.jpg", console)
    HeavyImage("family.jpg", console)
    HeavyImage("work.jpg", console)
    console.print("Application ready!")
    holidays.display()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
