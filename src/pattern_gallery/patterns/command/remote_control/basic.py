"""Remote control calling the TV directly."""
from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class TV:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.is_on = False

    def turn_on(self) -> None:
        self.is_on = True
        self.console.print("TV is ON")

    def turn_off(self) -> None:
        self.is_on = False
        self.console.print("TV is OFF")


class RemoteControl:
    def __init__(self, device: TV):
        self.device = device

    def turn_on(self) -> None:
        self.device.turn_on()

    def turn_off(self) -> None:
        self.device.turn_off()


def run(context: DemoContext) -> None:
    remote = RemoteControl(TV(context.console))
    remote.turn_on()
    remote.turn_off()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
