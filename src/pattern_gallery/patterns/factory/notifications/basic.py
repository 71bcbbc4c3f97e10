"""Notification channels constructed directly by the caller."""
from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class EmailNotification:
    def __init__(self, console: ConsolePort):
        self.console = console

    def send(self, message: str) -> None:
        self.console.print(f"Sending email: {message}")


class SMSNotification:
    def __init__(self, console: ConsolePort):
        self.console = console

    def send(self, message: str) -> None:
        self.console.print(f"Sending SMS: {message}")


class PushNotification:
    def __init__(self, console: ConsolePort):
        self.console = console

    def send(self, message: str) -> None:
        self.console.print(f"Sending push notification: {message}")


def run(context: DemoContext) -> None:
    EmailNotification(context.console).send("Hello, this is an email notification")
    SMSNotification(context.console).send("Hello, this is an SMS notification")
    PushNotification(context.console).send("Hello, this is a push notification")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
