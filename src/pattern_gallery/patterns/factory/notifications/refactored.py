"""Notification channels created by :class:`NotificationFactory`."""
from abc import ABC, abstractmethod
from typing import Dict, Type

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns.factory.errors import UnknownProductTypeError


class NotificationChannel(ABC):
    def __init__(self, console: ConsolePort):
        self.console = console

    @abstractmethod
    def send(self, message: str) -> None: ...


class EmailNotification(NotificationChannel):
    def send(self, message: str) -> None:
        self.console.print(f"Sending email: {message}")


class SMSNotification(NotificationChannel):
    def send(self, message: str) -> None:
        self.console.print(f"Sending SMS: {message}")


class PushNotification(NotificationChannel):
    def send(self, message: str) -> None:
        self.console.print(f"Sending push notification: {message}")


class NotificationFactory:
    CHANNELS: Dict[str, Type[NotificationChannel]] = {
        "email": EmailNotification,
        "sms": SMSNotification,
        "push": PushNotification,
    }

    def __init__(self, console: ConsolePort):
        self.console = console

    def create_notification_channel(self, channel_type: str) -> NotificationChannel:
        channel_class = self.CHANNELS.get(channel_type)
        if channel_class is None:
            raise UnknownProductTypeError("notification channel", channel_type, self.CHANNELS)
        return channel_class(self.console)


def run(context: DemoContext) -> None:
    factory = NotificationFactory(context.console)
    factory.create_notification_channel("email").send("Hello, this is an email notification")
    factory.create_notification_channel("sms").send("Hello, this is an SMS notification")
    factory.create_notification_channel("push").send("Hello, this is a push notification")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
