"""
Social network notifications with observers.

A :class:`User` is observable (its followers subscribe to it) and an
observer (it receives events from the users it follows). A
:class:`NotificationSystem` subscribes to every user and keeps an event
log for statistics.
"""
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

Clock = Callable[[], datetime]


class EventType(str, Enum):
    POST_CREATED = "POST_CREATED"
    POST_LIKED = "POST_LIKED"
    NEW_FOLLOWER = "NEW_FOLLOWER"


@dataclass
class NotificationEvent:
    type: EventType
    data: Dict[str, Any]
    timestamp: datetime


@dataclass
class Post:
    id: int
    author: str
    content: str
    timestamp: datetime
    likes: int = 0


@dataclass
class Notification:
    sender: str
    message: str
    timestamp: datetime
    read: bool = False


@dataclass
class EventLog:
    user: str
    event_type: EventType
    timestamp: datetime
    data: Dict[str, Any] = field(default_factory=dict)


class Observer(ABC):
    @abstractmethod
    def update(self, subject: "Observable", event: NotificationEvent) -> None: ...


class Observable:
    def __init__(self) -> None:
        self.observers: List[Observer] = []

    def add_observer(self, observer: Observer) -> None:
        if observer not in self.observers:
            self.observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        if observer in self.observers:
            self.observers.remove(observer)

    def notify_observers(self, event: NotificationEvent) -> None:
        for observer in list(self.observers):
            observer.update(self, event)


class User(Observable, Observer):
    def __init__(self, name: str, console: ConsolePort, clock: Clock = datetime.now):
        super().__init__()
        self.name = name
        self.console = console
        self.clock = clock
        self.posts: List[Post] = []
        self.notifications: List[Notification] = []

    def _event(self, event_type: EventType, data: Dict[str, Any]) -> NotificationEvent:
        return NotificationEvent(event_type, data, self.clock())

    def update(self, subject: Observable, event: NotificationEvent) -> None:
        if isinstance(subject, User):
            self.receive_notification(subject, event)

    def create_post(self, content: str) -> Post:
        post = Post(id=len(self.posts), author=self.name, content=content, timestamp=self.clock())
        self.posts.append(post)
        self.console.print(f'{self.name} posted: "{content}"')
        self.notify_observers(self._event(EventType.POST_CREATED, {"post_id": post.id, "content": content}))
        return post

    def like_post(self, user: "User", post_index: int) -> bool:
        """Like one of ``user``'s posts. Out-of-range indexes are ignored."""
        if not 0 <= post_index < len(user.posts):
            return False
        post = user.posts[post_index]
        post.likes += 1
        self.console.print(f"{self.name} liked {user.name}'s post")
        user.update(self, self._event(EventType.POST_LIKED, {"post_id": post_index, "content": post.content}))
        return True

    def follow(self, user: "User") -> None:
        user.add_observer(self)
        self.console.print(f"{self.name} now follows {user.name}")
        user.update(self, self._event(EventType.NEW_FOLLOWER, {}))

    def unfollow(self, user: "User") -> None:
        user.remove_observer(self)
        self.console.print(f"{self.name} no longer follows {user.name}")

    def receive_notification(self, from_user: "User", event: NotificationEvent) -> None:
        if event.type == EventType.POST_CREATED:
            message = f'{from_user.name} posted: "{event.data["content"]}"'
        elif event.type == EventType.POST_LIKED:
            message = f'{from_user.name} liked your post: "{event.data["content"]}"'
        elif event.type == EventType.NEW_FOLLOWER:
            message = f"{from_user.name} started following you"
        else:
            message = f"Notification from {from_user.name}"
        self.notifications.append(Notification(from_user.name, message, event.timestamp))
        self.console.print(f"[NOTIFICATION for {self.name}] {message}")

    def get_notifications(self, only_unread: bool = False) -> List[Notification]:
        if only_unread:
            return [n for n in self.notifications if not n.read]
        return list(self.notifications)

    def mark_notifications_as_read(self) -> None:
        for notification in self.notifications:
            notification.read = True
        self.console.print(f"{self.name} marked all notifications as read")


class NotificationSystem(Observer):
    """Central observer that logs the events users publish."""

    def __init__(self, console: ConsolePort):
        self.console = console
        self.logs: List[EventLog] = []

    def update(self, subject: Observable, event: NotificationEvent) -> None:
        if isinstance(subject, User):
            self.logs.append(EventLog(subject.name, event.type, event.timestamp, dict(event.data)))
            self.console.print(f"[SYSTEM] {event.type.value} event recorded for {subject.name}")

    def get_logs(self) -> List[EventLog]:
        return list(self.logs)

    def get_statistics(self) -> Dict[str, Any]:
        return {
            "total_events": len(self.logs),
            "events_by_type": dict(Counter(log.event_type.value for log in self.logs)),
            "events_by_user": dict(Counter(log.user for log in self.logs)),
        }


def run(context: DemoContext) -> None:
    console = context.console
    alice, bob, charlie = (User(name, console, context.clock) for name in ("Alice", "Bob", "Charlie"))

    system = NotificationSystem(console)
    for user in (alice, bob, charlie):
        user.add_observer(system)

    bob.follow(alice)
    charlie.follow(alice)
    alice.create_post("Hello world!")
    bob.like_post(alice, 0)
    bob.like_post(alice, 5)
    charlie.create_post("I'm learning Python!")
    alice.follow(charlie)
    charlie.create_post("Design patterns are fascinating!")
    charlie.unfollow(alice)
    alice.create_post("Charlie will not see this one")

    console.print("Alice's notifications:")
    for notification in alice.get_notifications():
        console.print(f"- {notification.message}")
    alice.mark_notifications_as_read()
    console.print(f"Unread: {len(alice.get_notifications(only_unread=True))}")

    stats = system.get_statistics()
    console.print("System statistics:")
    console.print(f"Total events: {stats['total_events']}")
    console.print(f"Events by type: {stats['events_by_type']}")
    console.print(f"Events by user: {stats['events_by_user']}")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
