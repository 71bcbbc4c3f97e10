"""
Chat application coordinated by a :class:`ChatRoom` mediator.

Users only know the mediator. Delivery, blocking and themed rooms are
handled centrally.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class ChatMediator(ABC):
    @abstractmethod
    def register(self, user: "User") -> "User": ...

    @abstractmethod
    def send_message(self, message: str, sender: "User", receiver: Optional["User"] = None) -> None: ...

    @abstractmethod
    def block_user(self, user: "User", user_to_block: "User") -> None: ...


class User:
    def __init__(self, name: str, mediator: ChatMediator, console: ConsolePort):
        self.name = name
        self.mediator = mediator
        self.console = console
        self.chat_log: List[str] = []
        self.blocked_users: Set[str] = set()

    def send(self, message: str, receiver: Optional["User"] = None) -> None:
        self.mediator.send_message(message, self, receiver)

    def receive(self, message: str, sender: "User") -> bool:
        """Record a message. Returns ``False`` when the sender is blocked."""
        if sender.name in self.blocked_users:
            self.console.print(f"[{self.name} ignored a message from {sender.name} (blocked)]")
            return False
        entry = f"{sender.name}: {message}"
        self.chat_log.append(entry)
        self.console.print(f"[{self.name} received] {entry}")
        return True

    def block(self, user: "User") -> None:
        self.mediator.block_user(self, user)

    def add_to_blocked_list(self, user: "User") -> None:
        self.blocked_users.add(user.name)
        self.console.print(f"{self.name} blocked {user.name}.")

    def display_chat_log(self) -> None:
        self.console.print(f"Chat log of {self.name}:")
        for entry in self.chat_log:
            self.console.print(f"- {entry}")


@dataclass
class RoomMessage:
    sender: str
    message: str


@dataclass
class ThemedRoom:
    name: str
    participants: Set[str] = field(default_factory=set)
    messages: List[RoomMessage] = field(default_factory=list)


class ChatRoom(ChatMediator):
    def __init__(self, console: ConsolePort):
        self.console = console
        self.users: Dict[str, User] = {}
        self.rooms: Dict[str, ThemedRoom] = {}

    def register(self, user: User) -> User:
        self.users[user.name] = user
        self.console.print(f"{user.name} joined the chat!")
        return user

    def send_message(self, message: str, sender: User, receiver: Optional[User] = None) -> None:
        if receiver is not None:
            target = self.users.get(receiver.name)
            if target is None:
                self.console.print(f"User {receiver.name} not found.")
                return
            self.console.print(f"{sender.name} sends to {receiver.name}: {message}")
            target.receive(message, sender)
            return

        self.console.print(f"{sender.name} sends to everyone: {message}")
        for user in self.users.values():
            if user.name != sender.name:
                user.receive(message, sender)

    def block_user(self, user: User, user_to_block: User) -> None:
        user.add_to_blocked_list(user_to_block)

    def create_chat_room(self, room_name: str) -> ThemedRoom:
        room = ThemedRoom(room_name)
        self.rooms[room_name] = room
        self.console.print(f'New chat room "{room_name}" created.')
        return room

    def join_chat_room(self, user: User, room_name: str) -> bool:
        room = self.rooms.get(room_name)
        if room is None:
            self.console.error(f'Room "{room_name}" does not exist.')
            return False
        room.participants.add(user.name)
        self.console.print(f'{user.name} joined room "{room_name}".')
        return True

    def send_to_room(self, message: str, sender: User, room_name: str) -> bool:
        room = self.rooms.get(room_name)
        if room is None:
            self.console.error(f'Room "{room_name}" does not exist.')
            return False
        if sender.name not in room.participants:
            self.console.error(f'{sender.name} is not a member of room "{room_name}".')
            return False

        self.console.print(f'{sender.name} sends to room "{room_name}": {message}')
        room.messages.append(RoomMessage(sender.name, message))
        for user in self.users.values():
            if user.name != sender.name and user.name in room.participants:
                user.receive(f"[{room_name}] {message}", sender)
        return True

    def get_room_history(self, room_name: str) -> List[RoomMessage]:
        room = self.rooms.get(room_name)
        return list(room.messages) if room else []

    def display_room_history(self, room_name: str) -> None:
        if room_name not in self.rooms:
            self.console.error(f'Room "{room_name}" does not exist.')
            return
        self.console.print(f'History of room "{room_name}":')
        for entry in self.get_room_history(room_name):
            self.console.print(f"- {entry.sender}: {entry.message}")


def run(context: DemoContext) -> None:
    console = context.console
    chat = ChatRoom(console)
    alice, bob, charlie, dave = (chat.register(User(name, chat, console))
                                 for name in ("Alice", "Bob", "Charlie", "Dave"))

    alice.send("Hi Bob, how are you?", bob)
    bob.send("I'm fine, thanks Alice!", alice)
    alice.send("Hello everyone!")

    charlie.block(bob)
    bob.send("Charlie, why are you ignoring me?", charlie)

    chat.create_chat_room("TechTalk")
    for user in (alice, bob, dave):
        chat.join_chat_room(user, "TechTalk")
    chat.join_chat_room(charlie, "Gardening")

    chat.send_to_room("Who knows JavaScript?", alice, "TechTalk")
    chat.send_to_room("Me, I'm a front-end developer!", bob, "TechTalk")
    chat.send_to_room("I prefer Python myself.", dave, "TechTalk")
    chat.send_to_room("I can help too!", charlie, "TechTalk")

    for user in (alice, bob, charlie, dave):
        user.display_chat_log()
    chat.display_room_history("TechTalk")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
