"""Users keep their own contact lists and message each other directly."""
from typing import List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class User:
    def __init__(self, name: str, console: ConsolePort):
        self.name = name
        self.console = console
        self.chat_log: List[str] = []
        self.contacts: List["User"] = []

    def send_message(self, message: str, receiver: "User") -> None:
        self.console.print(f"{self.name} sends to {receiver.name}: {message}")
        receiver.receive_message(message, self)

    def receive_message(self, message: str, sender: "User") -> None:
        entry = f"{sender.name}: {message}"
        self.chat_log.append(entry)
        self.console.print(f"[{self.name} received] {entry}")

    def add_contact(self, user: "User") -> None:
        self.contacts.append(user)
        self.console.print(f"{self.name} added {user.name} to their contacts.")

    def send_group_message(self, message: str) -> None:
        self.console.print(f"{self.name} sends to everyone: {message}")
        for contact in self.contacts:
            contact.receive_message(message, self)

    def block_user(self, user: "User") -> None:
        # The blocked user still holds a reference and can keep writing
        if user in self.contacts:
            self.contacts.remove(user)
            self.console.print(f"{self.name} blocked {user.name}.")

    def display_chat_log(self) -> None:
        self.console.print(f"Chat log of {self.name}:")
        for entry in self.chat_log:
            self.console.print(f"- {entry}")


def run(context: DemoContext) -> None:
    console = context.console
    alice, bob, charlie, dave = (User(name, console) for name in ("Alice", "Bob", "Charlie", "Dave"))

    for contact in (bob, charlie, dave):
        alice.add_contact(contact)
    bob.add_contact(alice)
    bob.add_contact(charlie)
    charlie.add_contact(alice)
    dave.add_contact(alice)

    alice.send_message("Hi Bob, how are you?", bob)
    bob.send_message("I'm fine, thanks Alice!", alice)
    alice.send_group_message("Hello everyone!")

    charlie.block_user(bob)
    bob.send_message("Charlie, why are you ignoring me?", charlie)

    for user in (alice, bob, charlie, dave):
        user.display_chat_log()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
