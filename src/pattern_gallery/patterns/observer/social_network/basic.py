"""Users notify followers and post authors by hand."""
from typing import Any, Dict, List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class User:
    def __init__(self, name: str, console: ConsolePort):
        self.name = name
        self.console = console
        self.posts: List[Dict[str, Any]] = []
        self.followers: List["User"] = []

    def create_post(self, content: str) -> Dict[str, Any]:
        post = {"author": self.name, "content": content, "likes": 0}
        self.posts.append(post)
        self.console.print(f'{self.name} posted: "{content}"')
        for follower in self.followers:
            follower.receive_notification(self.name, "new post", content)
        return post

    def like_post(self, user: "User", post_index: int) -> None:
        if 0 <= post_index < len(user.posts):
            user.posts[post_index]["likes"] += 1
            self.console.print(f"{self.name} liked {user.name}'s post")
            user.receive_notification(self.name, "like", user.posts[post_index]["content"])

    def follow(self, user: "User") -> None:
        if self not in user.followers:
            user.followers.append(self)
            self.console.print(f"{self.name} now follows {user.name}")
            user.receive_notification(self.name, "new follower", "")

    def receive_notification(self, from_user: str, kind: str, content: str) -> None:
        if kind == "new post":
            message = f'{from_user} posted: "{content}"'
        elif kind == "like":
            message = f'{from_user} liked your post: "{content}"'
        elif kind == "new follower":
            message = f"{from_user} started following you"
        else:
            message = f"Notification from {from_user}"
        self.console.print(f"[NOTIFICATION for {self.name}] {message}")


def run(context: DemoContext) -> None:
    console = context.console
    alice, bob, charlie = (User(name, console) for name in ("Alice", "Bob", "Charlie"))

    bob.follow(alice)
    charlie.follow(alice)
    alice.create_post("Hello world!")
    bob.like_post(alice, 0)
    charlie.create_post("I'm learning Python!")
    alice.follow(charlie)
    charlie.create_post("Design patterns are fascinating!")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
