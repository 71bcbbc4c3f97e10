"""Directory that has to know the concrete type of each child."""
from typing import List, Union

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class File:
    def __init__(self, name: str, size: int):
        self.name = name
        self.size = size  # KB

    def get_size(self) -> int:
        return self.size

    def display(self, console: ConsolePort, indent: int = 0) -> None:
        console.print(f"{'  ' * indent}File: {self.name} ({self.size} KB)")


class Directory:
    def __init__(self, name: str):
        self.name = name
        self.files: List[Union[File, "Directory"]] = []

    def add(self, item: Union[File, "Directory"]) -> None:
        self.files.append(item)

    def get_size(self) -> int:
        total = 0
        for item in self.files:
            total += item.get_size()
        return total

    def display(self, console: ConsolePort, indent: int = 0) -> None:
        console.print(f"{'  ' * indent}Directory: {self.name} ({self.get_size()} KB)")
        for item in self.files:
            if isinstance(item, File):
                item.display(console, indent + 1)
            elif isinstance(item, Directory):
                item.display(console, indent + 1)


def run(context: DemoContext) -> None:
    music = Directory("Music")
    music.add(File("song1.mp3", 3000))
    music.add(File("song2.mp3", 3500))

    docs = Directory("Documents")
    docs.add(File("document.txt", 100))
    docs.add(File("data.csv", 500))

    root = Directory("Root")
    root.add(File("image.jpg", 2000))
    root.add(music)
    root.add(docs)
    root.display(context.console)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
