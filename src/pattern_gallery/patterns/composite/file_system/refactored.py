"""
File system modelled as a composite.

Files, directories and shortcuts share :class:`FileSystemComponent`, so a
directory sizes and displays its children without knowing their types.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

INDENT = "  "


class FileSystemComponent(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def get_size(self) -> int:
        """Size in KB."""

    @abstractmethod
    def display(self, console: ConsolePort, indent: int = 0) -> None: ...

    def get_path(self, parent_path: str = "") -> str:
        return f"{parent_path}/{self.name}" if parent_path else self.name

    def find(self, name: str) -> Optional["FileSystemComponent"]:
        return self if self.name == name else None


class File(FileSystemComponent):
    def __init__(self, name: str, size: int):
        super().__init__(name)
        self.size = size

    def get_size(self) -> int:
        return self.size

    def display(self, console: ConsolePort, indent: int = 0) -> None:
        console.print(f"{INDENT * indent}File: {self.name} ({self.size} KB)")


class Directory(FileSystemComponent):
    def __init__(self, name: str):
        super().__init__(name)
        self.children: List[FileSystemComponent] = []

    def add(self, component: FileSystemComponent) -> "Directory":
        self.children.append(component)
        return self

    def remove(self, component: FileSystemComponent) -> "Directory":
        if component in self.children:
            self.children.remove(component)
        return self

    def get_size(self) -> int:
        return sum(child.get_size() for child in self.children)

    def display(self, console: ConsolePort, indent: int = 0) -> None:
        console.print(f"{INDENT * indent}Directory: {self.name} ({self.get_size()} KB)")
        for child in self.children:
            child.display(console, indent + 1)

    def find(self, name: str) -> Optional[FileSystemComponent]:
        """Depth-first search, starting with this directory itself."""
        if self.name == name:
            return self
        for child in self.children:
            found = child.find(name)
            if found is not None:
                return found
        return None


class Shortcut(FileSystemComponent):
    """Link to another component; occupies 1 KB itself."""

    def __init__(self, name: str, target: FileSystemComponent):
        super().__init__(name)
        self.target = target

    def get_size(self) -> int:
        return 1

    def get_target_size(self) -> int:
        return self.target.get_size()

    def display(self, console: ConsolePort, indent: int = 0) -> None:
        console.print(f"{INDENT * indent}Shortcut: {self.name} -> {self.target.name} ({self.get_size()} KB)")


def build_sample_tree() -> Directory:
    document = File("document.txt", 100)
    music = Directory("Music").add(File("song1.mp3", 3000)).add(File("song2.mp3", 3500))
    docs = Directory("Documents").add(document).add(File("data.csv", 500))
    return (Directory("Root")
            .add(File("image.jpg", 2000))
            .add(music)
            .add(docs)
            .add(Shortcut("doc-shortcut.lnk", document)))


def run(context: DemoContext) -> None:
    console = context.console
    root = build_sample_tree()

    console.print("File system structure:")
    root.display(console)
    console.print("")
    console.print(f"Total size: {root.get_size()} KB")

    found = root.find("Documents")
    if found is not None:
        console.print("")
        console.print(f"Found: {found.name}")
        console.print(f"Size: {found.get_size()} KB")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
