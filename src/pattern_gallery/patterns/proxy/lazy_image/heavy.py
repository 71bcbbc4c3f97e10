"""The expensive image both variants display."""
from typing import Dict

from pattern_gallery.domain.base.ports import ConsolePort

IMAGE_SIZE = "10MB"
IMAGE_DIMENSIONS = "1920x1080"


class HeavyImage:
    """Loads its pixels in the constructor."""

    def __init__(self, filename: str, console: ConsolePort):
        self.filename = filename
        self.console = console
        self.pixels = b""
        self.load_image()

    def load_image(self) -> None:
        self.console.print(f"Loading image {self.filename}...")
        self.pixels = bytes(1024)
        self.console.print(f"Image {self.filename} loaded successfully!")

    def display(self) -> None:
        self.console.print(f"Displaying image: {self.filename}")

    def get_metadata(self) -> Dict[str, str]:
        return {"filename": self.filename, "size": IMAGE_SIZE, "dimensions": IMAGE_DIMENSIONS}
