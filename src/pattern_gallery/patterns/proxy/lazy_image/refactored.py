"""Images behind a proxy that loads them on first display."""
from abc import ABC, abstractmethod
from typing import Dict, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns.proxy.lazy_image.heavy import IMAGE_DIMENSIONS, IMAGE_SIZE, HeavyImage


class Image(ABC):
    @abstractmethod
    def display(self) -> None: ...

    @abstractmethod
    def get_metadata(self) -> Dict[str, str]: ...


class RealImage(HeavyImage, Image):
    pass


class ImageProxy(Image):
    def __init__(self, filename: str, console: ConsolePort):
        self.filename = filename
        self.console = console
        self._image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._image is not None

    def display(self) -> None:
        if self._image is None:
            self.console.print(f"Proxy: first access to {self.filename}, loading now...")
            self._image = RealImage(self.filename, self.console)
        self._image.display()

    def get_metadata(self) -> Dict[str, str]:
        self.console.print(f"Proxy: reading metadata for {self.filename} without loading the image.")
        return {"filename": self.filename, "size": IMAGE_SIZE, "dimensions": IMAGE_DIMENSIONS}


def run(context: DemoContext) -> None:
    console = context.console
    console.print("Starting the application...")
    images = [ImageProxy(name, console) for name in ("holidays.jpg", "family.jpg", "work.jpg")]
    console.print("Application ready! (much faster)")

    holidays = images[0]
    metadata = holidays.get_metadata()
    console.print(f"Metadata: {metadata['filename']}, {metadata['size']}, {metadata['dimensions']}")
    holidays.display()

    unloaded = sum(1 for image in images if not image.is_loaded)
    console.print(f"{unloaded} images were never loaded.")
    console.print("Displaying the image again:")
    holidays.display()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
