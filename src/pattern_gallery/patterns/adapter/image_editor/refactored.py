"""
Image editor working through format adapters.

Each adapter turns a format-specific library into the editor's
:class:`Image` model; :class:`ImageAdapterFactory` picks one by extension.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns.adapter.image_editor.legacy import GifProcessor, JpegProcessor


@dataclass
class Image:
    """Image model the editor works with."""
    filename: str
    format: str
    width: int
    height: int
    data: str


def _extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


class ImageAdapter(ABC):
    def __init__(self, console: ConsolePort):
        self.console = console

    @abstractmethod
    def load_image(self, filename: str) -> Optional[Image]:
        """Load ``filename``, or return ``None`` if it is not this adapter's format."""

    @abstractmethod
    def save_image(self, image: Image, filename: str) -> bool:
        """Save ``image``, adding the format's extension when missing."""

    @abstractmethod
    def get_supported_formats(self) -> List[str]: ...


class PngAdapter(ImageAdapter):
    def __init__(self, console: ConsolePort):
        super().__init__(console)
        self.console.print("PNG adapter initialized")

    def load_image(self, filename: str) -> Optional[Image]:
        if _extension(filename) != "png":
            self.console.error("Not a PNG file")
            return None
        self.console.print(f"Loading PNG file: {filename}")
        return Image(filename, "PNG", 1024, 768, f"Simulated data of image {filename}")

    def save_image(self, image: Image, filename: str) -> bool:
        new_filename = filename if _extension(filename) == "png" else f"{filename}.png"
        self.console.print(f"Saving image as PNG: {new_filename}")
        return True

    def get_supported_formats(self) -> List[str]:
        return ["PNG"]


class JpegAdapter(ImageAdapter):
    """Adapts :class:`JpegProcessor`."""

    def __init__(self, console: ConsolePort):
        super().__init__(console)
        self.processor = JpegProcessor(console)
        self.console.print("JPEG adapter initialized")

    def load_image(self, filename: str) -> Optional[Image]:
        if _extension(filename) not in ("jpg", "jpeg"):
            self.console.error("Not a JPEG file")
            return None
        jpeg_image = self.processor.load_jpeg_image(filename)
        return Image(jpeg_image["jpeg_filename"], "JPEG", jpeg_image["width"],
                     jpeg_image["height"], jpeg_image["jpeg_data"])

    def save_image(self, image: Image, filename: str) -> bool:
        jpeg_image = {
            "jpeg_filename": image.filename,
            "jpeg_data": image.data,
            "width": image.width,
            "height": image.height,
            "resolution": "72dpi",
        }
        return self.processor.save_as_jpeg(jpeg_image, self.ensure_jpeg_extension(filename))

    def get_supported_formats(self) -> List[str]:
        return ["JPG", "JPEG"]

    @staticmethod
    def ensure_jpeg_extension(filename: str) -> str:
        if _extension(filename) in ("jpg", "jpeg"):
            return filename
        return f"{filename}.jpg"


class GifAdapter(ImageAdapter):
    """Adapts :class:`GifProcessor`."""

    def __init__(self, console: ConsolePort):
        super().__init__(console)
        self.processor = GifProcessor(console)
        self.console.print("GIF adapter initialized")

    def load_image(self, filename: str) -> Optional[Image]:
        if _extension(filename) != "gif":
            self.console.error("Not a GIF file")
            return None
        gif_image = self.processor.read_gif_file(filename)
        metadata = self.processor.extract_gif_metadata(gif_image)
        return Image(gif_image["name"], "GIF", metadata["width"], metadata["height"],
                     gif_image["gif_data"])

    def save_image(self, image: Image, filename: str) -> bool:
        new_filename = filename if _extension(filename) == "gif" else f"{filename}.gif"
        # Static image: a single frame, no animation
        gif_image = {
            "name": image.filename,
            "gif_data": image.data,
            "frame_count": 1,
            "animation_speed": "0ms",
            "dimensions": {"x": image.width, "y": image.height},
        }
        return self.processor.write_gif(gif_image, new_filename)["success"]

    def get_supported_formats(self) -> List[str]:
        return ["GIF"]


class ImageAdapterFactory:
    """Selects the adapter for a file name."""

    @staticmethod
    def get_adapter(filename: str, console: ConsolePort) -> Optional[ImageAdapter]:
        extension = _extension(filename)
        if extension == "png":
            return PngAdapter(console)
        if extension in ("jpg", "jpeg"):
            return JpegAdapter(console)
        if extension == "gif":
            return GifAdapter(console)
        console.error(f"Unsupported format: {extension}")
        return None

    @staticmethod
    def get_all_adapters(console: ConsolePort) -> List[ImageAdapter]:
        return [PngAdapter(console), JpegAdapter(console), GifAdapter(console)]


class ImageEditor:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.name = "Premium image editor"
        self.console.print(f"{self.name} initialized")

    def open_file(self, filename: str, adapter: ImageAdapter) -> Optional[Image]:
        self.console.print(f"Trying to open file {filename}")
        return adapter.load_image(filename)

    def edit_image(self, image: Optional[Image]) -> None:
        if not image:
            self.console.error("Cannot edit an invalid image")
            return
        self.console.print(f"Editing image {image.filename} ({image.width}x{image.height})")
        self.console.print("Available operations: crop, resize, apply filters...")

    def save_file(self, image: Optional[Image], new_filename: str, adapter: ImageAdapter) -> bool:
        if not image:
            self.console.error("Cannot save an invalid image")
            return False
        return adapter.save_image(image, new_filename)

    def display_supported_formats(self, adapters: List[ImageAdapter]) -> List[str]:
        formats = [fmt for adapter in adapters for fmt in adapter.get_supported_formats()]
        self.console.print(f"Supported formats: {', '.join(formats)}")
        return formats


def open_and_edit_image(editor: ImageEditor, filename: str) -> bool:
    """Open, edit and save ``filename`` with whichever adapter fits it."""
    adapter = ImageAdapterFactory.get_adapter(filename, editor.console)
    if adapter is None:
        return False
    image = editor.open_file(filename, adapter)
    if image is None:
        return False
    editor.edit_image(image)
    return editor.save_file(image, filename.replace(".", "_edited.", 1), adapter)


def run(context: DemoContext) -> None:
    console = context.console
    console.print("=== WITH THE ADAPTER PATTERN ===")
    editor = ImageEditor(console)
    editor.display_supported_formats(ImageAdapterFactory.get_all_adapters(console))

    for filename, target in (("image1.png", "image1_edited.png"),
                             ("photo.jpeg", "photo_modified"),
                             ("animation.gif", "animation_modified.gif")):
        console.print("")
        console.print(f"--- Opening {filename} ---")
        adapter = ImageAdapterFactory.get_adapter(filename, console)
        image = editor.open_file(filename, adapter)
        editor.edit_image(image)
        editor.save_file(image, target, adapter)

    console.print("")
    console.print("=== SIMPLIFIED USAGE WITH THE FACTORY ===")
    for filename in ("landscape.png", "portrait.jpg", "banner.gif", "scan.bmp"):
        open_and_edit_image(editor, filename)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
