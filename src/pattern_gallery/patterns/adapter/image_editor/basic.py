"""Image editor that only understands PNG; other formats are handled by hand."""
from typing import Any, Dict, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns.adapter.image_editor.legacy import GifProcessor, JpegProcessor


class ImageEditor:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.name = "Premium image editor"
        self.supported_formats = ["PNG"]
        self.console.print(f"{self.name} initialized. Supported formats: {', '.join(self.supported_formats)}")

    def open_file(self, filename: str) -> Optional[Dict[str, Any]]:
        extension = filename.rsplit(".", 1)[-1].upper()
        if extension in self.supported_formats:
            self.console.print(f"Opening file {filename}")
            return {
                "filename": filename,
                "format": extension,
                "content": f"Simulated content of image {filename}",
            }
        self.console.error(
            f"Unsupported format: {extension}. The editor only supports {', '.join(self.supported_formats)}")
        return None

    def edit_image(self, image: Optional[Dict[str, Any]]) -> None:
        if not image:
            self.console.error("Cannot edit an invalid image")
            return
        self.console.print(f"Editing image {image['filename']}")
        self.console.print("Available operations: crop, resize, apply filters...")

    def save_file(self, image: Optional[Dict[str, Any]], new_filename: str) -> bool:
        if not image:
            self.console.error("Cannot save an invalid image")
            return False
        self.console.print(f"Saving image as {new_filename}")
        return True


def run(context: DemoContext) -> None:
    console = context.console
    console.print("=== WITHOUT THE ADAPTER PATTERN ===")
    editor = ImageEditor(console)

    for filename in ("image1.png", "photo.jpeg", "animation.gif"):
        editor.edit_image(editor.open_file(filename))

    console.print("")
    console.print("=== DRIVING EACH PROCESSOR BY HAND ===")
    jpeg_processor = JpegProcessor(console)
    jpeg_processor.get_jpeg_info(jpeg_processor.load_jpeg_image("photo.jpeg"))

    gif_processor = GifProcessor(console)
    metadata = gif_processor.extract_gif_metadata(gif_processor.read_gif_file("animation.gif"))
    console.print(f"GIF metadata: {metadata}")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
