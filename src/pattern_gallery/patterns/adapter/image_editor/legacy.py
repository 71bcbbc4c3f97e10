"""Third-party image processors the editor cannot call directly."""
from typing import Any, Dict

from pattern_gallery.domain.base.ports import ConsolePort


class JpegProcessor:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.console.print("JPEG processor initialized")

    def load_jpeg_image(self, filename: str) -> Dict[str, Any]:
        self.console.print(f"Loading JPEG image: {filename}")
        return {
            "jpeg_filename": filename,
            "jpeg_data": f"JPEG data of {filename}",
            "width": 800,
            "height": 600,
            "resolution": "72dpi",
        }

    def get_jpeg_info(self, jpeg_image: Dict[str, Any]) -> None:
        self.console.print("JPEG information:")
        self.console.print(f"- File name: {jpeg_image['jpeg_filename']}")
        self.console.print(f"- Dimensions: {jpeg_image['width']}x{jpeg_image['height']}")
        self.console.print(f"- Resolution: {jpeg_image['resolution']}")

    def save_as_jpeg(self, jpeg_image: Dict[str, Any], new_filename: str) -> bool:
        self.console.print(f"Saving JPEG image as {new_filename}")
        return True


class GifProcessor:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.console.print("GIF processor initialized")

    def read_gif_file(self, filepath: str) -> Dict[str, Any]:
        self.console.print(f"Reading GIF file: {filepath}")
        return {
            "name": filepath,
            "gif_data": f"GIF data of {filepath}",
            "frame_count": 10,
            "animation_speed": "500ms",
            "dimensions": {"x": 500, "y": 400},
        }

    def extract_gif_metadata(self, gif_file: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "frames": gif_file["frame_count"],
            "speed": gif_file["animation_speed"],
            "width": gif_file["dimensions"]["x"],
            "height": gif_file["dimensions"]["y"],
        }

    def write_gif(self, gif_file: Dict[str, Any], destination_path: str) -> Dict[str, Any]:
        self.console.print(f"Writing GIF to {destination_path}")
        return {"success": True, "path": destination_path}
