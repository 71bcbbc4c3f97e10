"""Video processing toolkit used by both variants."""
from typing import Any, Dict

from pattern_gallery.domain.base.exceptions import ValidationError
from pattern_gallery.domain.base.ports import ConsolePort


class UnsupportedFormatError(ValidationError):
    """Raised when no codec handles a file extension."""

    def __init__(self, video_format: str):
        super().__init__(f"Unsupported format: {video_format}", field="format",
                         details={"format": video_format})
        self.format = video_format


def file_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower()


class VideoFile:
    def __init__(self, filename: str, console: ConsolePort):
        self.console = console
        self.filename = filename
        self.format = file_extension(filename)
        self.data = self.load_file(filename)

    def load_file(self, filename: str) -> str:
        self.console.print(f"Loading video file: {filename}")
        return f"Simulated content of {filename}"

    def save(self, filename: str) -> bool:
        self.console.print(f"Saving video file as: {filename}")
        return True


class VideoCodec:
    label = ""

    def __init__(self, console: ConsolePort):
        self.console = console
        self.console.print(f"Initializing {self.label} codec")

    def decode(self, video_data: str) -> str:
        self.console.print(f"Decoding {self.label} video data")
        return f"Decoded {self.label} data: {video_data}"

    def encode(self, video_data: str) -> str:
        self.console.print(f"Encoding video data as {self.label}")
        return f"{self.label} encoded data: {video_data}"

    @staticmethod
    def create_codec(video_format: str, console: ConsolePort) -> "VideoCodec":
        """
        Build the codec for an extension.

        Raises:
            UnsupportedFormatError: For anything but mp4, avi, mov and mkv
        """
        codec_class = CODECS.get(video_format)
        if codec_class is None:
            raise UnsupportedFormatError(video_format)
        return codec_class(console)


class MPEG4Codec(VideoCodec):
    label = "MPEG-4"


class AVICodec(VideoCodec):
    label = "AVI"


class MOVCodec(VideoCodec):
    label = "MOV"


class MKVCodec(VideoCodec):
    label = "MKV"


CODECS = {"mp4": MPEG4Codec, "avi": AVICodec, "mov": MOVCodec, "mkv": MKVCodec}


class VideoFilter:
    def __init__(self, console: ConsolePort):
        self.console = console

    def apply_filter(self, video_data: str, filter_type: str) -> str:
        self.console.print(f"Applying filter: {filter_type}")
        return f"{video_data} (with {filter_type} filter)"


class VideoResizer:
    def __init__(self, console: ConsolePort):
        self.console = console

    def resize(self, video_data: str, width: int, height: int) -> str:
        self.console.print(f"Resizing video to {width}x{height}")
        return f"{video_data} (resized to {width}x{height})"


class VideoCompressor:
    def __init__(self, console: ConsolePort):
        self.console = console

    def compress(self, video_data: str, level: int) -> str:
        self.console.print(f"Compressing video at level: {level}")
        return f"{video_data} (compressed at level {level})"


class AudioProcessor:
    def __init__(self, console: ConsolePort):
        self.console = console

    def extract_audio(self, video_data: str) -> str:
        self.console.print("Extracting audio track")
        return f"Audio track extracted from: {video_data}"

    def mix_audio(self, video_data: str, audio_track: str) -> str:
        self.console.print(f"Mixing audio track: {audio_track}")
        return f"{video_data} (with mixed audio: {audio_track})"

    def normalize_volume(self, audio_data: str) -> str:
        self.console.print("Normalizing audio volume")
        return f"{audio_data} (normalized volume)"


class VideoMetadata:
    def __init__(self, console: ConsolePort):
        self.console = console

    def add_metadata(self, video_data: str, metadata: Dict[str, Any]) -> str:
        self.console.print(f"Adding metadata to the video: {metadata}")
        return f"{video_data} (with metadata)"
