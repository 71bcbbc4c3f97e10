"""
Video conversion behind :class:`VideoConverterFacade`.

Each facade operation reports errors on the console and re-raises them
to the caller.
"""
import re
from typing import Any, Dict, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns.facade.video_converter.subsystems import (
    AudioProcessor,
    UnsupportedFormatError,
    VideoCodec,
    VideoCompressor,
    VideoFile,
    VideoFilter,
    VideoMetadata,
    VideoResizer,
)

DEFAULT_OPTIONS: Dict[str, Any] = {
    "width": 1920,
    "height": 1080,
    "compression_level": 8,
    "apply_filter": None,
    "normalize_audio": True,
    "metadata": {},
}


class VideoConverterFacade:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.resizer = VideoResizer(console)
        self.filter = VideoFilter(console)
        self.compressor = VideoCompressor(console)
        self.audio = AudioProcessor(console)
        self.metadata = VideoMetadata(console)
        self.console.print("Video converter initialized")

    def convert_video(self, source_filename: str, target_format: str,
                      options: Optional[Dict[str, Any]] = None) -> str:
        """
        Convert a video to ``target_format``.

        Returns:
            The output file name, ``<base>_converted.<ext>``

        Raises:
            UnsupportedFormatError: If the source or target format has no codec
        """
        self.console.print(f"Starting conversion of {source_filename} to {target_format}")
        settings = {**DEFAULT_OPTIONS, **(options or {})}
        try:
            source = VideoFile(source_filename, self.console)
            target_extension = target_format.lower()
            target_filename = self._output_filename(source_filename, target_extension)

            source_codec = VideoCodec.create_codec(source.format, self.console)
            target_codec = VideoCodec.create_codec(target_extension, self.console)

            data = source_codec.decode(source.data)
            if settings["width"] and settings["height"]:
                data = self.resizer.resize(data, settings["width"], settings["height"])
            if settings["apply_filter"]:
                data = self.filter.apply_filter(data, settings["apply_filter"])
            data = self.compressor.compress(data, settings["compression_level"])

            track = self.audio.extract_audio(data)
            if settings["normalize_audio"]:
                track = self.audio.normalize_volume(track)
            data = self.audio.mix_audio(data, track)

            data = target_codec.encode(data)
            if settings["metadata"]:
                data = self.metadata.add_metadata(data, settings["metadata"])

            target = VideoFile(target_filename, self.console)
            target.data = data
            target.save(target_filename)
        except UnsupportedFormatError as e:
            self.console.error(f"Conversion error: {e}")
            raise
        self.console.print(f"Conversion complete. File saved as: {target_filename}")
        return target_filename

    def apply_filter_to_video(self, filename: str, filter_type: str) -> str:
        self.console.print(f'Applying filter "{filter_type}" to {filename}')
        try:
            video = VideoFile(filename, self.console)
            codec = VideoCodec.create_codec(video.format, self.console)
            filtered = self.filter.apply_filter(codec.decode(video.data), filter_type)
            output_filename = self._filtered_filename(filename, filter_type)
            video.data = codec.encode(filtered)
            video.save(output_filename)
        except UnsupportedFormatError as e:
            self.console.error(f"Filter error: {e}")
            raise
        self.console.print(f"Filter applied. File saved as: {output_filename}")
        return output_filename

    def extract_audio_from_video(self, filename: str) -> str:
        """Extract and normalise the audio track. Returns the audio file name."""
        self.console.print(f"Extracting audio from {filename}")
        try:
            video = VideoFile(filename, self.console)
            codec = VideoCodec.create_codec(video.format, self.console)
            self.audio.normalize_volume(self.audio.extract_audio(codec.decode(video.data)))
        except UnsupportedFormatError as e:
            self.console.error(f"Audio extraction error: {e}")
            raise
        output_filename = re.sub(r"\.[^/.]+$", ".mp3", filename)
        self.console.print(f"Audio extracted. Audio file: {output_filename}")
        return output_filename

    @staticmethod
    def _output_filename(source_filename: str, target_extension: str) -> str:
        return f"{source_filename.split('.')[0]}_converted.{target_extension}"

    @staticmethod
    def _filtered_filename(filename: str, filter_type: str) -> str:
        base, _, extension = filename.rpartition(".")
        safe_filter = re.sub(r"\s+", "_", filter_type).lower()
        return f"{base}_{safe_filter}.{extension}"


def run(context: DemoContext) -> None:
    converter = VideoConverterFacade(context.console)
    converter.convert_video("source.avi", "mp4", {
        "width": 1280,
        "height": 720,
        "compression_level": 7,
        "apply_filter": "enhancement",
        "metadata": {"title": "My converted video", "author": "Gallery"},
    })
    converter.apply_filter_to_video("vacation.mp4", "warm sepia")
    converter.extract_audio_from_video("concert.mov")
    try:
        converter.convert_video("clip.webm", "mp4")
    except UnsupportedFormatError:
        context.console.print("webm files are not supported")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
