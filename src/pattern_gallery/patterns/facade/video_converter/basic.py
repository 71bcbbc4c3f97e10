"""The client runs every conversion step against the toolkit directly."""
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns.facade.video_converter.subsystems import (
    AudioProcessor,
    VideoCodec,
    VideoCompressor,
    VideoFile,
    VideoFilter,
    VideoMetadata,
    VideoResizer,
)


def run(context: DemoContext) -> None:
    console = context.console

    console.print("=== Converting source.avi to mp4 by hand ===")
    source = VideoFile("source.avi", console)
    source_codec = VideoCodec.create_codec(source.format, console)
    target_codec = VideoCodec.create_codec("mp4", console)
    data = source_codec.decode(source.data)
    data = VideoResizer(console).resize(data, 1280, 720)
    data = VideoFilter(console).apply_filter(data, "enhancement")
    data = VideoCompressor(console).compress(data, 7)
    audio = AudioProcessor(console)
    track = audio.normalize_volume(audio.extract_audio(data))
    data = audio.mix_audio(data, track)
    data = target_codec.encode(data)
    data = VideoMetadata(console).add_metadata(data, {"title": "My converted video"})
    target = VideoFile("source_converted.mp4", console)
    target.data = data
    target.save("source_converted.mp4")

    console.print("=== Applying a sepia filter by hand ===")
    video = VideoFile("vacation.mp4", console)
    codec = VideoCodec.create_codec(video.format, console)
    video.data = codec.encode(VideoFilter(console).apply_filter(codec.decode(video.data), "sepia"))
    video.save("vacation_sepia.mp4")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
