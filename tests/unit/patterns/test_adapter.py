"""Tests for the adapter examples."""
import pytest

from pattern_gallery.patterns.adapter.image_editor.refactored import (
    GifAdapter,
    ImageAdapterFactory,
    ImageEditor,
    JpegAdapter,
    PngAdapter,
    open_and_edit_image,
)
from pattern_gallery.patterns.adapter.weather_forecast.refactored import (
    EuropeanWeatherAdapter,
    MeteoEuropeForecast,
    WeatherApp,
)


class TestImageAdapters:
    """Test format adapters over the legacy processors."""

    @pytest.mark.parametrize("adapter_class, filename, fmt, size", [
        (PngAdapter, "image1.png", "PNG", (1024, 768)),
        (JpegAdapter, "photo.JPEG", "JPEG", (800, 600)),
        (GifAdapter, "animation.gif", "GIF", (500, 400)),
    ])
    def test_load_produces_common_image(self, console, adapter_class, filename, fmt, size):
        image = adapter_class(console).load_image(filename)

        assert image.format == fmt
        assert (image.width, image.height) == size
        assert image.filename == filename

    def test_wrong_extension_is_rejected(self, console):
        assert PngAdapter(console).load_image("photo.jpg") is None
        assert "Not a PNG file" in console.errors

    def test_save_adds_missing_extension(self, console):
        adapter = PngAdapter(console)
        image = adapter.load_image("image1.png")

        assert adapter.save_image(image, "copy") is True
        assert console.contains("Saving image as PNG: copy.png")

    def test_jpeg_extension_helper(self):
        assert JpegAdapter.ensure_jpeg_extension("photo.jpeg") == "photo.jpeg"
        assert JpegAdapter.ensure_jpeg_extension("photo_modified") == "photo_modified.jpg"

    def test_gif_save_writes_single_frame(self, console):
        adapter = GifAdapter(console)
        image = adapter.load_image("animation.gif")

        assert adapter.save_image(image, "animation_modified") is True
        assert console.contains("Writing GIF to animation_modified.gif")


class TestImageEditor:
    """Test the editor working through the factory."""

    def test_factory_picks_adapter_by_extension(self, console):
        assert isinstance(ImageAdapterFactory.get_adapter("a.PNG", console), PngAdapter)
        assert isinstance(ImageAdapterFactory.get_adapter("a.jpg", console), JpegAdapter)
        assert isinstance(ImageAdapterFactory.get_adapter("a.gif", console), GifAdapter)

    def test_factory_rejects_unknown_format(self, console):
        assert ImageAdapterFactory.get_adapter("scan.bmp", console) is None
        assert "Unsupported format: bmp" in console.errors

    def test_supported_formats(self, console):
        editor = ImageEditor(console)

        formats = editor.display_supported_formats(ImageAdapterFactory.get_all_adapters(console))

        assert formats == ["PNG", "JPG", "JPEG", "GIF"]

    def test_open_and_edit(self, console):
        editor = ImageEditor(console)

        assert open_and_edit_image(editor, "portrait.jpg") is True
        assert console.contains("Saving JPEG image as portrait_edited.jpg")
        assert open_and_edit_image(editor, "scan.bmp") is False

    def test_invalid_image_handling(self, console):
        editor = ImageEditor(console)

        editor.edit_image(None)

        assert editor.save_file(None, "x.png", PngAdapter(console)) is False
        assert "Cannot edit an invalid image" in console.errors


class TestWeatherAdapter:
    """Test metric to imperial adaptation."""

    def setup_method(self):
        self.adapter = EuropeanWeatherAdapter(MeteoEuropeForecast("Paris"))

    def test_conversions(self):
        assert self.adapter.get_temperature_fahrenheit() == pytest.approx(71.6)
        assert self.adapter.get_humidity() == 60
        assert self.adapter.get_pressure_inches_of_mercury() == pytest.approx(29.91, abs=0.01)

    def test_app_reads_any_forecast(self, console):
        WeatherApp(console).display_weather(self.adapter)

        assert console.contains("The temperature is within the acceptable range.")
        assert console.contains("Atmospheric pressure: 29.91 inHg")

    @pytest.mark.parametrize("temperature, expected", [(59.9, False), (60, True), (90, True), (90.1, False)])
    def test_acceptable_range(self, console, temperature, expected):
        assert WeatherApp(console).is_temperature_in_range(temperature) is expected
