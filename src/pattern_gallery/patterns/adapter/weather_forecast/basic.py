"""Weather app fed by a metric API, converting by hand at every call site."""
from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class MeteoEuropeForecast:
    """Existing European forecast service (metric units)."""

    def __init__(self, city: str):
        self.city = city

    def get_temperature_celsius(self) -> float:
        return 22

    def get_humidity_percentage(self) -> float:
        return 60

    def get_pressure_hectopascal(self) -> float:
        return 1013


class WeatherApp:
    """Application written against Fahrenheit temperatures."""

    def __init__(self, console: ConsolePort):
        self.console = console
        self.min_acceptable_temp = 60
        self.max_acceptable_temp = 90

    def display_temperature(self, temp_fahrenheit: float) -> None:
        self.console.print(f"The current temperature is {temp_fahrenheit}°F")

    def is_temperature_in_range(self, temp_fahrenheit: float) -> bool:
        return self.min_acceptable_temp <= temp_fahrenheit <= self.max_acceptable_temp

    def display_weather_status(self, temp_fahrenheit: float, humidity: float) -> None:
        if self.is_temperature_in_range(temp_fahrenheit):
            self.console.print("The temperature is within the acceptable range.")
        else:
            self.console.print("Warning: temperature out of range!")
        self.console.print(f"Humidity: {humidity}%")


def run(context: DemoContext) -> None:
    meteo = MeteoEuropeForecast("Paris")
    app = WeatherApp(context.console)

    # Manual conversion, repeated wherever the European API is used
    celsius = meteo.get_temperature_celsius()
    fahrenheit = celsius * 9 / 5 + 32

    app.display_temperature(fahrenheit)
    app.display_weather_status(fahrenheit, meteo.get_humidity_percentage())


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
