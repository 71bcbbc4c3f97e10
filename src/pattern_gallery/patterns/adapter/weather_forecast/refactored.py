"""
Weather app fed through an adapter.

``EuropeanWeatherAdapter`` presents the metric service behind the
``WeatherForecast`` interface the app expects, so conversions live in one
place and other sources only need their own adapter.
"""
from abc import ABC, abstractmethod

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

HPA_TO_INHG = 0.02953


class MeteoEuropeForecast:
    """Existing European forecast service (unchanged)."""

    def __init__(self, city: str):
        self.city = city

    def get_temperature_celsius(self) -> float:
        return 22

    def get_humidity_percentage(self) -> float:
        return 60

    def get_pressure_hectopascal(self) -> float:
        return 1013


class WeatherForecast(ABC):
    """Interface the application is written against."""

    @abstractmethod
    def get_temperature_fahrenheit(self) -> float: ...

    @abstractmethod
    def get_humidity(self) -> float: ...

    @abstractmethod
    def get_pressure_inches_of_mercury(self) -> float: ...


class EuropeanWeatherAdapter(WeatherForecast):
    """Adapts :class:`MeteoEuropeForecast` to :class:`WeatherForecast`."""

    def __init__(self, european_forecast: MeteoEuropeForecast):
        self.european_forecast = european_forecast

    def get_temperature_fahrenheit(self) -> float:
        celsius = self.european_forecast.get_temperature_celsius()
        return celsius * 9 / 5 + 32

    def get_humidity(self) -> float:
        return self.european_forecast.get_humidity_percentage()

    def get_pressure_inches_of_mercury(self) -> float:
        return self.european_forecast.get_pressure_hectopascal() * HPA_TO_INHG


class WeatherApp:
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

    def display_weather(self, forecast: WeatherForecast) -> None:
        """Display a full report from any :class:`WeatherForecast`."""
        temp = forecast.get_temperature_fahrenheit()
        self.display_temperature(temp)
        self.display_weather_status(temp, forecast.get_humidity())
        self.console.print(f"Atmospheric pressure: {forecast.get_pressure_inches_of_mercury():.2f} inHg")


def run(context: DemoContext) -> None:
    adapter = EuropeanWeatherAdapter(MeteoEuropeForecast("Paris"))
    WeatherApp(context.console).display_weather(adapter)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
