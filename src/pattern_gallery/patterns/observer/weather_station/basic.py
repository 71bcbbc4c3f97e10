"""Weather station calling each display by hand."""
from typing import Dict, List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class PhoneDisplay:
    def __init__(self, console: ConsolePort):
        self.console = console

    def show(self, location: str, temperature: float, humidity: float) -> None:
        self.console.print(f"[Phone] {location}: {temperature}°C, {humidity}% humidity")


class WebsiteDisplay:
    def __init__(self, console: ConsolePort):
        self.console = console

    def refresh(self, location: str, temperature: float, humidity: float, pressure: float) -> None:
        self.console.print(f"[Website] {location}: {temperature}°C, {humidity}%, {pressure} hPa")


class StatisticsBoard:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.readings: Dict[str, List[float]] = {}

    def record(self, location: str, temperature: float) -> None:
        readings = self.readings.setdefault(location, [])
        readings.append(temperature)
        average = sum(readings) / len(readings)
        self.console.print(f"[Statistics] {location}: min {min(readings)}°C, max {max(readings)}°C, "
                           f"avg {average:.1f}°C")


class WeatherStation:
    """Knows every display type and the method each one expects."""

    def __init__(self, location: str, console: ConsolePort):
        self.location = location
        self.console = console
        self.phone = PhoneDisplay(console)
        self.website = WebsiteDisplay(console)
        self.statistics = StatisticsBoard(console)

    def set_measurements(self, temperature: float, humidity: float, pressure: float,
                         wind_speed: float) -> None:
        self.console.print(f"[Station {self.location}] New measurements: {temperature}°C, "
                           f"{humidity}% humidity, {pressure} hPa, wind {wind_speed} km/h")
        self.phone.show(self.location, temperature, humidity)
        self.website.refresh(self.location, temperature, humidity, pressure)
        self.statistics.record(self.location, temperature)
        if temperature >= 35:
            self.console.print(f"EXTREME HEAT ALERT in {self.location}: {temperature}°C")
        if wind_speed >= 50:
            self.console.print(f"STRONG WIND ALERT in {self.location}: {wind_speed} km/h")


def run(context: DemoContext) -> None:
    paris = WeatherStation("Paris", context.console)
    lyon = WeatherStation("Lyon", context.console)
    paris.set_measurements(22.5, 65, 1013, 10)
    lyon.set_measurements(24, 60, 1012, 5)
    paris.set_measurements(36.2, 45, 1010, 8)
    lyon.set_measurements(22, 80, 985, 65)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
