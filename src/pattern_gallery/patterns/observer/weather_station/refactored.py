"""
Weather stations publishing measurements to any number of observers.

Displays, the statistics board, the logger and the alert system all
implement :class:`Observer` and subscribe to the stations they follow.
"""
import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

Clock = Callable[[], datetime]

DEFAULT_ALERT_THRESHOLDS = {
    "high_temperature": 35,
    "low_temperature": -10,
    "high_wind_speed": 50,
    "low_pressure": 970,
}


@dataclass
class WeatherData:
    location: str
    timestamp: datetime
    temperature: float = 0
    humidity: float = 0
    pressure: float = 0
    wind_speed: float = 0
    wind_direction: str = "N"


@dataclass
class WeatherAlert:
    timestamp: datetime
    message: str
    type: str
    location: str


class Observer(ABC):
    @abstractmethod
    def update(self, data: WeatherData) -> None: ...


class Subject:
    def __init__(self) -> None:
        self.observers: List[Observer] = []

    def register_observer(self, observer: Observer) -> None:
        if observer not in self.observers:
            self.observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        if observer in self.observers:
            self.observers.remove(observer)

    def notify_observers(self) -> None:
        raise NotImplementedError


class WeatherStation(Subject):
    def __init__(self, location: str, console: ConsolePort, clock: Clock = datetime.now):
        super().__init__()
        self.location = location
        self.console = console
        self.clock = clock
        self.weather_data = WeatherData(location=location, timestamp=clock())

    def set_measurements(self, temperature: float, humidity: float, pressure: float,
                         wind_speed: float, wind_direction: str) -> None:
        self.weather_data = WeatherData(
            location=self.location,
            timestamp=self.clock(),
            temperature=temperature,
            humidity=humidity,
            pressure=pressure,
            wind_speed=wind_speed,
            wind_direction=wind_direction,
        )
        self.console.print(f"[Station {self.location}] New measurements: {temperature}°C, "
                           f"{humidity}% humidity, {pressure} hPa, wind {wind_speed} km/h "
                           f"direction {wind_direction}")
        self.notify_observers()

    def notify_observers(self) -> None:
        for observer in list(self.observers):
            observer.update(self.get_weather_data())

    def get_weather_data(self) -> WeatherData:
        return dataclasses.replace(self.weather_data)


class WeatherCenter:
    def __init__(self, name: str, console: ConsolePort):
        self.name = name
        self.console = console
        self.stations: List[WeatherStation] = []

    def add_station(self, station: WeatherStation) -> None:
        self.stations.append(station)
        self.console.print(f"Station {station.location} added to center {self.name}")

    def remove_station(self, location: str) -> bool:
        station = self.get_station(location)
        if station is None:
            return False
        self.stations.remove(station)
        self.console.print(f"Station {location} removed from center {self.name}")
        return True

    def get_station(self, location: str) -> Optional[WeatherStation]:
        return next((s for s in self.stations if s.location == location), None)

    def get_all_stations(self) -> List[WeatherStation]:
        return list(self.stations)


class SubscribingObserver(Observer):
    """Observer that announces its own (un)subscriptions."""

    label = "Observer"

    def __init__(self, console: ConsolePort):
        self.console = console

    def subscribe(self, station: WeatherStation) -> None:
        station.register_observer(self)
        self.console.print(f"[{self.label}] Subscribed to station {station.location}")

    def unsubscribe(self, station: WeatherStation) -> None:
        station.remove_observer(self)
        self.console.print(f"[{self.label}] Unsubscribed from station {station.location}")


class CurrentConditionsDisplay(SubscribingObserver):
    def __init__(self, name: str, console: ConsolePort):
        super().__init__(console)
        self.name = name
        self.label = f"Display {name}"
        self.current: Optional[WeatherData] = None

    def update(self, data: WeatherData) -> None:
        self.current = data
        self.display()

    def display(self) -> None:
        data = self.current
        if data is None:
            self.console.print(f"[{self.label}] No data yet")
            return
        self.console.print(f"[{self.label}] {data.location} at {data.timestamp:%H:%M:%S}:")
        self.console.print(f"[{self.label}] Current conditions: {data.temperature}°C, {data.humidity}% humidity")
        self.console.print(f"[{self.label}] Pressure: {data.pressure} hPa, "
                           f"Wind: {data.wind_speed} km/h {data.wind_direction}")


class StatisticsDisplay(SubscribingObserver):
    def __init__(self, name: str, console: ConsolePort):
        super().__init__(console)
        self.name = name
        self.label = f"Statistics {name}"
        self.min_temperature: Dict[str, float] = {}
        self.max_temperature: Dict[str, float] = {}
        self.temperature_sum: Dict[str, float] = {}
        self.reading_count: Dict[str, int] = {}

    def update(self, data: WeatherData) -> None:
        location, temperature = data.location, data.temperature
        if location not in self.reading_count:
            self.min_temperature[location] = temperature
            self.max_temperature[location] = temperature
            self.temperature_sum[location] = 0
            self.reading_count[location] = 0
        self.min_temperature[location] = min(self.min_temperature[location], temperature)
        self.max_temperature[location] = max(self.max_temperature[location], temperature)
        self.temperature_sum[location] += temperature
        self.reading_count[location] += 1
        self.display()

    def display(self) -> None:
        self.console.print(f"[{self.label}]")
        for location, count in self.reading_count.items():
            self.console.print(f"  {location}:")
            self.console.print(f"  - Temperature min/max/avg: {self.min_temperature[location]}°C / "
                               f"{self.max_temperature[location]}°C / "
                               f"{self.get_average_temperature(location):.1f}°C")
            self.console.print(f"  - Readings: {count}")

    def get_average_temperature(self, location: str) -> Optional[float]:
        count = self.reading_count.get(location, 0)
        if count == 0:
            return None
        return self.temperature_sum[location] / count


class WeatherLogger(SubscribingObserver):
    label = "Logger"

    def __init__(self, console: ConsolePort):
        super().__init__(console)
        self.log_entries: List[WeatherData] = []

    def update(self, data: WeatherData) -> None:
        self.log_entries.append(data)
        self.console.print(f"[Logger] Recording data for {data.location} at {data.timestamp:%H:%M:%S}")

    def get_log_count(self) -> int:
        return len(self.log_entries)

    def get_last_entry(self) -> Optional[WeatherData]:
        return self.log_entries[-1] if self.log_entries else None

    def get_average_temperature(self, location: str) -> Optional[float]:
        temperatures = [entry.temperature for entry in self.log_entries if entry.location == location]
        if not temperatures:
            return None
        return sum(temperatures) / len(temperatures)


class WeatherAlertSystem(SubscribingObserver):
    def __init__(self, name: str, console: ConsolePort, clock: Clock = datetime.now):
        super().__init__(console)
        self.name = name
        self.label = f"Alert system {name}"
        self.clock = clock
        self.alerts_triggered: List[WeatherAlert] = []
        self.alert_thresholds: Dict[str, float] = dict(DEFAULT_ALERT_THRESHOLDS)

    def update(self, data: WeatherData) -> None:
        thresholds = self.alert_thresholds
        if data.temperature >= thresholds["high_temperature"] or data.temperature <= thresholds["low_temperature"]:
            self.temperature_alert(data.location, data.temperature)
        if data.wind_speed >= thresholds["high_wind_speed"]:
            self.trigger_alert(f"STRONG WIND ALERT in {data.location}: {data.wind_speed} km/h "
                               f"direction {data.wind_direction}", "wind", data.location)
        if data.pressure <= thresholds["low_pressure"]:
            self.trigger_alert(f"LOW PRESSURE ALERT in {data.location}: {data.pressure} hPa",
                               "pressure", data.location)

    def temperature_alert(self, location: str, temperature: float) -> None:
        kind = "extreme heat" if temperature > self.alert_thresholds["high_temperature"] else "extreme cold"
        self.trigger_alert(f"{kind.upper()} ALERT in {location}: {temperature}°C", "temperature", location)

    def trigger_alert(self, message: str, alert_type: str, location: str) -> WeatherAlert:
        alert = WeatherAlert(timestamp=self.clock(), message=message, type=alert_type, location=location)
        self.alerts_triggered.append(alert)
        self.console.print(f"[{self.label}] {message}")
        return alert

    def set_alert_threshold(self, key: str, value: float) -> bool:
        if key not in self.alert_thresholds:
            return False
        self.alert_thresholds[key] = value
        self.console.print(f"[{self.label}] Threshold '{key}' set to {value}")
        return True

    def get_alert_count(self) -> int:
        return len(self.alerts_triggered)

    def get_alerts_by_type(self, alert_type: str) -> List[WeatherAlert]:
        return [alert for alert in self.alerts_triggered if alert.type == alert_type]


def run(context: DemoContext) -> None:
    console = context.console
    center = WeatherCenter("National Weather Center", console)
    paris = WeatherStation("Paris", console, context.clock)
    lyon = WeatherStation("Lyon", console, context.clock)
    center.add_station(paris)
    center.add_station(lyon)

    town_hall = CurrentConditionsDisplay("Town hall", console)
    airport = CurrentConditionsDisplay("Airport", console)
    downtown = CurrentConditionsDisplay("Downtown", console)
    stats = StatisticsDisplay("National", console)
    weather_logger = WeatherLogger(console)
    alerts = WeatherAlertSystem("National alert", console, context.clock)

    town_hall.subscribe(paris)
    downtown.subscribe(paris)
    airport.subscribe(lyon)
    for observer in (stats, weather_logger, alerts):
        observer.subscribe(paris)
        observer.subscribe(lyon)

    console.print("--- Day 1: normal conditions ---")
    paris.set_measurements(22.5, 65, 1013, 10, "SW")
    lyon.set_measurements(24, 60, 1012, 5, "E")

    alerts.set_alert_threshold("high_temperature", 30)

    console.print("--- Day 2: heatwave in Paris ---")
    paris.set_measurements(32.2, 45, 1010, 8, "S")
    lyon.set_measurements(27, 55, 1009, 10, "SE")

    console.print("--- Day 3: storm in Lyon ---")
    paris.set_measurements(25, 70, 1000, 20, "W")
    lyon.set_measurements(22, 80, 965, 65, "SW")

    stats.display()
    console.print(f"Total log entries: {weather_logger.get_log_count()}")
    for location in ("Paris", "Lyon"):
        console.print(f"Average temperature in {location}: "
                      f"{weather_logger.get_average_temperature(location):.1f}°C")
    console.print(f"Total alerts: {alerts.get_alert_count()}")
    for alert_type in ("temperature", "wind", "pressure"):
        console.print(f"{alert_type.capitalize()} alerts: {len(alerts.get_alerts_by_type(alert_type))}")

    console.print("--- Airport display unsubscribes ---")
    airport.unsubscribe(lyon)
    lyon.set_measurements(21, 82, 990, 50, "SW")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
