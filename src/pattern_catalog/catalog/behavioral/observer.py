"""Observer: weather displays subscribed to a measurement subject."""

from abc import ABC, abstractmethod
from typing import List, Optional


class Observer(ABC):
    @abstractmethod
    def update(self, temperature: float, humidity: float, pressure: float) -> None: ...


class DisplayElement(ABC):
    @abstractmethod
    def display(self) -> str: ...


class WeatherData:
    """Subject holding the latest measurements."""

    def __init__(self):
        self.observers: List[Observer] = []
        self.temperature = 0.0
        self.humidity = 0.0
        self.pressure = 0.0

    def register_observer(self, observer: Observer) -> None:
        if observer not in self.observers:
            self.observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        if observer in self.observers:
            self.observers.remove(observer)

    def notify_observers(self) -> None:
        for observer in list(self.observers):
            observer.update(self.temperature, self.humidity, self.pressure)

    def set_measurements(
        self, temperature: float, humidity: float, pressure: float
    ) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.pressure = pressure
        self.notify_observers()


class CurrentConditionsDisplay(Observer, DisplayElement):
    def __init__(self):
        self.temperature = 0.0
        self.humidity = 0.0

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.display()

    def display(self) -> str:
        line = (
            f"Current conditions: {float(self.temperature)}°F and "
            f"{float(self.humidity)}% humidity"
        )
        print(line)
        return line


class StatisticsDisplay(Observer, DisplayElement):
    def __init__(self):
        self.readings: List[float] = []

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.readings.append(temperature)
        self.display()

    def display(self) -> str:
        if not self.readings:
            line = "Avg/Max/Min temperature = no readings yet"
            print(line)
            return line

        avg = sum(self.readings) / len(self.readings)
        line = (
            f"Avg/Max/Min temperature = {avg:.1f}/{max(self.readings):.1f}/"
            f"{min(self.readings):.1f}"
        )
        print(line)
        return line


class ForecastDisplay(Observer, DisplayElement):
    def __init__(self):
        self.current_pressure: Optional[float] = None
        self.last_pressure: Optional[float] = None

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.last_pressure = self.current_pressure
        self.current_pressure = pressure
        self.display()

    def forecast(self) -> str:
        if self.last_pressure is None or self.current_pressure == self.last_pressure:
            return "More of the same"
        if self.current_pressure > self.last_pressure:
            return "Improving weather on the way!"
        return "Watch out for cooler, rainy weather"

    def display(self) -> str:
        line = f"Forecast: {self.forecast()}"
        print(line)
        return line


def main() -> None:
    weather_data = WeatherData()
    for display in (CurrentConditionsDisplay(), StatisticsDisplay(), ForecastDisplay()):
        weather_data.register_observer(display)

    readings = ((80, 65, 30.4), (82, 70, 29.2), (78, 90, 29.2))
    for temperature, humidity, pressure in readings:
        weather_data.set_measurements(temperature, humidity, pressure)
        print("-----------------------------------------------")
