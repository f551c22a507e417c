"""Observer pattern: a weather station broadcasting to displays.

The station only knows the Observer interface. Displays register and
unregister themselves at runtime, and every registered display receives
each new reading in registration order.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from core.narration import fmt_reading, narrate

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Interfaces
# ---------------------------------------------------------------------------

class Observer(ABC):
    @abstractmethod
    def update(self, temperature: float, humidity: float) -> None:
        ...


class Subject(ABC):
    @abstractmethod
    def register_observer(self, observer: Observer) -> None:
        ...

    @abstractmethod
    def remove_observer(self, observer: Observer) -> None:
        ...

    @abstractmethod
    def notify_observers(self) -> None:
        ...


# ---------------------------------------------------------------------------
# Concrete subject
# ---------------------------------------------------------------------------

class WeatherStation(Subject):
    def __init__(self):
        self._observers: list[Observer] = []
        self.temperature = 0.0
        self.humidity = 0.0

    @property
    def observers(self) -> list[Observer]:
        return list(self._observers)

    def register_observer(self, observer: Observer) -> None:
        self._observers.append(observer)
        logger.debug("Registered %s", type(observer).__name__)

    def remove_observer(self, observer: Observer) -> None:
        """Unregister ``observer``; unknown observers are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)
            logger.debug("Removed %s", type(observer).__name__)

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update(self.temperature, self.humidity)

    def set_measurements(self, temperature: float, humidity: float) -> None:
        self.temperature = float(temperature)
        self.humidity = float(humidity)
        self.measurements_changed()

    def measurements_changed(self) -> None:
        self.notify_observers()


# ---------------------------------------------------------------------------
# Concrete observers
# ---------------------------------------------------------------------------

class CurrentConditionsDisplay(Observer):
    """Shows the latest reading. Subclasses only name the display."""

    name: str = "Current"

    def __init__(self):
        self.temperature: Optional[float] = None
        self.humidity: Optional[float] = None

    def update(self, temperature: float, humidity: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.display()

    def display(self) -> None:
        narrate(
            f"{self.name} Display: Current conditions: {fmt_reading(self.temperature)}F degrees "
            f"and {fmt_reading(self.humidity)}% humidity"
        )


class PhoneDisplay(CurrentConditionsDisplay):
    name = "Phone"


class WindowDisplay(CurrentConditionsDisplay):
    name = "Window"


class StatisticsDisplay(Observer):
    """Tracks average, maximum and minimum temperature across readings."""

    def __init__(self):
        self.max_temp: Optional[float] = None
        self.min_temp: Optional[float] = None
        self.temp_sum = 0.0
        self.num_readings = 0

    @property
    def average(self) -> float:
        if self.num_readings == 0:
            return 0.0
        return self.temp_sum / self.num_readings

    def update(self, temperature: float, humidity: float) -> None:
        self.temp_sum += temperature
        self.num_readings += 1
        if self.max_temp is None or temperature > self.max_temp:
            self.max_temp = temperature
        if self.min_temp is None or temperature < self.min_temp:
            self.min_temp = temperature
        self.display()

    def display(self) -> None:
        narrate(
            f"Statistics Display: Avg/Max/Min temperature = {fmt_reading(self.average)}"
            f"/{fmt_reading(self.max_temp)}/{fmt_reading(self.min_temp)}"
        )
