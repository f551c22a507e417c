"""Without observer: the station calls three concrete displays directly.

Adding a display means editing the station; removing one at runtime is
impossible. The displays share no interface, so each repeats the same
update/display pair.
"""

from __future__ import annotations

from typing import Optional

from core.narration import fmt_reading, narrate


class PhoneDisplay:
    def __init__(self):
        self.temperature: Optional[float] = None
        self.humidity: Optional[float] = None

    def update(self, temperature: float, humidity: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.display()

    def display(self) -> None:
        narrate(
            f"Phone Display: Current conditions: {fmt_reading(self.temperature)}F degrees "
            f"and {fmt_reading(self.humidity)}% humidity"
        )


class WindowDisplay:
    def __init__(self):
        self.temperature: Optional[float] = None
        self.humidity: Optional[float] = None

    def update(self, temperature: float, humidity: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.display()

    def display(self) -> None:
        narrate(
            f"Window Display: Current conditions: {fmt_reading(self.temperature)}F degrees "
            f"and {fmt_reading(self.humidity)}% humidity"
        )


class StatisticsDisplay:
    def __init__(self):
        self.max_temp: Optional[float] = None
        self.min_temp: Optional[float] = None
        self.temp_sum = 0.0
        self.num_readings = 0

    def update(self, temperature: float, humidity: float) -> None:
        self.temp_sum += temperature
        self.num_readings += 1
        if self.max_temp is None or temperature > self.max_temp:
            self.max_temp = temperature
        if self.min_temp is None or temperature < self.min_temp:
            self.min_temp = temperature
        self.display()

    def display(self) -> None:
        average = self.temp_sum / self.num_readings if self.num_readings else 0.0
        narrate(
            f"Statistics Display: Avg/Max/Min temperature = {fmt_reading(average)}"
            f"/{fmt_reading(self.max_temp)}/{fmt_reading(self.min_temp)}"
        )


class WeatherStation:
    def __init__(
        self,
        phone_display: PhoneDisplay,
        window_display: WindowDisplay,
        statistics_display: StatisticsDisplay,
    ):
        self.temperature = 0.0
        self.humidity = 0.0
        self.phone_display = phone_display
        self.window_display = window_display
        self.statistics_display = statistics_display

    def set_measurements(self, temperature: float, humidity: float) -> None:
        self.temperature = float(temperature)
        self.humidity = float(humidity)
        self.measurements_changed()

    def measurements_changed(self) -> None:
        self.phone_display.update(self.temperature, self.humidity)
        self.window_display.update(self.temperature, self.humidity)
        self.statistics_display.update(self.temperature, self.humidity)
