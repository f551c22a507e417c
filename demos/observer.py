"""Observer scenarios: hard-wired displays vs registered observers."""

from __future__ import annotations

from core.narration import narrate
from core.registry import register_demo
from naive import observer as naive
from patterns.domain_config import DemoConfig
from patterns.observer import PhoneDisplay, StatisticsDisplay, WeatherStation, WindowDisplay

READINGS = [(80, 65), (82, 70), (78, 90)]

_ROLES = [
    "Subject: WeatherStation",
    "Observers: PhoneDisplay, WindowDisplay, StatisticsDisplay",
]


def _update_banner(number: str, temperature: float, humidity: float) -> None:
    narrate("")
    narrate(f"--- {number} Update: {temperature}F, {humidity}% Humidity ---")


@register_demo(
    "observer", "without",
    title="Station calls displays directly",
    summary="The station holds one field per display and updates each by name.",
    roles=_ROLES,
)
def run_without(config: DemoConfig) -> None:
    narrate("========== WITHOUT OBSERVER PATTERN ==========")
    station = naive.WeatherStation(
        naive.PhoneDisplay(), naive.WindowDisplay(), naive.StatisticsDisplay()
    )
    for number, (temperature, humidity) in zip(("First", "Second", "Third"), READINGS):
        _update_banner(number, temperature, humidity)
        station.set_measurements(temperature, humidity)


@register_demo(
    "observer", "with",
    title="Displays subscribe to the station",
    summary="Displays register and unregister at runtime; the station only knows Observer.",
    roles=_ROLES,
)
def run_with(config: DemoConfig) -> None:
    narrate("========== OBSERVER PATTERN ==========")
    station = WeatherStation()
    phone_display = PhoneDisplay()

    narrate("")
    narrate("--- Registering Observers ---")
    station.register_observer(phone_display)
    station.register_observer(WindowDisplay())
    station.register_observer(StatisticsDisplay())

    (t1, h1), (t2, h2), (t3, h3) = READINGS
    _update_banner("First", t1, h1)
    station.set_measurements(t1, h1)
    _update_banner("Second", t2, h2)
    station.set_measurements(t2, h2)

    narrate("")
    narrate("--- Removing Phone Display ---")
    station.remove_observer(phone_display)

    _update_banner("Third", t3, h3)
    station.set_measurements(t3, h3)
