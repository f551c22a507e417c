"""Test weather station observers."""
from core.narration import capture_narration
from naive import observer as naive
from patterns.observer import (
    Observer,
    PhoneDisplay,
    StatisticsDisplay,
    WeatherStation,
    WindowDisplay,
)


class RecordingObserver(Observer):
    def __init__(self):
        self.readings = []

    def update(self, temperature, humidity):
        self.readings.append((temperature, humidity))


def test_registered_observers_receive_updates():
    station = WeatherStation()
    observer = RecordingObserver()
    station.register_observer(observer)
    station.set_measurements(80, 65)
    assert observer.readings == [(80.0, 65.0)]


def test_removed_observer_stops_receiving():
    station = WeatherStation()
    observer = RecordingObserver()
    station.register_observer(observer)
    station.set_measurements(80, 65)
    station.remove_observer(observer)
    station.set_measurements(82, 70)
    assert observer.readings == [(80.0, 65.0)]


def test_remove_unknown_observer_is_noop():
    station = WeatherStation()
    station.remove_observer(RecordingObserver())
    assert station.observers == []


def test_notification_order():
    station = WeatherStation()
    station.register_observer(PhoneDisplay())
    station.register_observer(WindowDisplay())
    with capture_narration() as transcript:
        station.set_measurements(80, 65)
    assert transcript.lines == [
        "Phone Display: Current conditions: 80.0F degrees and 65.0% humidity",
        "Window Display: Current conditions: 80.0F degrees and 65.0% humidity",
    ]


def test_statistics_display():
    stats = StatisticsDisplay()
    with capture_narration() as transcript:
        for t in (80, 82, 78):
            stats.update(t, 50)
    assert stats.average == 80.0
    assert stats.max_temp == 82
    assert stats.min_temp == 78
    assert transcript.lines[-1] == "Statistics Display: Avg/Max/Min temperature = 80.0/82.0/78.0"


def test_statistics_handles_negative_temperatures():
    stats = StatisticsDisplay()
    with capture_narration():
        stats.update(-10, 50)
        stats.update(-5, 50)
    assert stats.max_temp == -5
    assert stats.min_temp == -10


def test_naive_station_updates_all_displays():
    stats = naive.StatisticsDisplay()
    station = naive.WeatherStation(naive.PhoneDisplay(), naive.WindowDisplay(), stats)
    with capture_narration() as transcript:
        station.set_measurements(80, 65)
    assert len(transcript.lines) == 3
    assert stats.num_readings == 1
    assert transcript.lines[-1] == "Statistics Display: Avg/Max/Min temperature = 80.0/80.0/80.0"


def test_naive_displays_are_not_observers():
    assert not isinstance(naive.PhoneDisplay(), Observer)
    assert not isinstance(naive.StatisticsDisplay(), Observer)


def test_display_before_any_reading():
    with capture_narration() as transcript:
        PhoneDisplay().display()
        StatisticsDisplay().display()
        naive.WindowDisplay().display()
        naive.StatisticsDisplay().display()
    assert transcript.lines == [
        "Phone Display: Current conditions: N/AF degrees and N/A% humidity",
        "Statistics Display: Avg/Max/Min temperature = 0.0/N/A/N/A",
        "Window Display: Current conditions: N/AF degrees and N/A% humidity",
        "Statistics Display: Avg/Max/Min temperature = 0.0/N/A/N/A",
    ]
