"""Tests for the observer demonstration and the demo registry."""

import pytest

from pattern_catalog.catalog import DEMOS, get_demo, list_demos, run_demo
from pattern_catalog.catalog.behavioral import observer
from pattern_catalog.catalog.behavioral.observer import (
    CurrentConditionsDisplay,
    ForecastDisplay,
    StatisticsDisplay,
    WeatherData,
)
from pattern_catalog.config import DemoConfig, set_demo_config
from pattern_catalog.core.exceptions import UnknownDemoError


class TestObserver:
    def test_registered_observers_are_notified(self, capsys):
        weather = WeatherData()
        current = CurrentConditionsDisplay()
        weather.register_observer(current)
        weather.register_observer(current)

        weather.set_measurements(80, 65, 30.4)

        assert capsys.readouterr().out.splitlines() == [
            "Current conditions: 80.0°F and 65.0% humidity"
        ]

    def test_removed_observer_stops_receiving(self):
        weather = WeatherData()
        stats = StatisticsDisplay()
        weather.register_observer(stats)
        weather.set_measurements(80, 65, 30.4)

        weather.remove_observer(stats)
        weather.set_measurements(90, 65, 30.4)

        assert stats.readings == [80]

    def test_statistics(self):
        stats = StatisticsDisplay()
        for temperature in (80, 82, 78):
            stats.update(temperature, 0, 0)

        assert stats.display() == "Avg/Max/Min temperature = 80.0/82.0/78.0"

    def test_statistics_without_readings(self):
        assert StatisticsDisplay().display() == "Avg/Max/Min temperature = no readings yet"

    @pytest.mark.parametrize(
        "pressures, expected",
        [
            ([30.4], "More of the same"),
            ([29.2, 30.4], "Improving weather on the way!"),
            ([30.4, 29.2], "Watch out for cooler, rainy weather"),
            ([29.2, 29.2], "More of the same"),
        ],
    )
    def test_forecast_follows_pressure(self, pressures, expected):
        forecast = ForecastDisplay()
        for pressure in pressures:
            forecast.update(0, 0, pressure)

        assert forecast.forecast() == expected

    def test_main_prints_three_rounds(self, capsys):
        observer.main()

        out = capsys.readouterr().out.splitlines()
        assert out.count("-----------------------------------------------") == 3
        assert "Forecast: Watch out for cooler, rainy weather" in out


class TestDemoRegistry:
    def test_lists_every_pattern(self):
        names = list_demos()

        assert names == sorted(DEMOS)
        for expected in (
            "abstract-factory",
            "adapter",
            "builder",
            "composite",
            "decorator",
            "facade",
            "factory-method",
            "observer",
            "singleton-basic",
            "singleton-double-checked",
            "singleton-eager",
            "singleton-synchronized",
            "singleton-unsynchronized",
        ):
            assert expected in names

    def test_unknown_demo_raises(self):
        with pytest.raises(UnknownDemoError, match="Available"):
            get_demo("prototype")

    def test_run_singleton_demo_entry(self, capsys):
        set_demo_config(DemoConfig(construction_delay=0.0, callers=2))

        report = run_demo("singleton-eager")

        assert report.is_consistent
        assert capsys.readouterr().out.count("Hello from Eager Singleton! Count: 1") == 2

    def test_run_basic_singleton_entry(self, capsys):
        run_demo("singleton-basic")

        assert capsys.readouterr().out.splitlines() == [
            "Hello from Singleton! 1",
            "Hello from Singleton! 1",
        ]
