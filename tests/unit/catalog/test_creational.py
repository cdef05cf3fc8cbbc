"""Tests for the creational pattern demonstrations."""

from unittest.mock import patch

import pytest

from pattern_catalog.catalog.creational import abstract_factory, builder, factory_method
from pattern_catalog.catalog.creational.abstract_factory import (
    Application,
    MacFactory,
    WindowsFactory,
    factory_for_os,
)
from pattern_catalog.catalog.creational.builder import House, HouseBuilder
from pattern_catalog.catalog.creational.factory_method import (
    BikeFactory,
    CarFactory,
    TransportService,
)
from pattern_catalog.catalog.creational import singleton
from pattern_catalog.catalog.creational.singleton import run_basic_demo, run_singleton_demo
from pattern_catalog.config import DemoConfig, set_demo_config
from pattern_catalog.core.exceptions import UnsupportedPlatformError
from pattern_catalog.core.singleton import Strategy


class TestAbstractFactory:
    @pytest.mark.parametrize(
        "os_name, expected",
        [("windows", WindowsFactory), ("WINDOWS", WindowsFactory), ("mac", MacFactory)],
    )
    def test_factory_for_os(self, os_name, expected):
        assert isinstance(factory_for_os(os_name), expected)

    def test_linux_not_implemented(self):
        with pytest.raises(UnsupportedPlatformError, match="not implemented"):
            factory_for_os("linux")

    def test_invalid_os(self):
        with pytest.raises(UnsupportedPlatformError, match="Invalid os"):
            factory_for_os("beos")

    def test_application_paints_matching_family(self, capsys):
        lines = Application(MacFactory()).paint()

        assert lines == [
            "Rendering a MacOS-styled button.",
            "Rendering a MacOS-styled checkbox.",
        ]
        assert capsys.readouterr().out.splitlines() == lines

    def test_main_uses_windows(self, capsys):
        abstract_factory.main()

        assert "Windows-styled button" in capsys.readouterr().out


class TestBuilder:
    def test_main_output(self, capsys):
        builder.main()

        assert capsys.readouterr().out.strip() == (
            "House with Concrete foundation, Brick walls, Shingle roof, "
            "4 rooms, a garage, no swimming pool"
        )

    def test_built_house_is_immutable(self):
        house = HouseBuilder().set_roof("Tile").set_swimming_pool(True).build()

        assert house == House(roof="Tile", has_swimming_pool=True)
        with pytest.raises(AttributeError):
            house.roof = "Slate"

    def test_negative_rooms_rejected(self):
        with pytest.raises(ValueError):
            HouseBuilder().set_number_of_rooms(-1)


class TestFactoryMethod:
    def test_services_deliver_with_their_vehicle(self):
        assert TransportService(CarFactory()).start_delivery() == "Delivering by car."
        assert TransportService(BikeFactory()).start_delivery() == "Delivering by bike."

    def test_main_output(self, capsys):
        factory_method.main()

        assert capsys.readouterr().out.splitlines() == [
            "Delivering by car.",
            "Delivering by bike.",
        ]


class TestSingletonDemo:
    def test_uses_config_defaults(self):
        set_demo_config(DemoConfig(construction_delay=0.0, callers=5))
        lines = []

        report = run_singleton_demo(Strategy.SYNCHRONIZED, emit=lines.append)

        assert report.callers == 5
        assert lines == ["Hello from Thread Safe Singleton! Count: 1"] * 5

    def test_eager_is_initialized_by_composition_root(self):
        report = run_singleton_demo("eager", callers=3, delay=0.0, emit=lambda _: None)

        assert report.is_consistent
        assert report.errors == []

    def test_cancel_after_aborts_slow_construction(self):
        report = run_singleton_demo(
            Strategy.DOUBLE_CHECKED,
            callers=3,
            delay=5.0,
            cancel_after=0.05,
            emit=lambda _: None,
        )

        assert len(report.errors) == 3
        assert report.creation_count == 0
        assert report.elapsed < 5.0

    def test_only_the_chosen_provider_is_built(self):
        registries = []
        build_registry = singleton.build_registry

        def capture(*args, **kwargs):
            registries.append(build_registry(*args, **kwargs))
            return registries[-1]

        with patch.object(singleton, "build_registry", side_effect=capture):
            report = run_singleton_demo(
                Strategy.SYNCHRONIZED, callers=2, delay=0.0, emit=lambda _: None
            )

        assert registries[0].names() == ["synchronized"]
        assert report.is_consistent


class TestBasicSingletonDemo:
    def test_sequential_lookups_share_one_instance(self):
        lines = []

        assert run_basic_demo(emit=lines.append) == lines
        assert lines == ["Hello from Singleton! 1", "Hello from Singleton! 1"]
