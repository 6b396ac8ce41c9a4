#!/usr/bin/env python3
"""Tests for Aircraft class."""

from maintenance import Aircraft


class TestAircraft:
    """Tests for Aircraft class."""

    def test_name_property(self):
        """Name includes the model when known."""
        aircraft = Aircraft("ac-1", "N123AB", "Cessna Citation CJ3")
        assert aircraft.name == "N123AB (Cessna Citation CJ3)"

    def test_name_without_model(self):
        assert Aircraft("ac-1", "N123AB").name == "N123AB"

    def test_defaults(self):
        """Tracks the airframe only and is maintenance tracked by default."""
        aircraft = Aircraft("ac-1", "N123AB")
        assert aircraft.tracked_component_names == ["Airframe"]
        assert aircraft.is_maintenance_tracked is True

    def test_attributes(self):
        aircraft = Aircraft(
            "ac-2", "N456CD", "Global 6000", ["Airframe", "Engine 1", "APU"], False
        )
        assert aircraft.id == "ac-2"
        assert aircraft.tail_number == "N456CD"
        assert aircraft.tracked_component_names == ["Airframe", "Engine 1", "APU"]
        assert aircraft.is_maintenance_tracked is False
