"""Tests for session display state and unit toggling."""

import pytest

from skyview.display.session import DisplaySession
from skyview.models.common import TemperatureUnit
from skyview.models.display import AlertState
from skyview.models.lookup import LookupResult


class TestDisplaySession:
    def test_empty_session(self):
        session = DisplaySession()
        assert session.temperature() is None
        assert session.feels_like() is None
        assert session.alert.state == AlertState.NONE

    def test_celsius_display(self, lookup_result: LookupResult):
        session = DisplaySession()
        session.show(lookup_result)
        assert session.temperature() == 12
        assert session.feels_like() == 12

    def test_toggle_to_fahrenheit_and_back(self, lookup_result: LookupResult):
        session = DisplaySession()
        session.show(lookup_result)

        session.set_unit(TemperatureUnit.FAHRENHEIT)
        assert session.temperature() == 54
        assert session.feels_like() == 53

        session.set_unit("C")
        assert session.temperature() == 12

    def test_toggle_does_not_touch_stored_data(self, lookup_result: LookupResult):
        session = DisplaySession(unit=TemperatureUnit.FAHRENHEIT)
        session.show(lookup_result)
        assert session.result is not None
        assert session.result.current.temp == 12.4

    def test_invalid_unit(self):
        with pytest.raises(ValueError):
            DisplaySession().set_unit("K")
