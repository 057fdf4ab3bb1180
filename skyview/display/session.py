"""Per-session display state: the result on screen and the chosen unit."""

from dataclasses import dataclass

from skyview.forecast.units import from_celsius, round_temp
from skyview.models.common import TemperatureUnit
from skyview.models.display import Alert, AlertState
from skyview.models.lookup import LookupResult


@dataclass
class DisplaySession:
    unit: TemperatureUnit = TemperatureUnit.CELSIUS
    result: LookupResult | None = None

    def show(self, result: LookupResult) -> None:
        """Replace the displayed result wholesale."""
        self.result = result

    def set_unit(self, unit: TemperatureUnit | str) -> None:
        self.unit = TemperatureUnit(unit)

    @property
    def alert(self) -> Alert:
        if self.result is None:
            return Alert(AlertState.NONE)
        return self.result.alert

    def temperature(self) -> int | float | None:
        if self.result is None:
            return None
        return self.convert(self.result.current.temp)

    def feels_like(self) -> int | float | None:
        if self.result is None:
            return None
        return self.convert(self.result.current.feels_like)

    def convert(self, celsius: float) -> int | float:
        return round_temp(from_celsius(celsius, self.unit))
