"""Temperature unit conversion."""

import math

from skyview.models.common import TemperatureUnit


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5 / 9


def from_celsius(celsius: float, unit: TemperatureUnit) -> float:
    """Express a Celsius reading in the requested unit."""
    if unit == TemperatureUnit.FAHRENHEIT:
        return celsius_to_fahrenheit(celsius)
    return celsius


def round_temp(value: float) -> int | float:
    """Round half up, so 20.5 displays as 21 rather than 20.

    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)
