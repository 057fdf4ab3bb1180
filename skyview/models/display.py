"""Presentation models: themes, particle overlays, and alerts."""

from dataclasses import dataclass
from enum import StrEnum


class ThemeKey(StrEnum):
    CLEAR = "weather-clear"
    CLEAR_NIGHT = "weather-clear-night"
    CLOUDS = "weather-clouds"
    RAIN = "weather-rain"
    DRIZZLE = "weather-drizzle"
    THUNDERSTORM = "weather-thunderstorm"
    SNOW = "weather-snow"
    MIST = "weather-mist"
    FOG = "weather-fog"
    HAZE = "weather-haze"
    SMOKE = "weather-smoke"
    DEFAULT = "weather-default"


class ParticleEffect(StrEnum):
    NONE = "none"
    RAIN = "rain"
    SNOW = "snow"


class AlertState(StrEnum):
    NONE = "none"
    HEAT_EXTREME = "heat-extreme"
    COLD_EXTREME = "cold-extreme"


@dataclass(frozen=True)
class Theme:
    key: ThemeKey
    particles: ParticleEffect


@dataclass(frozen=True)
class Alert:
    state: AlertState
    message: str = ""

    @property
    def active(self) -> bool:
        return self.state != AlertState.NONE
