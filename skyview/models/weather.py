"""OpenWeatherMap current-conditions and forecast models."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CurrentConditions:
    name: str
    country: str
    observed_at: int  # unix seconds
    condition: str
    description: str
    icon: str
    temp: float
    feels_like: float
    humidity: int
    wind_speed: float
    pressure: int
    visibility: int | None = None  # metres; None when unknown
    timezone_offset: int = 0  # seconds east of UTC


@dataclass(frozen=True)
class ForecastSample:
    dt: int  # unix seconds
    timestamp: str  # provider dt_txt, "YYYY-MM-DD HH:MM:SS"
    condition: str
    description: str
    icon: str
    temp: float
    temp_min: float
    temp_max: float
    humidity: int
    wind_speed: float


@dataclass(frozen=True)
class DailyForecast:
    date: date
    representative: ForecastSample
    temp_min: float
    temp_max: float


@dataclass(frozen=True)
class CitySuggestion:
    name: str
    country: str
    lat: float
    lon: float
    state: str | None = None

    @property
    def label(self) -> str:
        parts = [self.name]
        if self.state:
            parts.append(self.state)
        parts.append(self.country)
        return ", ".join(p for p in parts if p)
