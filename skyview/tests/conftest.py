"""Shared test fixtures."""

import json
from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest
import yaml

from skyview.config.schema import AppConfig
from skyview.models.display import Alert, AlertState, ParticleEffect, Theme, ThemeKey
from skyview.models.lookup import LookupResult
from skyview.models.query import PlaceQuery
from skyview.models.weather import CurrentConditions, DailyForecast, ForecastSample

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {
            "base_url": "https://owm.test/data/2.5",
            "geo_url": "https://owm.test/geo/1.0",
            "api_key": "test-key",
        },
        "recent": {"db_path": str(tmp_path / "skyview.db")},
        "geolocation": {"url": "https://geo.test/json"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def london_current() -> dict:
    with open(FIXTURE_DIR / "owm_current_london.json") as f:
        return json.load(f)


def forecast_entry(
    stamp: datetime,
    temp_min: float,
    temp_max: float,
    condition: str = "Clouds",
    icon: str = "04d",
) -> dict[str, Any]:
    """One /forecast list entry in the provider's shape."""
    return {
        "dt": int(stamp.replace(tzinfo=UTC).timestamp()),
        "main": {
            "temp": (temp_min + temp_max) / 2,
            "feels_like": (temp_min + temp_max) / 2,
            "temp_min": temp_min,
            "temp_max": temp_max,
            "pressure": 1015,
            "humidity": 70,
        },
        "weather": [
            {"id": 803, "main": condition, "description": condition.lower(), "icon": icon}
        ],
        "wind": {"speed": 3.5, "deg": 200},
        "dt_txt": stamp.strftime("%Y-%m-%d %H:%M:%S"),
    }


@pytest.fixture
def forecast_payload() -> Callable[..., dict]:
    """Build a /forecast payload of ``count`` samples every ``step_hours`` from ``start``."""

    def build(start: datetime, count: int = 40, step_hours: int = 3) -> dict:
        entries = [
            forecast_entry(
                start + timedelta(hours=step_hours * i),
                temp_min=10.0 + i % 8,
                temp_max=15.0 + i % 8,
            )
            for i in range(count)
        ]
        return {
            "cod": "200",
            "cnt": count,
            "list": entries,
            "city": {"name": "London", "country": "GB", "timezone": 0},
        }

    return build


@pytest.fixture
def lookup_result() -> LookupResult:
    """A rendered-ready London result with two forecast days."""
    current = CurrentConditions(
        name="London",
        country="GB",
        observed_at=1770735600,  # 2026-02-10 15:00 UTC
        condition="Rain",
        description="light rain",
        icon="10d",
        temp=12.4,
        feels_like=11.6,
        humidity=81,
        wind_speed=4.12,
        pressure=1012,
        visibility=10000,
    )

    def day(d: date, tmin: float, tmax: float) -> DailyForecast:
        sample = ForecastSample(
            dt=0,
            timestamp=f"{d.isoformat()} 12:00:00",
            condition="Clouds",
            description="broken clouds",
            icon="04d",
            temp=(tmin + tmax) / 2,
            temp_min=tmin,
            temp_max=tmax,
            humidity=70,
            wind_speed=3.5,
        )
        return DailyForecast(date=d, representative=sample, temp_min=tmin, temp_max=tmax)

    return LookupResult(
        query=PlaceQuery.by_name("London"),
        current=current,
        daily=[day(date(2026, 2, 11), 4.0, 9.6), day(date(2026, 2, 12), 2.5, 7.0)],
        theme=Theme(ThemeKey.RAIN, ParticleEffect.RAIN),
        alert=Alert(AlertState.NONE),
    )
