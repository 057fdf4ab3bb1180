"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from skyview.models.common import TemperatureUnit


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openweathermap.org/data/2.5"
    geo_url: str = "https://api.openweathermap.org/geo/1.0"
    icon_url: str = "https://openweathermap.org/img/wn"
    api_key: str = ""
    timeout: float = Field(default=10.0, gt=0.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_days: int = Field(default=5, ge=1, le=5)
    target_hour: int = Field(default=12, ge=0, le=23)


class AlertConfig(BaseModel):
    model_config = {"extra": "forbid"}

    heat_threshold_c: float = 40.0
    cold_threshold_c: float = -20.0


class RecentConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_cities: int = Field(default=5, ge=1, le=5)
    db_path: str = "data/skyview.db"


class GeolocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = True
    url: str = "http://ip-api.com/json"
    timeout: float = Field(default=10.0, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    unit: TemperatureUnit = TemperatureUnit.CELSIUS


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    forecast: ForecastConfig = ForecastConfig()
    alerts: AlertConfig = AlertConfig()
    recent: RecentConfig = RecentConfig()
    geolocation: GeolocationConfig = GeolocationConfig()
    display: DisplayConfig = DisplayConfig()
