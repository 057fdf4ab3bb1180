"""OpenWeatherMap API client for current conditions, forecasts and geocoding.

Requests are never retried; every failure is mapped onto the provider error
taxonomy and surfaced to the caller.
"""

import logging
from typing import Any

import httpx

from skyview.config.schema import ProviderConfig
from skyview.ingest.payloads import parse_current, parse_forecast, parse_suggestions
from skyview.models.errors import (
    MalformedResponse,
    NetworkError,
    NotFound,
    OtherHTTPError,
    ProviderError,
    RateLimited,
    Unauthorized,
)
from skyview.models.query import PlaceQuery
from skyview.models.weather import CitySuggestion, CurrentConditions, ForecastSample

logger = logging.getLogger(__name__)

OWM_BASE_URL = "https://api.openweathermap.org/data/2.5"
OWM_GEO_URL = "https://api.openweathermap.org/geo/1.0"
OWM_ICON_URL = "https://openweathermap.org/img/wn"


class WeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = OWM_BASE_URL,
        geo_url: str = OWM_GEO_URL,
        icon_base_url: str = OWM_ICON_URL,
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.geo_url = geo_url.rstrip("/")
        self.icon_base_url = icon_base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "WeatherClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            geo_url=config.geo_url,
            icon_base_url=config.icon_url,
            timeout=config.timeout,
        )

    async def get_current(self, query: PlaceQuery) -> CurrentConditions:
        raw = await self._get(
            f"{self.base_url}/weather", {**query.params(), "units": "metric"}
        )
        return parse_current(raw)

    async def get_forecast(self, query: PlaceQuery) -> list[ForecastSample]:
        """Fetch the 5-day / 3-hour forecast samples in provider order."""
        raw = await self._get(
            f"{self.base_url}/forecast", {**query.params(), "units": "metric"}
        )
        return parse_forecast(raw)

    async def get_city_suggestions(
        self, text: str, limit: int = 5
    ) -> list[CitySuggestion]:
        raw = await self._get(
            f"{self.geo_url}/direct", {"q": text, "limit": limit}
        )
        return parse_suggestions(raw)

    def icon_url(self, icon: str) -> str:
        return f"{self.icon_base_url}/{icon}@2x.png"

    async def _get(self, url: str, params: dict[str, Any]) -> Any:
        params = {**params, "appid": self.api_key}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params)
        except httpx.RequestError as e:
            logger.warning("Weather API request failed for %s: %s", url, e)
            raise NetworkError() from e

        if resp.is_error:
            error = _status_error(resp)
            logger.warning(
                "Weather API %s returned %d: %s", url, resp.status_code, error
            )
            raise error

        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponse() from e


def _status_error(resp: httpx.Response) -> ProviderError:
    if resp.status_code == 404:
        return NotFound()
    if resp.status_code == 401:
        return Unauthorized()
    if resp.status_code == 429:
        return RateLimited()
    return OtherHTTPError(resp.status_code, _provider_message(resp))


def _provider_message(resp: httpx.Response) -> str | None:
    try:
        data = resp.json()
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None
