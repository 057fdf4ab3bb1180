"""Geolocation sources that resolve "here" into a coordinate pair."""

import logging
from typing import Protocol

import httpx

from skyview.config.schema import GeolocationConfig
from skyview.models.errors import GeolocationError, GeolocationErrorCode
from skyview.models.query import Coordinates

logger = logging.getLogger(__name__)

IP_GEOLOCATION_URL = "http://ip-api.com/json"


class GeolocationSource(Protocol):
    async def locate(self) -> Coordinates: ...


class FixedLocation:
    """Coordinates supplied up front, e.g. from the command line."""

    def __init__(self, lat: float, lon: float):
        self.coords = Coordinates(lat=lat, lon=lon)

    async def locate(self) -> Coordinates:
        if not self.coords.in_range:
            raise GeolocationError(
                GeolocationErrorCode.POSITION_UNAVAILABLE,
                f"Coordinates out of range: {self.coords.lat}, {self.coords.lon}",
            )
        return self.coords


class IpGeolocationSource:
    """Approximate position from the public IP address (ip-api.com JSON shape)."""

    def __init__(
        self,
        url: str = IP_GEOLOCATION_URL,
        timeout: float = 10.0,
        enabled: bool = True,
    ):
        self.url = url
        self.timeout = timeout
        self.enabled = enabled

    @classmethod
    def from_config(cls, config: GeolocationConfig) -> "IpGeolocationSource":
        return cls(url=config.url, timeout=config.timeout, enabled=config.enabled)

    async def locate(self) -> Coordinates:
        if not self.enabled:
            raise GeolocationError(GeolocationErrorCode.PERMISSION_DENIED)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(self.url)
        except httpx.TimeoutException as e:
            logger.warning("Geolocation request timed out: %s", e)
            raise GeolocationError(GeolocationErrorCode.TIMEOUT) from e
        except httpx.RequestError as e:
            logger.warning("Geolocation request failed: %s", e)
            raise GeolocationError(GeolocationErrorCode.POSITION_UNAVAILABLE) from e

        if resp.status_code in (401, 403):
            raise GeolocationError(GeolocationErrorCode.PERMISSION_DENIED)
        if resp.is_error:
            logger.warning("Geolocation service returned %d", resp.status_code)
            raise GeolocationError(GeolocationErrorCode.POSITION_UNAVAILABLE)

        try:
            data = resp.json()
            if data.get("status", "success") != "success":
                logger.warning(
                    "Geolocation lookup failed: %s", data.get("message", "no message")
                )
                raise GeolocationError(GeolocationErrorCode.POSITION_UNAVAILABLE)
            coords = Coordinates(lat=float(data["lat"]), lon=float(data["lon"]))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise GeolocationError(GeolocationErrorCode.UNKNOWN) from e

        logger.debug("Located at %.4f,%.4f", coords.lat, coords.lon)
        return coords
