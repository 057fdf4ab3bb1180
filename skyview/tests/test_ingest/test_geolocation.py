"""Tests for geolocation sources."""

import httpx
import pytest
import respx

from skyview.config.schema import GeolocationConfig
from skyview.ingest.geolocation import FixedLocation, IpGeolocationSource
from skyview.models.errors import GeolocationError, GeolocationErrorCode

GEO_URL = "https://geo.test/json"


@pytest.fixture
def source() -> IpGeolocationSource:
    return IpGeolocationSource(url=GEO_URL, timeout=1.0)


class TestFixedLocation:
    @pytest.mark.asyncio
    async def test_returns_coords(self):
        coords = await FixedLocation(48.85, 2.35).locate()
        assert coords.lat == 48.85
        assert coords.lon == 2.35

    @pytest.mark.asyncio
    async def test_out_of_range(self):
        with pytest.raises(GeolocationError) as exc_info:
            await FixedLocation(95.0, 2.35).locate()
        assert exc_info.value.code == GeolocationErrorCode.POSITION_UNAVAILABLE


class TestIpGeolocation:
    @respx.mock
    @pytest.mark.asyncio
    async def test_success(self, source: IpGeolocationSource):
        respx.get(GEO_URL).mock(
            return_value=httpx.Response(
                200, json={"status": "success", "lat": 52.52, "lon": 13.405, "city": "Berlin"}
            )
        )
        coords = await source.locate()
        assert (coords.lat, coords.lon) == (52.52, 13.405)

    @pytest.mark.asyncio
    async def test_disabled_is_permission_denied(self):
        source = IpGeolocationSource(url=GEO_URL, enabled=False)
        with pytest.raises(GeolocationError) as exc_info:
            await source.locate()
        assert exc_info.value.code == GeolocationErrorCode.PERMISSION_DENIED
        assert "denied" in str(exc_info.value)

    @respx.mock
    @pytest.mark.asyncio
    async def test_forbidden_is_permission_denied(self, source: IpGeolocationSource):
        respx.get(GEO_URL).mock(return_value=httpx.Response(403))
        with pytest.raises(GeolocationError) as exc_info:
            await source.locate()
        assert exc_info.value.code == GeolocationErrorCode.PERMISSION_DENIED

    @respx.mock
    @pytest.mark.asyncio
    async def test_timeout(self, source: IpGeolocationSource):
        respx.get(GEO_URL).mock(side_effect=httpx.ReadTimeout)
        with pytest.raises(GeolocationError) as exc_info:
            await source.locate()
        assert exc_info.value.code == GeolocationErrorCode.TIMEOUT

    @respx.mock
    @pytest.mark.asyncio
    async def test_connect_error_is_unavailable(self, source: IpGeolocationSource):
        respx.get(GEO_URL).mock(side_effect=httpx.ConnectError)
        with pytest.raises(GeolocationError) as exc_info:
            await source.locate()
        assert exc_info.value.code == GeolocationErrorCode.POSITION_UNAVAILABLE

    @respx.mock
    @pytest.mark.asyncio
    async def test_status_fail_is_unavailable(self, source: IpGeolocationSource):
        respx.get(GEO_URL).mock(
            return_value=httpx.Response(200, json={"status": "fail", "message": "private range"})
        )
        with pytest.raises(GeolocationError) as exc_info:
            await source.locate()
        assert exc_info.value.code == GeolocationErrorCode.POSITION_UNAVAILABLE

    @respx.mock
    @pytest.mark.asyncio
    async def test_unparseable_is_unknown(self, source: IpGeolocationSource):
        respx.get(GEO_URL).mock(return_value=httpx.Response(200, json={"status": "success"}))
        with pytest.raises(GeolocationError) as exc_info:
            await source.locate()
        assert exc_info.value.code == GeolocationErrorCode.UNKNOWN

    def test_from_config(self):
        s = IpGeolocationSource.from_config(
            GeolocationConfig(enabled=False, url=GEO_URL, timeout=2.0)
        )
        assert s.enabled is False
        assert s.url == GEO_URL
        assert s.timeout == 2.0
