"""Parsers turning raw OpenWeatherMap JSON into weather models."""

import logging
from typing import Any

from skyview.models.errors import MalformedResponse
from skyview.models.weather import CitySuggestion, CurrentConditions, ForecastSample

logger = logging.getLogger(__name__)

_PARSE_ERRORS = (KeyError, TypeError, ValueError, IndexError, AttributeError)


def parse_current(raw: dict[str, Any]) -> CurrentConditions:
    """Parse a /weather response."""
    try:
        weather = _first_weather(raw)
        main = raw["main"]
        return CurrentConditions(
            name=raw["name"],
            country=(raw.get("sys") or {}).get("country", ""),
            observed_at=int(raw["dt"]),
            condition=weather.get("main", ""),
            description=weather.get("description", ""),
            icon=weather.get("icon", ""),
            temp=float(main["temp"]),
            feels_like=float(main["feels_like"]),
            humidity=int(main["humidity"]),
            wind_speed=float((raw.get("wind") or {}).get("speed", 0.0)),
            pressure=int(main["pressure"]),
            visibility=_visibility(raw.get("visibility")),
            timezone_offset=int(raw.get("timezone") or 0),
        )
    except _PARSE_ERRORS as e:
        logger.warning("Unparseable current-conditions payload: %r", e)
        raise MalformedResponse() from e


def parse_forecast(raw: dict[str, Any]) -> list[ForecastSample]:
    """Parse a /forecast response into samples, keeping provider order.

    Entries missing their readings are dropped. The ``dt_txt`` timestamp is
    kept verbatim; aggregation decides what to do with a malformed one.
    """
    try:
        entries = raw["list"]
        iter(entries)
    except _PARSE_ERRORS as e:
        logger.warning("Forecast payload has no sample list: %r", e)
        raise MalformedResponse() from e

    samples: list[ForecastSample] = []
    for entry in entries:
        try:
            samples.append(_parse_sample(entry))
        except _PARSE_ERRORS as e:
            logger.debug("Skipping malformed forecast entry %r: %r", entry, e)
    return samples


def parse_suggestions(raw: Any) -> list[CitySuggestion]:
    """Parse a /geo/1.0/direct response."""
    if not isinstance(raw, list):
        raise MalformedResponse()
    results = []
    for item in raw:
        try:
            results.append(
                CitySuggestion(
                    name=item["name"],
                    country=item.get("country", ""),
                    lat=float(item["lat"]),
                    lon=float(item["lon"]),
                    state=item.get("state"),
                )
            )
        except _PARSE_ERRORS as e:
            logger.debug("Skipping malformed suggestion %r: %r", item, e)
    return results


def _parse_sample(entry: dict[str, Any]) -> ForecastSample:
    weather = _first_weather(entry)
    main = entry["main"]
    return ForecastSample(
        dt=int(entry.get("dt", 0)),
        timestamp=str(entry.get("dt_txt", "")),
        condition=weather.get("main", ""),
        description=weather.get("description", ""),
        icon=weather.get("icon", ""),
        temp=float(main["temp"]),
        temp_min=float(main["temp_min"]),
        temp_max=float(main["temp_max"]),
        humidity=int(main["humidity"]),
        wind_speed=float((entry.get("wind") or {}).get("speed", 0.0)),
    )


def _first_weather(raw: dict[str, Any]) -> dict[str, Any]:
    return (raw.get("weather") or [{}])[0]


def _visibility(value: Any) -> int | None:
    if not value:
        return None
    return int(value)
