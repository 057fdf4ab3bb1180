"""Output formatters for lookup results."""

import json
from dataclasses import asdict
from datetime import UTC, date, datetime, timedelta

from skyview.display.session import DisplaySession
from skyview.models.lookup import LookupResult
from skyview.models.weather import CitySuggestion, CurrentConditions, DailyForecast


def format_observed(observed_at: int, timezone_offset: int = 0) -> str:
    """Full local date and time, e.g. 'Tuesday, February 10, 2026 03:00 PM'."""
    local = datetime.fromtimestamp(observed_at, UTC) + timedelta(seconds=timezone_offset)
    return local.strftime("%A, %B %d, %Y %I:%M %p")


def format_day(day: date) -> str:
    return day.strftime("%a")


def format_short_date(day: date) -> str:
    return f"{day.strftime('%b')} {day.day}"


def format_visibility(visibility: int | None) -> str:
    if not visibility:
        return "N/A"
    return f"{visibility / 1000:.1f} km"


def format_location(current: CurrentConditions) -> str:
    if current.country:
        return f"{current.name}, {current.country}"
    return current.name


def format_current_text(result: LookupResult, session: DisplaySession) -> str:
    c = result.current
    unit = session.unit.value
    lines = []
    if result.alert.active:
        lines.append(f"!! {result.alert.message}")
    lines += [
        f"=== {format_location(c)} ===",
        format_observed(c.observed_at, c.timezone_offset),
        c.description.capitalize() or c.condition,
        f"Temperature: {session.convert(c.temp)}°{unit} "
        f"(feels like {session.convert(c.feels_like)}°{unit})",
        f"Humidity: {c.humidity}% | Wind: {c.wind_speed} m/s | "
        f"Pressure: {c.pressure} hPa | Visibility: {format_visibility(c.visibility)}",
        f"Theme: {result.theme.key.value} | Particles: {result.theme.particles.value}",
    ]
    return "\n".join(lines)


def format_forecast_text(daily: list[DailyForecast], session: DisplaySession) -> str:
    if not daily:
        return "No forecast available."
    lines = [f"--- {len(daily)}-day forecast ---"]
    for d in daily:
        s = d.representative
        lines.append(
            f"{format_day(d.date)} {format_short_date(d.date):<7} "
            f"{s.description or s.condition:<20} "
            f"{session.convert(d.temp_max)}° / {session.convert(d.temp_min)}°  "
            f"wind {s.wind_speed} m/s  humidity {s.humidity}%"
        )
    return "\n".join(lines)


def format_lookup_text(result: LookupResult, session: DisplaySession) -> str:
    """Plain text rendering of a full lookup."""
    return "\n\n".join(
        [format_current_text(result, session), format_forecast_text(result.daily, session)]
    )


def format_lookup_json(result: LookupResult, session: DisplaySession) -> str:
    """JSON rendering for programmatic consumption."""
    data = {
        "query": result.query.describe(),
        "unit": session.unit.value,
        "current": {
            **asdict(result.current),
            "display_temp": session.convert(result.current.temp),
            "display_feels_like": session.convert(result.current.feels_like),
        },
        "theme": result.theme.key.value,
        "particles": result.theme.particles.value,
        "alert": {
            "state": result.alert.state.value,
            "message": result.alert.message,
        },
        "daily": [
            {
                "date": d.date.isoformat(),
                "condition": d.representative.condition,
                "description": d.representative.description,
                "icon": d.representative.icon,
                "temp_min": d.temp_min,
                "temp_max": d.temp_max,
                "humidity": d.representative.humidity,
                "wind_speed": d.representative.wind_speed,
            }
            for d in result.daily
        ],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_recent(cities: list[str]) -> str:
    if not cities:
        return "No recent searches."
    return "\n".join(f"{i}. {city}" for i, city in enumerate(cities, start=1))


def format_suggestions(suggestions: list[CitySuggestion]) -> str:
    if not suggestions:
        return "No matching cities."
    return "\n".join(
        f"{s.label} ({s.lat:.4f}, {s.lon:.4f})" for s in suggestions
    )
