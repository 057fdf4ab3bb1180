"""Daily aggregation of 3-hour forecast samples.

Samples are grouped by the calendar date written in their own timestamp,
without timezone adjustment, which is how the provider labels them. Today's
group is dropped, and the remaining groups are emitted in the order their
dates first appear. Each day is represented by the sample nearest the target
hour, while its extrema span every sample of the day.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime

from skyview.models.weather import DailyForecast, ForecastSample

logger = logging.getLogger(__name__)

MAX_FORECAST_DAYS = 5
TARGET_HOUR = 12


def aggregate_daily(
    samples: Iterable[ForecastSample],
    today: date,
    max_days: int = MAX_FORECAST_DAYS,
    target_hour: int = TARGET_HOUR,
) -> list[DailyForecast]:
    groups: dict[date, list[tuple[int, ForecastSample]]] = {}
    skipped = 0

    for sample in samples:
        stamp = _parse_timestamp(sample.timestamp)
        if stamp is None:
            skipped += 1
            continue
        # dicts keep insertion order: first appearance of each date
        groups.setdefault(stamp.date(), []).append((stamp.hour, sample))

    if skipped:
        logger.debug("Skipped %d forecast samples with malformed timestamps", skipped)

    daily: list[DailyForecast] = []
    for day, entries in groups.items():
        if day == today:
            continue
        if len(daily) >= max_days:
            break
        daily.append(_summarize_day(day, entries, target_hour))
    return daily


def _summarize_day(
    day: date, entries: list[tuple[int, ForecastSample]], target_hour: int
) -> DailyForecast:
    # min() keeps the first of equally-near samples
    _, representative = min(entries, key=lambda e: abs(e[0] - target_hour))
    return DailyForecast(
        date=day,
        representative=representative,
        temp_min=min(s.temp_min for _, s in entries),
        temp_max=max(s.temp_max for _, s in entries),
    )


def _parse_timestamp(value: str | None) -> datetime | None:
    """Parse a provider ``dt_txt`` such as ``2026-02-11 12:00:00``."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
