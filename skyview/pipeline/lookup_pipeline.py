"""Lookup pipeline: one weather lookup from query to rendered result.

State machine per lookup: IDLE -> LOADING -> SUCCESS | FAILED. Name queries
that fail validation go straight to FAILED without showing loading. Once
LOADING is entered it is left exactly once, whatever happens, and before the
sink sees the result or error.

Current conditions and forecast are fetched concurrently and joined: nothing
downstream runs until both have settled, and a failure of either fails the
whole lookup. When both fail, the current-conditions error is reported.

Overlapping lookups are not coordinated; the last one to settle wins.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from skyview.config.schema import AlertConfig, AppConfig, ForecastConfig
from skyview.display.alerts import build_alert
from skyview.display.classifier import classify
from skyview.display.session import DisplaySession
from skyview.forecast.aggregator import aggregate_daily
from skyview.ingest.geolocation import GeolocationSource
from skyview.ingest.validator import validate_place_name
from skyview.ingest.weather_client import WeatherClient
from skyview.models.common import utc_today
from skyview.models.errors import GeolocationError, QueryValidationError, SkyviewError
from skyview.models.lookup import LookupOutcome, LookupResult, LookupState
from skyview.models.query import PlaceQuery
from skyview.models.weather import CurrentConditions, ForecastSample
from skyview.storage.recent_cities import RecentCityStore

logger = logging.getLogger(__name__)


class WeatherProvider(Protocol):
    async def get_current(self, query: PlaceQuery) -> CurrentConditions: ...

    async def get_forecast(self, query: PlaceQuery) -> list[ForecastSample]: ...


class PresentationSink(Protocol):
    def loading_started(self, label: str) -> None: ...

    def loading_finished(self) -> None: ...

    def render(self, result: LookupResult) -> None: ...

    def show_error(self, error: SkyviewError) -> None: ...


@dataclass
class LookupContext:
    """Mutable state a lookup reads and writes, passed in explicitly."""

    recent: RecentCityStore
    session: DisplaySession = field(default_factory=DisplaySession)


class LookupPipeline:
    def __init__(
        self,
        provider: WeatherProvider,
        context: LookupContext,
        sink: PresentationSink | None = None,
        forecast_config: ForecastConfig | None = None,
        alert_config: AlertConfig | None = None,
        today: Callable[[], date] = utc_today,
    ):
        self.provider = provider
        self.context = context
        self.sink = sink
        self.forecast_config = forecast_config or ForecastConfig()
        self.alert_config = alert_config or AlertConfig()
        self.today = today
        self.state = LookupState.IDLE

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        sink: PresentationSink | None = None,
        db_path: str | None = None,
    ) -> "LookupPipeline":
        context = LookupContext(
            recent=RecentCityStore(
                db_path or config.recent.db_path, config.recent.max_cities
            ),
            session=DisplaySession(unit=config.display.unit),
        )
        return cls(
            WeatherClient.from_config(config.provider),
            context,
            sink=sink,
            forecast_config=config.forecast,
            alert_config=config.alerts,
        )

    async def lookup(self, query: PlaceQuery) -> LookupOutcome:
        """Look up current conditions and the daily forecast for a place."""
        if query.name is not None:
            validation = validate_place_name(query.name)
            if not validation.valid:
                assert validation.reason is not None
                logger.info("Rejected place name %r: %s", query.name, validation.reason)
                return self._settle(
                    LookupOutcome.failure(
                        QueryValidationError(validation.reason, validation.message)
                    )
                )
            query = PlaceQuery.by_name(validation.value)

        return await self._with_loading(
            query.describe(), lambda: self._fetch_and_assemble(query)
        )

    async def lookup_here(self, source: GeolocationSource) -> LookupOutcome:
        """Resolve the current position, then look it up like any coordinate query."""

        async def locate_then_fetch() -> LookupOutcome:
            try:
                coords = await source.locate()
            except GeolocationError as e:
                logger.warning("Geolocation failed: %s", e.code)
                return LookupOutcome.failure(e)
            return await self._fetch_and_assemble(PlaceQuery(coords=coords))

        return await self._with_loading("current location", locate_then_fetch)

    async def _with_loading(
        self, label: str, work: Callable[[], Awaitable[LookupOutcome]]
    ) -> LookupOutcome:
        self.state = LookupState.LOADING
        if self.sink is not None:
            self.sink.loading_started(label)
        try:
            outcome = await work()
        except BaseException:
            self.state = LookupState.FAILED
            raise
        finally:
            if self.sink is not None:
                self.sink.loading_finished()
        return self._settle(outcome)

    async def _fetch_and_assemble(self, query: PlaceQuery) -> LookupOutcome:
        logger.info("Fetching weather for %s", query.describe())
        current, samples = await asyncio.gather(
            self.provider.get_current(query),
            self.provider.get_forecast(query),
            return_exceptions=True,
        )

        # Fixed precedence: a current-conditions error wins over a forecast error
        for settled in (current, samples):
            if isinstance(settled, SkyviewError):
                logger.warning("Lookup for %s failed: %s", query.describe(), settled)
                return LookupOutcome.failure(settled)
            if isinstance(settled, BaseException):
                raise settled

        assert isinstance(current, CurrentConditions)
        assert isinstance(samples, list)

        daily = aggregate_daily(
            samples,
            self.today(),
            max_days=self.forecast_config.max_days,
            target_hour=self.forecast_config.target_hour,
        )
        result = LookupResult(
            query=query,
            current=current,
            daily=daily,
            theme=classify(current.condition, current.icon),
            alert=build_alert(
                current.temp,
                self.alert_config.heat_threshold_c,
                self.alert_config.cold_threshold_c,
            ),
        )
        logger.info(
            "Resolved %s: %d samples -> %d days, theme=%s alert=%s",
            current.name, len(samples), len(daily),
            result.theme.key, result.alert.state,
        )

        self.context.recent.add(current.name)
        self.context.session.show(result)
        return LookupOutcome.success(result)

    def _settle(self, outcome: LookupOutcome) -> LookupOutcome:
        self.state = outcome.state
        if self.sink is not None:
            if outcome.result is not None:
                self.sink.render(outcome.result)
            elif outcome.error is not None:
                self.sink.show_error(outcome.error)
        return outcome
