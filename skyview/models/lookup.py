"""Lookup state machine and result models."""

from dataclasses import dataclass
from enum import StrEnum

from skyview.models.display import Alert, Theme
from skyview.models.errors import SkyviewError
from skyview.models.query import PlaceQuery
from skyview.models.weather import CurrentConditions, DailyForecast


class LookupState(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class LookupResult:
    query: PlaceQuery
    current: CurrentConditions
    daily: list[DailyForecast]
    theme: Theme
    alert: Alert


@dataclass(frozen=True)
class LookupOutcome:
    state: LookupState
    result: LookupResult | None = None
    error: SkyviewError | None = None

    @property
    def ok(self) -> bool:
        return self.state == LookupState.SUCCESS

    @classmethod
    def success(cls, result: LookupResult) -> "LookupOutcome":
        return cls(state=LookupState.SUCCESS, result=result)

    @classmethod
    def failure(cls, error: SkyviewError) -> "LookupOutcome":
        return cls(state=LookupState.FAILED, error=error)
