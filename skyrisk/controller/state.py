"""View state and its pure reducer.

Lookups are tagged with a monotonically increasing token. Starts and
completions that carry an older token than the latest started lookup are
dropped, so a slow stale response can never overwrite a newer one. The
location is stored as soon as it resolves, even if the forecast fetch that
follows fails.
"""

from dataclasses import dataclass, replace
from datetime import date
from enum import StrEnum

from skyrisk.errors import ErrorKind
from skyrisk.models.common import RequestToken
from skyrisk.models.location import Location
from skyrisk.models.risk import RiskResult


class Phase(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    selected_date: date
    city_query: str = ""
    location: Location | None = None
    phase: Phase = Phase.IDLE
    result: RiskResult | None = None
    notification: str | None = None
    error_kind: ErrorKind | None = None
    request_token: RequestToken = 0

    @property
    def loading(self) -> bool:
        return self.phase == Phase.LOADING


@dataclass(frozen=True)
class DateChanged:
    selected_date: date


@dataclass(frozen=True)
class CityQueryChanged:
    query: str


@dataclass(frozen=True)
class LookupStarted:
    token: RequestToken


@dataclass(frozen=True)
class LocationResolved:
    token: RequestToken
    location: Location


@dataclass(frozen=True)
class LookupSucceeded:
    token: RequestToken
    location: Location
    result: RiskResult


@dataclass(frozen=True)
class LookupFailed:
    token: RequestToken
    error_kind: ErrorKind
    message: str


@dataclass(frozen=True)
class NotificationShown:
    pass


Event = (
    DateChanged
    | CityQueryChanged
    | LookupStarted
    | LocationResolved
    | LookupSucceeded
    | LookupFailed
    | NotificationShown
)


def reduce(state: ViewState, event: Event) -> ViewState:
    if isinstance(event, DateChanged):
        return replace(state, selected_date=event.selected_date)

    if isinstance(event, CityQueryChanged):
        return replace(state, city_query=event.query)

    if isinstance(event, LookupStarted):
        if event.token < state.request_token:
            return state
        return replace(
            state,
            phase=Phase.LOADING,
            result=None,
            notification=None,
            error_kind=None,
            request_token=event.token,
        )

    if isinstance(event, LocationResolved):
        if event.token != state.request_token:
            return state
        return replace(state, location=event.location)

    if isinstance(event, LookupSucceeded):
        if event.token != state.request_token:
            return state
        return replace(
            state, phase=Phase.READY, location=event.location, result=event.result
        )

    if isinstance(event, LookupFailed):
        if event.token != state.request_token:
            return state
        return replace(
            state,
            phase=Phase.ERROR,
            result=None,
            notification=event.message,
            error_kind=event.error_kind,
        )

    if isinstance(event, NotificationShown):
        if state.phase != Phase.ERROR:
            return state
        return replace(state, phase=Phase.IDLE)

    raise TypeError(f"Unknown event: {event!r}")
