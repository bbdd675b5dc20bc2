"""View controller: runs location lookups and forecast fetches against the view state."""

import itertools
import logging
import threading
from collections.abc import Callable
from datetime import date

from skyrisk.climatology.source import ClimatologySource
from skyrisk.controller.state import (
    CityQueryChanged,
    DateChanged,
    Event,
    LocationResolved,
    LookupFailed,
    LookupStarted,
    LookupSucceeded,
    NotificationShown,
    Phase,
    ViewState,
    reduce,
)
from skyrisk.errors import (
    ErrorKind,
    NotFoundError,
    PermissionDeniedError,
    PositionUnavailableError,
    SkyRiskError,
    UnsupportedCapabilityError,
)
from skyrisk.ingest.forecast_gateway import ForecastGateway
from skyrisk.ingest.geolocation import GeolocationProvider
from skyrisk.ingest.location_resolver import LocationResolver
from skyrisk.models.common import RequestToken
from skyrisk.models.location import Location
from skyrisk.risk.evaluator import RiskEvaluator

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch weather data. Try again later."
CITY_NOT_FOUND = "City not found"
CITY_SEARCH_FAILED = "City search failed"
GEO_UNSUPPORTED = "Geolocation not supported"
GEO_DENIED = "Location permission denied"
GEO_UNAVAILABLE = "Location unavailable"


def _log_notifier(message: str) -> None:
    logger.warning("Notification: %s", message)


class ViewController:
    """Owns the single ViewState; every change goes through the reducer."""

    def __init__(
        self,
        resolver: LocationResolver,
        gateway: ForecastGateway,
        climatology: ClimatologySource,
        evaluator: RiskEvaluator,
        initial_date: date,
        notifier: Callable[[str], None] = _log_notifier,
    ):
        self.resolver = resolver
        self.gateway = gateway
        self.climatology = climatology
        self.evaluator = evaluator
        self.notifier = notifier
        self.listeners: list[Callable[[ViewState], None]] = []
        self._state = ViewState(selected_date=initial_date)
        self._tokens = itertools.count(1)
        self._lock = threading.RLock()

    @property
    def state(self) -> ViewState:
        return self._state

    def dispatch(self, event: Event) -> ViewState:
        with self._lock:
            old_state = self._state
            new_state = reduce(old_state, event)
            self._state = new_state
        if new_state is not old_state:
            for listener in self.listeners:
                listener(new_state)
        return new_state

    # --- Inputs ---

    def set_date(self, selected_date: date) -> ViewState:
        return self.dispatch(DateChanged(selected_date))

    def set_city_query(self, query: str) -> ViewState:
        return self.dispatch(CityQueryChanged(query))

    # --- Actions ---

    def use_my_location(self, provider: GeolocationProvider | None) -> ViewState:
        token, target = self._begin()
        try:
            location = self.resolver.from_device(provider)
        except SkyRiskError as e:
            return self._fail(token, e, _geolocation_message(e))
        except Exception:
            self._abort(token)
            raise
        return self._fetch_risk(token, target, location)

    def search_city(self) -> ViewState:
        """Geocode the current city query and score it.

        A query that is empty or only whitespace is a no-op: no lookup starts
        and the state is returned unchanged.
        """
        query = self._state.city_query.strip()
        if not query:
            return self._state
        token, target = self._begin()
        try:
            location = self.resolver.search_city(query)
        except NotFoundError as e:
            return self._fail(token, e, CITY_NOT_FOUND)
        except SkyRiskError as e:
            return self._fail(token, e, CITY_SEARCH_FAILED)
        except Exception:
            self._abort(token)
            raise
        return self._fetch_risk(token, target, location)

    # --- Internals ---

    def _begin(self) -> tuple[RequestToken, date]:
        """Issue the next token and pin the date the lookup will score."""
        with self._lock:
            token = next(self._tokens)
            state = self.dispatch(LookupStarted(token))
            return token, state.selected_date

    def _fetch_risk(
        self, token: RequestToken, target: date, location: Location
    ) -> ViewState:
        self.dispatch(LocationResolved(token, location))
        try:
            forecast = self.gateway.fetch_forecast(
                location.latitude, location.longitude, target
            )
            clim = self.climatology.record_for_date(target)
            result = self.evaluator.evaluate(clim, forecast)
        except SkyRiskError as e:
            return self._fail(token, e, FETCH_FAILED)
        except Exception:
            self._abort(token)
            raise
        logger.info(
            "Risk for %s on %s: %s", location.label, target.isoformat(), result.as_dict()
        )
        return self.dispatch(LookupSucceeded(token, location, result))

    def _fail(self, token: RequestToken, error: SkyRiskError, message: str) -> ViewState:
        logger.exception("Lookup %d failed (%s)", token, error.kind)
        state = self.dispatch(LookupFailed(token, error.kind, message))
        if state.phase == Phase.ERROR:
            self.notifier(message)
            state = self.dispatch(NotificationShown())
        return state

    def _abort(self, token: RequestToken) -> None:
        """Leave the loading state before an unexpected exception propagates."""
        self.dispatch(LookupFailed(token, ErrorKind.NETWORK, FETCH_FAILED))
        self.dispatch(NotificationShown())


def _geolocation_message(error: SkyRiskError) -> str:
    if isinstance(error, UnsupportedCapabilityError):
        return GEO_UNSUPPORTED
    if isinstance(error, PermissionDeniedError):
        return GEO_DENIED
    if isinstance(error, PositionUnavailableError):
        return GEO_UNAVAILABLE
    return FETCH_FAILED
