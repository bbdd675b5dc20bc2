"""Device geolocation adapters.

A provider returns ``{"coords": {"latitude": ..., "longitude": ...}}`` or raises
one of the geolocation errors. Error codes follow the W3C Geolocation API.
"""

from typing import Protocol

from skyrisk.errors import PermissionDeniedError, PositionUnavailableError

PERMISSION_DENIED = 1
POSITION_UNAVAILABLE = 2
TIMEOUT = 3


class GeolocationProvider(Protocol):
    def current_position(self) -> dict: ...


class ReportedPosition:
    """Position (or failure code) reported by a browser client."""

    def __init__(
        self,
        latitude: float | None = None,
        longitude: float | None = None,
        error_code: int | None = None,
    ):
        if error_code is None and (latitude is None or longitude is None):
            raise ValueError("either coordinates or an error code is required")
        self.latitude = latitude
        self.longitude = longitude
        self.error_code = error_code

    def current_position(self) -> dict:
        if self.error_code == PERMISSION_DENIED:
            raise PermissionDeniedError("User denied geolocation")
        if self.error_code is not None:
            # TIMEOUT and unknown codes are reported as unavailable
            raise PositionUnavailableError(
                f"Position unavailable (code {self.error_code})"
            )
        return {"coords": {"latitude": self.latitude, "longitude": self.longitude}}
