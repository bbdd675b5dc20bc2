"""Error taxonomy for location resolution and forecast retrieval."""

from enum import StrEnum


class ErrorKind(StrEnum):
    NETWORK = "NETWORK"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    NOT_FOUND = "NOT_FOUND"
    UNSUPPORTED_CAPABILITY = "UNSUPPORTED_CAPABILITY"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    POSITION_UNAVAILABLE = "POSITION_UNAVAILABLE"


class SkyRiskError(Exception):
    """Base class for failures surfaced at the action boundary."""

    kind: ErrorKind = ErrorKind.NETWORK

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkError(SkyRiskError):
    """Transport, DNS, timeout or HTTP status failure."""

    kind = ErrorKind.NETWORK


class MalformedResponseError(SkyRiskError):
    """Response decoded but is missing expected fields."""

    kind = ErrorKind.MALFORMED_RESPONSE


class NotFoundError(SkyRiskError):
    kind = ErrorKind.NOT_FOUND


class UnsupportedCapabilityError(SkyRiskError):
    kind = ErrorKind.UNSUPPORTED_CAPABILITY


class PermissionDeniedError(SkyRiskError):
    kind = ErrorKind.PERMISSION_DENIED


class PositionUnavailableError(SkyRiskError):
    kind = ErrorKind.POSITION_UNAVAILABLE
