"""Error taxonomy for lookups.

Every error carries a user-facing message; the CLI prints ``str(error)``
verbatim. ``PersistenceError`` is raised by the storage layer only and is
absorbed by ``RecentCityStore`` before it can reach a caller.
"""

from enum import StrEnum


class ValidationReason(StrEnum):
    EMPTY = "empty input"
    TOO_SHORT = "too short"
    TOO_LONG = "too long"
    INVALID_CHARACTERS = "invalid characters"


class GeolocationErrorCode(StrEnum):
    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


class SkyviewError(Exception):
    """Base class for every error surfaced by a lookup."""


class QueryValidationError(SkyviewError):
    def __init__(self, reason: ValidationReason, message: str):
        super().__init__(message)
        self.reason = reason


# --- Provider errors ---

class ProviderError(SkyviewError):
    pass


class NotFound(ProviderError):
    def __init__(self, message: str = "City not found. Please check the spelling and try again."):
        super().__init__(message)


class Unauthorized(ProviderError):
    def __init__(self, message: str = "Invalid API key. Please check your configuration."):
        super().__init__(message)


class RateLimited(ProviderError):
    def __init__(self, message: str = "Too many requests. Please wait a moment and try again."):
        super().__init__(message)


class NetworkError(ProviderError):
    def __init__(self, message: str = "Network error. Please check your internet connection."):
        super().__init__(message)


class OtherHTTPError(ProviderError):
    def __init__(self, status_code: int, message: str | None = None):
        super().__init__(
            message or f"Failed to fetch weather data (Error {status_code})."
        )
        self.status_code = status_code


class MalformedResponse(ProviderError):
    def __init__(self, message: str = "Unexpected response from the weather provider."):
        super().__init__(message)


# --- Geolocation ---

_GEOLOCATION_MESSAGES = {
    GeolocationErrorCode.PERMISSION_DENIED: (
        "Location access denied. Enable geolocation in your configuration."
    ),
    GeolocationErrorCode.POSITION_UNAVAILABLE: "Location information is unavailable.",
    GeolocationErrorCode.TIMEOUT: "Location request timed out. Please try again.",
    GeolocationErrorCode.UNKNOWN: "An unknown error occurred while getting your location.",
}


class GeolocationError(SkyviewError):
    def __init__(self, code: GeolocationErrorCode, message: str | None = None):
        super().__init__(message or _GEOLOCATION_MESSAGES[code])
        self.code = code


# --- Persistence ---

class PersistenceError(SkyviewError):
    pass
