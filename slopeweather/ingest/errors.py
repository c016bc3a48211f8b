"""Error taxonomy for weather retrieval."""

from enum import StrEnum


class ErrorKind(StrEnum):
    MISSING_CREDENTIAL = "missing_credential"
    INVALID_REQUEST = "invalid_request"
    REMOTE_STATUS = "remote_status"
    SUBSCRIPTION_REQUIRED = "subscription_required"
    NO_DATA_AVAILABLE = "no_data_available"
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"


class WeatherServiceError(Exception):
    kind: ErrorKind
    default_message = "Weather retrieval failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingCredentialError(WeatherServiceError):
    kind = ErrorKind.MISSING_CREDENTIAL
    default_message = "OpenWeatherMap API key is not configured."


class InvalidRequestError(WeatherServiceError):
    kind = ErrorKind.INVALID_REQUEST
    default_message = "Invalid weather request."


class RemoteStatusError(WeatherServiceError):
    kind = ErrorKind.REMOTE_STATUS

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        super().__init__(
            message or f"Could not load weather information. (HTTP {status_code})"
        )


class SubscriptionRequiredError(WeatherServiceError):
    kind = ErrorKind.SUBSCRIPTION_REQUIRED
    default_message = "A One Call API 3.0 subscription is required."


class NoDataAvailableError(WeatherServiceError):
    kind = ErrorKind.NO_DATA_AVAILABLE
    default_message = "No weather information is available for that date."


class TransportFailureError(WeatherServiceError):
    kind = ErrorKind.TRANSPORT_FAILURE
    default_message = "Could not reach the weather provider."


class MalformedResponseError(WeatherServiceError):
    kind = ErrorKind.MALFORMED_RESPONSE
    default_message = "The weather provider returned an unreadable response."
