"""Domain-level exceptions.

Adapters raise these errors to describe what went wrong at the boundary.
The dictionary service turns lookup errors into tagged outcomes; route
handlers map the rest to HTTP status codes.
"""

from enum import Enum


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """Input violates a validation rule."""


class LookupErrorKind(str, Enum):
    """Closed set of lookup failure kinds callers branch on."""
    NO_CONNECTION = 'no_connection'
    TIMEOUT = 'timeout'
    API_ERROR = 'api_error'
    MALFORMED_RESPONSE = 'malformed_response'
    UNEXPECTED = 'unexpected'


NO_CONNECTION_MESSAGE = "No Internet connection. Please check your network."
TIMEOUT_MESSAGE = "Request timed out. Please try again."
MALFORMED_RESPONSE_MESSAGE = "Unexpected response format."
UNEXPECTED_MESSAGE = "Something went wrong. Please try again."


class DictionaryLookupError(DomainError):
    """A dictionary lookup failed. ``kind`` tells callers which way."""

    kind: LookupErrorKind = LookupErrorKind.UNEXPECTED

    def __init__(self, message: str = UNEXPECTED_MESSAGE):
        self.message = message
        super().__init__(message)


class NoConnectionError(DictionaryLookupError):
    """The transport reported no network path."""

    kind = LookupErrorKind.NO_CONNECTION

    def __init__(self, message: str = NO_CONNECTION_MESSAGE):
        super().__init__(message)


class LookupTimeoutError(DictionaryLookupError):
    """The request exceeded its deadline."""

    kind = LookupErrorKind.TIMEOUT

    def __init__(self, message: str = TIMEOUT_MESSAGE):
        super().__init__(message)


class ApiError(DictionaryLookupError):
    """The API answered with a non-success status."""

    kind = LookupErrorKind.API_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class MalformedResponseError(DictionaryLookupError):
    """The API answered 200 with a body that is not a list of entries."""

    kind = LookupErrorKind.MALFORMED_RESPONSE

    def __init__(self, message: str = MALFORMED_RESPONSE_MESSAGE):
        super().__init__(message)


class PlaybackError(DomainError):
    """The audio engine could not load or play a source."""


class StorageError(DomainError):
    """The key-value backend could not be read or written."""
