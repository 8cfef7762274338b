"""
Failure kinds of the suggestion pipeline.
Each class carries the HTTP status the endpoint answers with and whether a caller
may retry the same request later.
"""
from typing import Dict, Optional, Type


class SuggestionError(Exception):
    status_code = 500
    retryable = False

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, str]:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class InvalidRequestError(SuggestionError):
    """Required field missing for the selected context."""
    status_code = 400


class ConfigurationError(SuggestionError):
    """Provider credential not configured; no call was attempted."""
    status_code = 500


class AuthError(SuggestionError):
    status_code = 401


class RateLimitError(SuggestionError):
    status_code = 429
    retryable = True


class ServiceOverloadError(SuggestionError):
    status_code = 503
    retryable = True


class MalformedRequestError(SuggestionError):
    """Provider rejected the request body (HTTP 400)."""
    status_code = 400


class RequestTimeoutError(SuggestionError):
    status_code = 408


class ConnectivityError(SuggestionError):
    status_code = 503


class EmptyResultError(SuggestionError):
    status_code = 500


class UnexpectedError(SuggestionError):
    status_code = 500


_STATUS_ERRORS: Dict[int, Type[SuggestionError]] = {
    400: InvalidRequestError,
    401: AuthError,
    408: RequestTimeoutError,
    429: RateLimitError,
    503: ServiceOverloadError,
}


def error_for_status(status_code: int, message: str, details: Optional[str] = None) -> SuggestionError:
    """
    Rebuild an error from an HTTP status, for code on the other side of the endpoint.
    Statuses shared by several kinds resolve to the one a caller acts on
    (503 is treated as overload, so it stays retryable).
    """
    error_cls = _STATUS_ERRORS.get(status_code, UnexpectedError)
    error = error_cls(message, details)
    if error_cls is UnexpectedError:
        error.status_code = status_code
    return error
