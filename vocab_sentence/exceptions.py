"""
Custom exceptions for vocab-sentence.

All exceptions inherit from VocabSentenceError so callers can catch every
failure of the request/response cycle in one place.
"""

__all__ = [
    "ConfigurationError",
    "EmptyChoicesError",
    "RequestBuildError",
    "ResponseDecodeError",
    "ResponseError",
    "ResponseReadError",
    "TransportError",
    "UnexpectedStatusError",
    "ValidationError",
    "VocabSentenceError",
]


from typing import Any


class VocabSentenceError(Exception):
    """Base exception for all vocab-sentence errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(VocabSentenceError):
    """Raised when configuration is missing or invalid (e.g. no API key)."""

    pass


class ValidationError(VocabSentenceError):
    """Raised when input validation fails."""

    pass


class RequestBuildError(VocabSentenceError):
    """Raised when the request payload cannot be serialized."""

    pass


class TransportError(VocabSentenceError):
    """Raised when the HTTP request cannot be completed."""

    pass


class ResponseError(VocabSentenceError):
    """Base class for problems with the API response."""

    pass


class UnexpectedStatusError(ResponseError):
    """Raised when the API answers with a status other than 200."""

    def __init__(self, status_code: int, details: dict[str, Any] | None = None):
        details = dict(details or {})
        details["status_code"] = status_code
        super().__init__(f"Unexpected status code: {status_code}", details)
        self.status_code = status_code


class ResponseReadError(ResponseError):
    """Raised when the response body cannot be read."""

    pass


class ResponseDecodeError(ResponseError):
    """Raised when the response body is not a valid chat completion."""

    pass


class EmptyChoicesError(ResponseError):
    """Raised when the API returns no choices."""

    pass
