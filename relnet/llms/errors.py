"""Failures of an event classification call.

Every error carries a message suitable for showing to the user. None of them
are retried by the classifier.
"""

from typing import ClassVar


class ClassificationError(Exception):
    kind: ClassVar[str] = "ClassificationError"
    default_message: ClassVar[str] = "Event analysis failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ConnectionFailedError(ClassificationError):
    kind = "ConnectionFailed"
    default_message = "Connection failed. Please check your network connection."


class InvalidCredentialError(ClassificationError):
    kind = "InvalidCredential"
    default_message = "Invalid API key. Please check your key in Settings."


class RateLimitedError(ClassificationError):
    kind = "RateLimited"
    default_message = "Rate limit exceeded. Please try again in a moment."


class ServiceUnavailableError(ClassificationError):
    kind = "ServiceUnavailable"
    default_message = "AI service is temporarily unavailable. Please try again later."


class GenericAPIError(ClassificationError):
    kind = "GenericAPIError"

    def __init__(self, status_code: int, reason: str = "") -> None:
        super().__init__(f"API error: {status_code} {reason}".rstrip())
        self.status_code = status_code


class MalformedResponseError(ClassificationError):
    kind = "MalformedResponse"
    default_message = "Failed to parse AI response as JSON."


class UnsupportedProviderError(ClassificationError):
    kind = "UnsupportedProvider"

    def __init__(self, provider: str) -> None:
        super().__init__(f"Unsupported provider: {provider}")
        self.provider = provider


UNAVAILABLE_STATUS_CODES = frozenset({500, 502, 503})


def error_for_status(status_code: int, reason: str = "") -> ClassificationError:
    """Map a non-2xx HTTP status to its classification error."""
    if status_code == 401:
        return InvalidCredentialError()
    if status_code == 429:
        return RateLimitedError()
    if status_code in UNAVAILABLE_STATUS_CODES:
        return ServiceUnavailableError()
    return GenericAPIError(status_code, reason)
