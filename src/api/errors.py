"""
Structured error handling for the SpamGuard AI Engine.

Provides custom exceptions and the error response model. Every failure
reaches the client as ``{"error": "..."}`` with one of the status codes
400, 402, 429 or 500.
"""

from enum import Enum

from pydantic import BaseModel, Field

from src.llm.result import ProviderError, ProviderErrorKind


class ErrorCode(str, Enum):
    """Error codes used for logging and exception dispatch."""

    # Client errors (4xx)
    INVALID_INPUT = "INVALID_INPUT"

    # Upstream errors
    RATE_LIMITED = "RATE_LIMITED"
    QUOTA_EXHAUSTED = "QUOTA_EXHAUSTED"
    PROVIDER_UNAVAILABLE = "PROVIDER_UNAVAILABLE"
    MALFORMED_PROVIDER_RESPONSE = "MALFORMED_PROVIDER_RESPONSE"

    # Server errors (5xx)
    MISCONFIGURED = "MISCONFIGURED"
    UNKNOWN = "UNKNOWN"


class ErrorResponse(BaseModel):
    """
    Error response format.

    The client only reads the message, so nothing else is exposed.
    """

    error: str = Field(..., description="Human-readable error message")

    model_config = {
        "json_schema_extra": {
            "example": {"error": "Rate limit exceeded. Please try again later."}
        }
    }


# Custom Exceptions


class SpamGuardError(Exception):
    """Base exception for all SpamGuard errors."""

    def __init__(self, message: str, error_code: ErrorCode, status_code: int = 500):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(message)


class InvalidInputError(SpamGuardError):
    """Raised when the request body is missing or has malformed fields."""

    def __init__(self, message: str):
        super().__init__(message=message, error_code=ErrorCode.INVALID_INPUT, status_code=400)


class MisconfiguredError(SpamGuardError):
    """Raised when the gateway credential is not configured."""

    def __init__(self, message: str = "AI service not configured"):
        super().__init__(message=message, error_code=ErrorCode.MISCONFIGURED, status_code=500)


class ProviderUnavailableError(SpamGuardError):
    """Raised when a backend cannot be reached or answers with an error status."""

    def __init__(self, message: str = "Backend connection failed"):
        super().__init__(
            message=message, error_code=ErrorCode.PROVIDER_UNAVAILABLE, status_code=500
        )


class RateLimitedError(SpamGuardError):
    """Raised when the gateway rate limits the request."""

    def __init__(self, message: str = "Rate limit exceeded. Please try again later."):
        super().__init__(message=message, error_code=ErrorCode.RATE_LIMITED, status_code=429)


class QuotaExhaustedError(SpamGuardError):
    """Raised when the gateway account has run out of credits."""

    def __init__(self, message: str = "AI credits depleted. Please add credits to continue."):
        super().__init__(message=message, error_code=ErrorCode.QUOTA_EXHAUSTED, status_code=402)


class MalformedProviderResponseError(SpamGuardError):
    """Raised when a provider answer lacks the expected fields."""

    def __init__(self, message: str = "Invalid AI response format"):
        super().__init__(
            message=message, error_code=ErrorCode.MALFORMED_PROVIDER_RESPONSE, status_code=500
        )


class UnknownError(SpamGuardError):
    """Raised for any unexpected failure caught at the handler boundary."""

    def __init__(self, message: str = "Unknown error"):
        super().__init__(message=message, error_code=ErrorCode.UNKNOWN, status_code=500)


_ERRORS_BY_KIND = {
    ProviderErrorKind.UNAVAILABLE: ProviderUnavailableError,
    ProviderErrorKind.RATE_LIMITED: RateLimitedError,
    ProviderErrorKind.QUOTA_EXHAUSTED: QuotaExhaustedError,
    ProviderErrorKind.MALFORMED_RESPONSE: MalformedProviderResponseError,
}


def error_from_provider(error: ProviderError) -> SpamGuardError:
    """Convert a provider failure into the exception rendered to the client."""
    exc = _ERRORS_BY_KIND[error.kind](error.message)
    # Keep the status the provider decided on
    exc.status_code = error.status_code
    return exc
