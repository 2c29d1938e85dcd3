"""Explicit provider outcomes.

Providers report expected failures (unreachable backend, rate limiting,
exhausted credits, malformed answers) as values instead of raising, so the
handler has to deal with each case where it dispatches.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ProviderErrorKind(str, Enum):
    UNAVAILABLE = "unavailable"
    RATE_LIMITED = "rate_limited"
    QUOTA_EXHAUSTED = "quota_exhausted"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful provider outcome."""

    value: T


@dataclass(frozen=True)
class ProviderError:
    """Normalized downstream failure."""

    kind: ProviderErrorKind
    status_code: int
    message: str

    @classmethod
    def unavailable(cls, message: str = "Backend connection failed") -> "ProviderError":
        return cls(ProviderErrorKind.UNAVAILABLE, 500, message)

    @classmethod
    def rate_limited(cls) -> "ProviderError":
        return cls(
            ProviderErrorKind.RATE_LIMITED, 429, "Rate limit exceeded. Please try again later."
        )

    @classmethod
    def quota_exhausted(cls) -> "ProviderError":
        return cls(
            ProviderErrorKind.QUOTA_EXHAUSTED,
            402,
            "AI credits depleted. Please add credits to continue.",
        )

    @classmethod
    def malformed(cls) -> "ProviderError":
        return cls(ProviderErrorKind.MALFORMED_RESPONSE, 500, "Invalid AI response format")


ProviderResult = Union[Ok[T], ProviderError]
