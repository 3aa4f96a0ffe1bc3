"""API-specific request and response models."""

from .pricing import (
    AlternativesRequest,
    MonthCalendarRequest,
    ProfileValidationResponse,
    QuoteRequest,
    ResolveDateRequest,
    ScopedCalendarRequest,
)

__all__ = [
    "AlternativesRequest",
    "MonthCalendarRequest",
    "ProfileValidationResponse",
    "QuoteRequest",
    "ResolveDateRequest",
    "ScopedCalendarRequest",
]
