"""Pydantic models for stay pricing data entities."""

from .calendar import (
    CalendarOverride,
    MonthCalendar,
    OverrideCalendar,
    OverrideRange,
    ResolvedNight,
)
from .enums import PriceType, StayDirection
from .errors import (
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    ErrorCode,
    PricingError,
    PricingResult,
    ToolError,
)
from .pricing import PropertyPricingProfile, ValidatedPricingProfile
from .quote import AlternativeStay, NightBreakdown, RangeQuote

__all__ = [
    # Enums
    "PriceType",
    "StayDirection",
    # Pricing
    "PropertyPricingProfile",
    "ValidatedPricingProfile",
    # Calendar
    "CalendarOverride",
    "OverrideCalendar",
    "OverrideRange",
    "ResolvedNight",
    "MonthCalendar",
    # Quote
    "RangeQuote",
    "NightBreakdown",
    "AlternativeStay",
    # Errors
    "ErrorCode",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "PricingError",
    "PricingResult",
    "ToolError",
]
