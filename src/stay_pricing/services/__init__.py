"""Pricing and availability resolution services."""

from .calendar_resolver import (
    CalendarResolver,
    date_range,
    expand_override_range,
    expand_range,
    peak_rate_price,
)
from .date_range import DateRangeValidator, parse_date, parse_month
from .engine import PricingEngine
from .price_rules import PriceRuleValidator, derive_profile, nightly_base_price, scale_price
from .range_quoter import RangeQuoter

__all__ = [
    "CalendarResolver",
    "DateRangeValidator",
    "PriceRuleValidator",
    "PricingEngine",
    "RangeQuoter",
    "date_range",
    "derive_profile",
    "expand_override_range",
    "expand_range",
    "nightly_base_price",
    "parse_date",
    "parse_month",
    "peak_rate_price",
    "scale_price",
]
