"""Enumeration types for stay pricing data models."""

from enum import Enum


class PriceType(str, Enum):
    """Status tag of a calendar date. Exactly one applies per date."""

    AVAILABLE = "available"
    SOLD_OUT = "sold_out"
    PEAK_SEASON = "peak_season"
    BEST_DEAL = "best_deal"


class StayDirection(str, Enum):
    """Direction an alternative stay was shifted from the requested one."""

    EARLIER = "earlier"
    LATER = "later"
