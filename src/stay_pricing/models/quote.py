"""Quote models for date range pricing.

A RangeQuote is an ephemeral computation result; it is never persisted by
this package. Callers may store it with a booking record.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from .calendar import ResolvedNight
from .enums import StayDirection


class NightBreakdown(BaseModel):
    """Number of nights per status within a quote."""

    available_nights: int = Field(default=0, ge=0)
    best_deal_nights: int = Field(default=0, ge=0)
    peak_season_nights: int = Field(default=0, ge=0)
    sold_out_nights: int = Field(default=0, ge=0)


class RangeQuote(BaseModel):
    """Price and bookability for a check-in/check-out range."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "check_in": "2025-06-01",
                    "check_out": "2025-06-04",
                    "nights": [
                        {"date": "2025-06-01", "type": "sold_out", "price": 10000, "bookable": False},
                        {"date": "2025-06-02", "type": "best_deal", "price": 8000, "bookable": True},
                        {"date": "2025-06-03", "type": "available", "price": 10000, "bookable": True},
                    ],
                    "total_price": 28000,
                    "bookable": False,
                    "blocking_dates": ["2025-06-01"],
                    "breakdown": {
                        "available_nights": 1,
                        "best_deal_nights": 1,
                        "peak_season_nights": 0,
                        "sold_out_nights": 1,
                    },
                    "average_nightly_price": 9333,
                    "currency": "EUR",
                }
            ]
        },
    )

    check_in: dt.date = Field(..., description="Check-in date", examples=["2025-06-01"])
    check_out: dt.date = Field(
        ..., description="Check-out date (exclusive, not billed)", examples=["2025-06-04"]
    )
    nights: list[ResolvedNight] = Field(..., min_length=1, description="Nights in ascending order")
    total_price: int = Field(..., ge=0, description="Sum of every night's price in cents")
    bookable: bool = Field(..., description="True only if no night is sold out")
    blocking_dates: list[dt.date] = Field(
        default_factory=list, description="Every sold-out date, ascending"
    )
    breakdown: NightBreakdown = Field(default_factory=NightBreakdown)
    average_nightly_price: int = Field(default=0, ge=0, description="Rounded mean nightly price")
    currency: str = "EUR"


class AlternativeStay(BaseModel):
    """A fully bookable stay of the requested length near the requested dates."""

    check_in: dt.date = Field(..., examples=["2025-06-05"])
    check_out: dt.date = Field(..., examples=["2025-06-08"])
    nights: int = Field(..., ge=1, description="Same as originally requested")
    offset_days: int = Field(
        ..., description="Days shifted from original dates (negative=earlier, positive=later)"
    )
    direction: StayDirection
    total_price: int = Field(..., ge=0)
