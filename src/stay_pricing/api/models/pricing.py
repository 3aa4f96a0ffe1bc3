"""API request/response models for pricing endpoints.

Requests carry the scope's pricing profile and its raw calendar entries;
the calendar source itself lives outside this service.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from stay_pricing.models import (
    CalendarOverride,
    OverrideRange,
    PropertyPricingProfile,
    ValidatedPricingProfile,
)

_PROFILE_EXAMPLE = {"base_price": 10000, "best_deal_price": 8000, "peak_season_price": 15000}
_OVERRIDES_EXAMPLE = [
    {"scope_id": "property-42", "date": "2025-06-01", "type": "sold_out"},
    {"scope_id": "property-42", "date": "2025-06-02", "type": "best_deal"},
]


class ScopedCalendarRequest(BaseModel):
    """Profile plus calendar entries for one scope."""

    scope_id: str = Field(..., description="Property or room identifier", examples=["property-42"])
    parent_scope_id: Optional[str] = Field(
        default=None,
        description="Property whose entries a room inherits; the room's own entries win",
        examples=["property-42"],
    )
    profile: PropertyPricingProfile
    overrides: list[CalendarOverride] = Field(
        default_factory=list,
        description="Calendar entries in write order; later entries win for the same date",
    )
    ranges: list[OverrideRange] = Field(
        default_factory=list,
        description="Bulk range entries, expanded before overrides so overrides win",
    )


class QuoteRequest(ScopedCalendarRequest):
    """Quote a check-in/check-out range."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "scope_id": "property-42",
                    "profile": _PROFILE_EXAMPLE,
                    "overrides": _OVERRIDES_EXAMPLE,
                    "check_in": "2025-06-01",
                    "check_out": "2025-06-04",
                }
            ]
        }
    )

    # Plain strings so format errors are reported as MALFORMED_DATE
    check_in: str = Field(..., description="Check-in date (YYYY-MM-DD)", examples=["2025-06-01"])
    check_out: str = Field(..., description="Check-out date (YYYY-MM-DD)", examples=["2025-06-04"])


class ResolveDateRequest(ScopedCalendarRequest):
    """Resolve a single calendar date."""

    date: str = Field(..., description="Date to resolve (YYYY-MM-DD)", examples=["2025-06-02"])


class MonthCalendarRequest(ScopedCalendarRequest):
    """Resolve every day of a month."""

    month: str = Field(..., description="Month in YYYY-MM format", examples=["2025-06"])


class AlternativesRequest(QuoteRequest):
    """Find bookable stays near the requested range."""

    earliest: Optional[str] = Field(
        default=None,
        description="No suggestion starts before this date (YYYY-MM-DD)",
        examples=["2025-05-20"],
    )


class ProfileDraftRequest(BaseModel):
    """Listing price with optional seasonal prices to derive a profile from."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"base_price": 70000, "listing_nights": 7}],
        }
    )

    base_price: int = Field(..., description="Listing price in cents for listing_nights nights")
    best_deal_price: Optional[int] = Field(
        default=None, description="Defaults to 80% of the nightly base price"
    )
    peak_season_price: Optional[int] = Field(
        default=None, description="Defaults to 140% of the nightly base price"
    )
    listing_nights: int = Field(default=1, ge=1, description="Nights the listing price covers")


class ProfileValidationResponse(BaseModel):
    """Result of a successful profile validation."""

    valid: bool = True
    profile: ValidatedPricingProfile
