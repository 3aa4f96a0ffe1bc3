"""Pricing endpoints for profile validation, date resolution and quotes.

Provides REST endpoints for:
- Validating a pricing profile's tier order
- Deriving a profile from a listing price
- Resolving a single date
- Quoting a check-in/check-out range
- Monthly calendar views
- Alternative stay suggestions

All amounts are in minor currency units (e.g., 15000 = €150.00).
Engine errors are raised as PricingError and converted to ToolError
responses by the registered exception handler.
"""

from fastapi import APIRouter, Depends

from stay_pricing.api.dependencies import get_pricing_engine
from stay_pricing.api.models.pricing import (
    AlternativesRequest,
    MonthCalendarRequest,
    ProfileDraftRequest,
    ProfileValidationResponse,
    QuoteRequest,
    ResolveDateRequest,
    ScopedCalendarRequest,
)
from stay_pricing.models import (
    AlternativeStay,
    MonthCalendar,
    OverrideCalendar,
    PropertyPricingProfile,
    RangeQuote,
    ResolvedNight,
    ToolError,
)
from stay_pricing.services.date_range import parse_date
from stay_pricing.services.engine import PricingEngine

router = APIRouter(tags=["pricing"])

_ERROR_RESPONSES = {
    400: {"model": ToolError, "description": "Invalid dates or pricing profile"},
}


def _calendar(engine: PricingEngine, request: ScopedCalendarRequest) -> OverrideCalendar:
    return engine.build_calendar(
        request.scope_id,
        request.overrides,
        parent_scope_id=request.parent_scope_id,
        ranges=request.ranges,
        base_price=request.profile.base_price,
    )


@router.post(
    "/pricing/profile/validate",
    summary="Validate pricing profile",
    description="""
Check that best_deal_price < base_price < peak_season_price and that
every price is positive.

**Notes:**
- Invalid profiles are rejected, never adjusted
""",
    response_model=ProfileValidationResponse,
    responses=_ERROR_RESPONSES,
)
async def validate_profile(
    profile: PropertyPricingProfile,
    engine: PricingEngine = Depends(get_pricing_engine),
) -> ProfileValidationResponse:
    """Validate a pricing profile."""
    validated = engine.validate_profile(profile).unwrap()
    return ProfileValidationResponse(profile=validated)


@router.post(
    "/pricing/profile/derive",
    summary="Derive pricing profile",
    description="""
Build a profile from a listing price, filling omitted seasonal prices
from the configured ratios (80% best deal, 140% peak season by default).

**Notes:**
- base_price covers listing_nights nights and is divided into a nightly price
- The derived profile is validated like any other
""",
    response_model=ProfileValidationResponse,
    responses=_ERROR_RESPONSES,
)
async def derive_profile(
    request: ProfileDraftRequest,
    engine: PricingEngine = Depends(get_pricing_engine),
) -> ProfileValidationResponse:
    """Derive and validate a pricing profile."""
    validated = engine.derive_profile(
        request.base_price,
        best_deal_price=request.best_deal_price,
        peak_season_price=request.peak_season_price,
        listing_nights=request.listing_nights,
    ).unwrap()
    return ProfileValidationResponse(profile=validated)


@router.post(
    "/pricing/resolve",
    summary="Resolve a date",
    description="""
Resolve the effective status and nightly price for one date.

**Notes:**
- Dates without an override are available at the base price
- Sold-out dates keep their price but are not bookable
""",
    response_model=ResolvedNight,
    responses=_ERROR_RESPONSES,
)
async def resolve_date(
    request: ResolveDateRequest,
    engine: PricingEngine = Depends(get_pricing_engine),
) -> ResolvedNight:
    """Resolve a single date."""
    return engine.resolve_date(request.profile, _calendar(engine, request), request.date).unwrap()


@router.post(
    "/pricing/quote",
    summary="Quote a stay",
    description="""
Resolve every night of a stay and return the total and bookability.

**Notes:**
- check_out is exclusive (the check-out night is not billed)
- Sold-out nights make the quote unbookable and are listed in blocking_dates;
  this is a normal 200 response, not an error
""",
    response_model=RangeQuote,
    responses=_ERROR_RESPONSES,
)
async def quote_stay(
    request: QuoteRequest,
    engine: PricingEngine = Depends(get_pricing_engine),
) -> RangeQuote:
    """Quote a check-in/check-out range."""
    return engine.quote(
        request.profile,
        _calendar(engine, request),
        request.check_in,
        request.check_out,
    ).unwrap()


@router.post(
    "/pricing/calendar",
    summary="Get month calendar",
    description="Resolve every day of a YYYY-MM month with per-status counts.",
    response_model=MonthCalendar,
    responses=_ERROR_RESPONSES,
)
async def month_calendar(
    request: MonthCalendarRequest,
    engine: PricingEngine = Depends(get_pricing_engine),
) -> MonthCalendar:
    """Get the resolved calendar for a month."""
    return engine.calendar_month(
        request.profile, _calendar(engine, request), request.month
    ).unwrap()


@router.post(
    "/pricing/alternatives",
    summary="Suggest alternative stays",
    description="""
Find fully bookable stays with the same number of nights close to the
requested dates, closest first.
""",
    response_model=list[AlternativeStay],
    responses=_ERROR_RESPONSES,
)
async def suggest_alternatives(
    request: AlternativesRequest,
    engine: PricingEngine = Depends(get_pricing_engine),
) -> list[AlternativeStay]:
    """Suggest alternative stays near the requested range."""
    earliest = parse_date(request.earliest, "earliest") if request.earliest else None
    return engine.suggest_alternatives(
        request.profile,
        _calendar(engine, request),
        request.check_in,
        request.check_out,
        earliest=earliest,
    ).unwrap()
