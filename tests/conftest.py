"""Pytest configuration and fixtures for stay pricing tests.

This module provides reusable fixtures for testing:
- Engine configuration and components
- Sample pricing profiles (base 100.00, best deal 80.00, peak 150.00)
- Sample override calendars
"""

import datetime as dt
from typing import Generator

import pytest

from stay_pricing.config import PricingConfig
from stay_pricing.models import (
    CalendarOverride,
    OverrideCalendar,
    PriceType,
    PropertyPricingProfile,
    ValidatedPricingProfile,
)
from stay_pricing.services import (
    CalendarResolver,
    DateRangeValidator,
    PriceRuleValidator,
    PricingEngine,
    RangeQuoter,
)

SCOPE_ID = "property-42"


# === Service Fixtures ===


@pytest.fixture(autouse=True)
def reset_api_services() -> Generator[None, None, None]:
    """Clear cached API dependencies so env-driven config is re-read."""
    from stay_pricing.api.dependencies import reset_services

    reset_services()
    yield
    reset_services()


@pytest.fixture
def config() -> PricingConfig:
    """Default engine configuration."""
    return PricingConfig()


@pytest.fixture
def price_rules() -> PriceRuleValidator:
    return PriceRuleValidator()


@pytest.fixture
def date_validator(config: PricingConfig) -> DateRangeValidator:
    return DateRangeValidator(config)


@pytest.fixture
def resolver(config: PricingConfig) -> CalendarResolver:
    return CalendarResolver(config)


@pytest.fixture
def quoter(resolver: CalendarResolver, config: PricingConfig) -> RangeQuoter:
    return RangeQuoter(resolver, config)


@pytest.fixture
def engine(config: PricingConfig) -> PricingEngine:
    return PricingEngine(config)


# === Sample Data Fixtures ===


@pytest.fixture
def sample_profile() -> PropertyPricingProfile:
    """Valid profile: best deal 8000 < base 10000 < peak 15000 (cents)."""
    return PropertyPricingProfile(
        base_price=10000,
        best_deal_price=8000,
        peak_season_price=15000,
    )


@pytest.fixture
def validated_profile(sample_profile: PropertyPricingProfile) -> ValidatedPricingProfile:
    """Sample profile after passing PriceRuleValidator."""
    return PriceRuleValidator().check(sample_profile)


@pytest.fixture
def june_entries() -> list[CalendarOverride]:
    """Sold out on June 1st, best deal on June 2nd, June 3rd untouched."""
    return [
        CalendarOverride(scope_id=SCOPE_ID, date=dt.date(2025, 6, 1), type=PriceType.SOLD_OUT),
        CalendarOverride(scope_id=SCOPE_ID, date=dt.date(2025, 6, 2), type=PriceType.BEST_DEAL),
    ]


@pytest.fixture
def june_calendar(june_entries: list[CalendarOverride]) -> OverrideCalendar:
    return OverrideCalendar.from_entries(SCOPE_ID, june_entries)


@pytest.fixture
def empty_calendar() -> OverrideCalendar:
    return OverrideCalendar(SCOPE_ID)
