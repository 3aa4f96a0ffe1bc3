"""Calendar resolution for single dates and whole months.

Effective price precedence for a date:
    explicit override price -> price of the override's tier -> base price

Dates without an override resolve to AVAILABLE at the base price.
"""

import calendar
import datetime as dt
from collections.abc import Mapping
from fractions import Fraction
from typing import Optional

from stay_pricing.config import PricingConfig
from stay_pricing.models import (
    CalendarOverride,
    ErrorCode,
    MonthCalendar,
    OverrideRange,
    PriceType,
    PricingError,
    PropertyPricingProfile,
    ResolvedNight,
    ValidatedPricingProfile,
)

from .date_range import parse_month
from .price_rules import scale_price


def date_range(start: dt.date, end: dt.date) -> list[dt.date]:
    """Generate list of dates in range (end exclusive)."""
    return [start + dt.timedelta(days=i) for i in range((end - start).days)]


def expand_override_range(
    scope_id: str,
    start: dt.date,
    end: dt.date,
    price_type: PriceType,
    price: Optional[int] = None,
) -> list[CalendarOverride]:
    """Expand a bulk pricing range into one override per date.

    Args:
        scope_id: Property or room identifier
        start: First date of the range
        end: End of range (exclusive)
        price_type: Status applied to every date
        price: Optional explicit nightly price for every date

    Returns:
        Overrides in ascending date order (empty if end <= start)
    """
    return [
        CalendarOverride(scope_id=scope_id, date=d, type=price_type, price=price)
        for d in date_range(start, end)
    ]


def peak_rate_price(
    base_price: int,
    price_increase: Optional[int] = None,
    percentage_increase: Optional[float] = None,
) -> Optional[int]:
    """Nightly peak price relative to the base price.

    A fixed increase takes precedence over a percentage. Returns None when
    neither is set, leaving the tier price to the resolver. Never negative.
    """
    if price_increase:
        price = base_price + price_increase
    elif percentage_increase:
        price = scale_price(base_price, 1 + Fraction(percentage_increase) / 100)
    else:
        return None
    return max(price, 0)


def expand_range(entry: OverrideRange, base_price: int) -> list[CalendarOverride]:
    """Expand an OverrideRange into per-date overrides.

    Args:
        entry: Bulk range entry
        base_price: Base price the peak-season increases apply to

    Returns:
        Overrides in ascending date order
    """
    price = entry.price
    if price is None and entry.type == PriceType.PEAK_SEASON:
        price = peak_rate_price(base_price, entry.price_increase, entry.percentage_increase)
    return expand_override_range(entry.scope_id, entry.start, entry.end, entry.type, price)


class CalendarResolver:
    """Resolves the effective status and price of calendar dates."""

    def __init__(self, config: PricingConfig) -> None:
        """Initialize calendar resolver.

        Args:
            config: Engine configuration
        """
        self.config = config

    def resolve(
        self,
        profile: PropertyPricingProfile,
        overrides: Mapping[dt.date, CalendarOverride],
        date: dt.date,
    ) -> ResolvedNight:
        """Resolve one date against a validated profile.

        Args:
            profile: Profile returned by PriceRuleValidator
            overrides: Date -> override mapping for a single scope
            date: Date to resolve

        Returns:
            ResolvedNight for the date

        Raises:
            PricingError: PROFILE_INVALID if profile was not validated
        """
        self._require_validated(profile)
        return self._resolve(profile, overrides, date)

    def resolve_month(
        self,
        profile: PropertyPricingProfile,
        overrides: Mapping[dt.date, CalendarOverride],
        month: str,
    ) -> MonthCalendar:
        """Resolve every day of a YYYY-MM month.

        Raises:
            PricingError: MALFORMED_DATE for a bad month string,
                PROFILE_INVALID if profile was not validated
        """
        self._require_validated(profile)
        year, month_num = parse_month(month)
        days_in_month = calendar.monthrange(year, month_num)[1]
        first_day = dt.date(year, month_num, 1)

        days = [
            self._resolve(profile, overrides, first_day + dt.timedelta(days=i))
            for i in range(days_in_month)
        ]
        counts = {price_type: 0 for price_type in PriceType}
        for day in days:
            counts[day.type] += 1

        return MonthCalendar(
            month=month,
            days=days,
            available_count=counts[PriceType.AVAILABLE],
            sold_out_count=counts[PriceType.SOLD_OUT],
            peak_season_count=counts[PriceType.PEAK_SEASON],
            best_deal_count=counts[PriceType.BEST_DEAL],
            currency=self.config.currency,
        )

    def _resolve(
        self,
        profile: PropertyPricingProfile,
        overrides: Mapping[dt.date, CalendarOverride],
        date: dt.date,
    ) -> ResolvedNight:
        override = overrides.get(date)
        if override is None:
            return ResolvedNight(
                date=date,
                type=PriceType.AVAILABLE,
                price=profile.base_price,
                bookable=True,
            )

        price = override.price
        if price is None:
            price = self.tier_price(profile, override.type)

        # Sold-out nights keep their price for display
        return ResolvedNight(
            date=date,
            type=override.type,
            price=price,
            bookable=override.type != PriceType.SOLD_OUT,
        )

    @staticmethod
    def tier_price(profile: PropertyPricingProfile, price_type: PriceType) -> int:
        """Price a status maps to when an override carries no explicit price."""
        if price_type == PriceType.BEST_DEAL:
            return profile.best_deal_price
        if price_type == PriceType.PEAK_SEASON:
            return profile.peak_season_price
        return profile.base_price

    @staticmethod
    def _require_validated(profile: PropertyPricingProfile) -> None:
        if not isinstance(profile, ValidatedPricingProfile):
            raise PricingError(ErrorCode.PROFILE_INVALID)
        # model_copy(update=...) and model_construct skip the validator
        if not 0 < profile.best_deal_price < profile.base_price < profile.peak_season_price:
            raise PricingError(ErrorCode.PROFILE_INVALID)
