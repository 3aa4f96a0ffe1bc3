"""Pricing engine facade.

Wires the components together and is the boundary at which errors become
values: every public method returns a PricingResult and never raises
PricingError. Sold-out nights are reported inside successful results.

Component graph:
    PricingEngine
        ├── PriceRuleValidator
        ├── DateRangeValidator
        └── RangeQuoter
                └── CalendarResolver
"""

import datetime as dt
from collections.abc import Iterable
from typing import Any, Optional

from stay_pricing.config import PricingConfig
from stay_pricing.models import (
    AlternativeStay,
    CalendarOverride,
    MonthCalendar,
    OverrideCalendar,
    OverrideRange,
    PricingError,
    PricingResult,
    PropertyPricingProfile,
    RangeQuote,
    ResolvedNight,
    ValidatedPricingProfile,
)
from stay_pricing.utils.logging import get_logger, log_pricing_operation

from .calendar_resolver import CalendarResolver, expand_range
from .date_range import DateRangeValidator, parse_date
from .price_rules import PriceRuleValidator, derive_profile, nightly_base_price
from .range_quoter import RangeQuoter

logger = get_logger(__name__)


class PricingEngine:
    """Stateless entry point for profile validation, resolution and quoting."""

    def __init__(self, config: Optional[PricingConfig] = None) -> None:
        """Initialize pricing engine.

        Args:
            config: Engine configuration (defaults to PricingConfig())
        """
        self.config = config or PricingConfig()
        self.price_rules = PriceRuleValidator()
        self.date_ranges = DateRangeValidator(self.config)
        self.resolver = CalendarResolver(self.config)
        self.quoter = RangeQuoter(self.resolver, self.config)

    def build_calendar(
        self,
        scope_id: str,
        entries: Iterable[CalendarOverride],
        parent_scope_id: Optional[str] = None,
        ranges: Iterable[OverrideRange] = (),
        base_price: int = 0,
    ) -> OverrideCalendar:
        """Build the override calendar of one scope (last write wins).

        Range entries are expanded ahead of single-date entries, so a
        single-date entry wins over a range on the same date.

        Args:
            scope_id: Property or room identifier
            entries: Single-date entries, oldest first
            parent_scope_id: Property whose entries a room inherits
            ranges: Bulk range entries, oldest first
            base_price: Base price for relative peak-season ranges

        Returns:
            OverrideCalendar for the scope
        """
        expanded = [override for entry in ranges for override in expand_range(entry, base_price)]
        return OverrideCalendar.from_entries(
            scope_id, [*expanded, *entries], parent_scope_id=parent_scope_id
        )

    def derive_profile(
        self,
        base_price: int,
        best_deal_price: Optional[int] = None,
        peak_season_price: Optional[int] = None,
        listing_nights: int = 1,
    ) -> PricingResult[ValidatedPricingProfile]:
        """Build and validate a profile from a listing price.

        Missing seasonal prices are derived with the configured ratios.

        Args:
            base_price: Listing price in cents for listing_nights nights
            best_deal_price: Explicit best deal price, if any
            peak_season_price: Explicit peak season price, if any
            listing_nights: Nights the listing price covers (at least 1)

        Returns:
            PricingResult holding the validated profile or the ToolError

        Raises:
            ValueError: If listing_nights is less than 1
        """
        profile = derive_profile(
            self.config,
            nightly_base_price(base_price, listing_nights),
            best_deal_price=best_deal_price,
            peak_season_price=peak_season_price,
        )
        result = self.price_rules.validate(profile)
        log_pricing_operation(
            logger,
            "derive_profile",
            listing_nights=listing_nights,
            error_code=result.error.error_code.value if result.error else None,
        )
        return result

    def validate_profile(
        self, profile: PropertyPricingProfile
    ) -> PricingResult[ValidatedPricingProfile]:
        """Validate a profile's price tiers."""
        result = self.price_rules.validate(profile)
        log_pricing_operation(
            logger,
            "validate_profile",
            error_code=result.error.error_code.value if result.error else None,
        )
        return result

    def resolve_date(
        self,
        profile: PropertyPricingProfile,
        calendar: OverrideCalendar,
        date: Any,
    ) -> PricingResult[ResolvedNight]:
        """Resolve one YYYY-MM-DD date for a scope."""
        try:
            validated = self.price_rules.check(profile)
            night = self.resolver.resolve(validated, calendar, parse_date(date))
        except PricingError as exc:
            self._log_failure("resolve_date", calendar, exc)
            return PricingResult[ResolvedNight].fail(exc)
        return PricingResult[ResolvedNight].ok(night)

    def quote(
        self,
        profile: PropertyPricingProfile,
        calendar: OverrideCalendar,
        check_in: Any,
        check_out: Any,
    ) -> PricingResult[RangeQuote]:
        """Validate inputs and quote a stay.

        Args:
            profile: Pricing profile (validated here)
            calendar: Override calendar of the scope being booked
            check_in: Check-in date string (YYYY-MM-DD)
            check_out: Check-out date string (YYYY-MM-DD)

        Returns:
            PricingResult holding the RangeQuote or the ToolError
        """
        try:
            validated = self.price_rules.check(profile)
            start, end = self.date_ranges.check(check_in, check_out)
            # One calendar snapshot for every night of this quote
            quote = self.quoter.quote(validated, calendar, start, end)
        except PricingError as exc:
            self._log_failure("quote", calendar, exc, check_in=check_in, check_out=check_out)
            return PricingResult[RangeQuote].fail(exc)

        log_pricing_operation(
            logger,
            "quote",
            scope_id=calendar.scope_id,
            check_in=start.isoformat(),
            check_out=end.isoformat(),
            nights=len(quote.nights),
            total_price=quote.total_price,
            bookable=quote.bookable,
        )
        return PricingResult[RangeQuote].ok(quote)

    def calendar_month(
        self,
        profile: PropertyPricingProfile,
        calendar: OverrideCalendar,
        month: Any,
    ) -> PricingResult[MonthCalendar]:
        """Resolve every day of a YYYY-MM month for a scope."""
        try:
            validated = self.price_rules.check(profile)
            view = self.resolver.resolve_month(validated, calendar, month)
        except PricingError as exc:
            self._log_failure("calendar_month", calendar, exc, month=str(month))
            return PricingResult[MonthCalendar].fail(exc)
        return PricingResult[MonthCalendar].ok(view)

    def suggest_alternatives(
        self,
        profile: PropertyPricingProfile,
        calendar: OverrideCalendar,
        check_in: Any,
        check_out: Any,
        earliest: Optional[dt.date] = None,
    ) -> PricingResult[list[AlternativeStay]]:
        """Suggest nearby bookable stays with the requested length."""
        try:
            validated = self.price_rules.check(profile)
            start, end = self.date_ranges.check(check_in, check_out)
            suggestions = self.quoter.suggest_alternatives(
                validated, calendar, start, end, earliest=earliest
            )
        except PricingError as exc:
            self._log_failure(
                "suggest_alternatives", calendar, exc, check_in=check_in, check_out=check_out
            )
            return PricingResult[list[AlternativeStay]].fail(exc)

        log_pricing_operation(
            logger,
            "suggest_alternatives",
            scope_id=calendar.scope_id,
            check_in=start.isoformat(),
            check_out=end.isoformat(),
            suggestions=len(suggestions),
        )
        return PricingResult[list[AlternativeStay]].ok(suggestions)

    def _log_failure(
        self,
        operation: str,
        calendar: OverrideCalendar,
        exc: PricingError,
        **extra: Any,
    ) -> None:
        context = {key: str(value) for key, value in extra.items()}
        log_pricing_operation(
            logger,
            operation,
            scope_id=calendar.scope_id,
            error_code=exc.code.value,
            **context,
        )
