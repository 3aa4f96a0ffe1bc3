"""Range quoting: night-by-night resolution, totals and bookability."""

import datetime as dt
from collections.abc import Mapping
from typing import Optional

from stay_pricing.config import PricingConfig
from stay_pricing.models import (
    AlternativeStay,
    CalendarOverride,
    NightBreakdown,
    PriceType,
    PropertyPricingProfile,
    RangeQuote,
    ResolvedNight,
    StayDirection,
)

from .calendar_resolver import CalendarResolver, date_range


class RangeQuoter:
    """Quotes check-in/check-out ranges using a CalendarResolver."""

    def __init__(self, resolver: CalendarResolver, config: PricingConfig) -> None:
        """Initialize range quoter.

        Args:
            resolver: Calendar resolver instance
            config: Engine configuration
        """
        self.resolver = resolver
        self.config = config

    def quote(
        self,
        profile: PropertyPricingProfile,
        overrides: Mapping[dt.date, CalendarOverride],
        check_in: dt.date,
        check_out: dt.date,
    ) -> RangeQuote:
        """Quote a stay.

        The check-out night is not billed. The range itself is assumed to
        have passed DateRangeValidator; sold-out nights make the quote
        unbookable but are still priced and summed.

        Args:
            profile: Profile returned by PriceRuleValidator
            overrides: Date -> override mapping for a single scope
            check_in: Check-in date
            check_out: Check-out date (exclusive)

        Returns:
            RangeQuote with nights in ascending date order

        Raises:
            PricingError: PROFILE_INVALID if profile was not validated
        """
        nights = [
            self.resolver.resolve(profile, overrides, d)
            for d in date_range(check_in, check_out)
        ]
        return self._build_quote(check_in, check_out, nights)

    def suggest_alternatives(
        self,
        profile: PropertyPricingProfile,
        overrides: Mapping[dt.date, CalendarOverride],
        check_in: dt.date,
        check_out: dt.date,
        search_window_days: Optional[int] = None,
        max_suggestions: Optional[int] = None,
        earliest: Optional[dt.date] = None,
    ) -> list[AlternativeStay]:
        """Find fully bookable stays of the same length near the requested dates.

        Checks start dates closest to the requested check-in first,
        alternating earlier and later.

        Args:
            profile: Profile returned by PriceRuleValidator
            overrides: Date -> override mapping for a single scope
            check_in: Originally requested check-in date
            check_out: Originally requested check-out date
            search_window_days: How many days before/after to shift
                (defaults to config.alternative_search_days)
            max_suggestions: Maximum number of alternatives to return
                (defaults to config.max_alternatives)
            earliest: No suggestion starts before this date (e.g., today)

        Returns:
            Alternatives sorted by absolute offset, earlier first on ties
        """
        window = search_window_days or self.config.alternative_search_days
        limit = max_suggestions or self.config.max_alternatives
        requested_nights = (check_out - check_in).days

        # Windows are clamped to the representable date range
        min_ordinal = dt.date.min.toordinal()
        max_ordinal = dt.date.max.toordinal()
        search_start = dt.date.fromordinal(max(check_in.toordinal() - window, min_ordinal))
        if earliest is not None and search_start < earliest:
            search_start = earliest
        search_end = dt.date.fromordinal(min(check_out.toordinal() + window, max_ordinal))

        # Resolve the whole window once
        resolved: dict[dt.date, ResolvedNight] = {
            d: self.resolver.resolve(profile, overrides, d)
            for d in date_range(search_start, search_end)
        }

        def window_nights(start: dt.date) -> Optional[list[ResolvedNight]]:
            nights = [resolved.get(start + dt.timedelta(days=i)) for i in range(requested_nights)]
            if any(n is None or not n.bookable for n in nights):
                return None
            return nights  # type: ignore[return-value]

        suggestions: list[AlternativeStay] = []
        for offset in range(1, window + 1):
            if len(suggestions) >= limit:
                break

            for signed_offset in (-offset, offset):
                if len(suggestions) >= limit:
                    break
                start_ordinal = check_in.toordinal() + signed_offset
                if start_ordinal < min_ordinal or start_ordinal + requested_nights > max_ordinal:
                    continue
                start = dt.date.fromordinal(start_ordinal)
                if earliest is not None and start < earliest:
                    continue
                nights = window_nights(start)
                if nights is None:
                    continue
                suggestions.append(
                    AlternativeStay(
                        check_in=start,
                        check_out=start + dt.timedelta(days=requested_nights),
                        nights=requested_nights,
                        offset_days=signed_offset,
                        direction=StayDirection.EARLIER if signed_offset < 0 else StayDirection.LATER,
                        total_price=sum(n.price for n in nights),
                    )
                )

        return suggestions

    def _build_quote(
        self,
        check_in: dt.date,
        check_out: dt.date,
        nights: list[ResolvedNight],
    ) -> RangeQuote:
        total_price = sum(night.price for night in nights)
        blocking_dates = [night.date for night in nights if not night.bookable]

        breakdown = NightBreakdown(
            available_nights=sum(1 for n in nights if n.type == PriceType.AVAILABLE),
            best_deal_nights=sum(1 for n in nights if n.type == PriceType.BEST_DEAL),
            peak_season_nights=sum(1 for n in nights if n.type == PriceType.PEAK_SEASON),
            sold_out_nights=len(blocking_dates),
        )
        count = len(nights)
        # Integer mean, halves round up
        average = (total_price + count // 2) // count if count else 0

        return RangeQuote(
            check_in=check_in,
            check_out=check_out,
            nights=nights,
            total_price=total_price,
            bookable=not blocking_dates,
            blocking_dates=blocking_dates,
            breakdown=breakdown,
            average_nightly_price=average,
            currency=self.config.currency,
        )
