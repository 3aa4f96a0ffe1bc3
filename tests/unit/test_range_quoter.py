"""Unit tests for RangeQuoter.

Tests cover:
- Night enumeration with the check-out night excluded
- Totals including sold-out nights
- Bookability and the full list of blocking dates
- Breakdown counts and average nightly price
"""

import datetime as dt

import pytest

from stay_pricing.config import PricingConfig
from stay_pricing.models import (
    CalendarOverride,
    ErrorCode,
    OverrideCalendar,
    PriceType,
    PricingError,
    PropertyPricingProfile,
    ResolvedNight,
    ValidatedPricingProfile,
)
from stay_pricing.services import CalendarResolver, RangeQuoter, expand_override_range

SCOPE_ID = "property-42"


class TestQuoteScenario:
    """The sold-out / best-deal / untouched June scenario."""

    def test_three_night_quote(
        self,
        quoter: RangeQuoter,
        validated_profile: ValidatedPricingProfile,
        june_calendar: OverrideCalendar,
    ) -> None:
        """[2025-06-01, 2025-06-04) resolves to 3 nights totalling 28000."""
        quote = quoter.quote(
            validated_profile, june_calendar, dt.date(2025, 6, 1), dt.date(2025, 6, 4)
        )

        assert quote.nights == [
            ResolvedNight(date=dt.date(2025, 6, 1), type=PriceType.SOLD_OUT, price=10000, bookable=False),
            ResolvedNight(date=dt.date(2025, 6, 2), type=PriceType.BEST_DEAL, price=8000, bookable=True),
            ResolvedNight(date=dt.date(2025, 6, 3), type=PriceType.AVAILABLE, price=10000, bookable=True),
        ]
        assert quote.total_price == 28000
        assert quote.bookable is False
        assert quote.blocking_dates == [dt.date(2025, 6, 1)]

    def test_breakdown_and_average(
        self,
        quoter: RangeQuoter,
        validated_profile: ValidatedPricingProfile,
        june_calendar: OverrideCalendar,
    ) -> None:
        quote = quoter.quote(
            validated_profile, june_calendar, dt.date(2025, 6, 1), dt.date(2025, 6, 4)
        )

        assert quote.breakdown.available_nights == 1
        assert quote.breakdown.best_deal_nights == 1
        assert quote.breakdown.peak_season_nights == 0
        assert quote.breakdown.sold_out_nights == 1
        assert quote.average_nightly_price == 9333
        assert quote.currency == "EUR"


class TestQuoteProperties:
    """General quote properties."""

    @pytest.mark.parametrize("nights", [1, 2, 7, 31, 400])
    def test_night_count_matches_range(
        self,
        quoter: RangeQuoter,
        validated_profile: ValidatedPricingProfile,
        empty_calendar: OverrideCalendar,
        nights: int,
    ) -> None:
        check_in = dt.date(2025, 12, 20)
        check_out = check_in + dt.timedelta(days=nights)

        quote = quoter.quote(validated_profile, empty_calendar, check_in, check_out)

        assert len(quote.nights) == nights
        assert quote.nights[0].date == check_in
        assert quote.nights[-1].date == check_out - dt.timedelta(days=1)

    def test_empty_calendar_is_all_available(
        self,
        quoter: RangeQuoter,
        validated_profile: ValidatedPricingProfile,
        empty_calendar: OverrideCalendar,
    ) -> None:
        quote = quoter.quote(
            validated_profile, empty_calendar, dt.date(2025, 6, 1), dt.date(2025, 6, 8)
        )

        assert quote.bookable is True
        assert quote.blocking_dates == []
        assert quote.total_price == 7 * 10000
        assert quote.average_nightly_price == 10000

    def test_total_is_sum_of_nights(
        self,
        quoter: RangeQuoter,
        validated_profile: ValidatedPricingProfile,
    ) -> None:
        entries = [
            *expand_override_range(SCOPE_ID, dt.date(2025, 7, 1), dt.date(2025, 7, 3), PriceType.PEAK_SEASON),
            CalendarOverride(scope_id=SCOPE_ID, date=dt.date(2025, 7, 3), type=PriceType.BEST_DEAL),
            CalendarOverride(
                scope_id=SCOPE_ID, date=dt.date(2025, 7, 4), type=PriceType.AVAILABLE, price=12345
            ),
        ]
        calendar = OverrideCalendar.from_entries(SCOPE_ID, entries)

        quote = quoter.quote(validated_profile, calendar, dt.date(2025, 7, 1), dt.date(2025, 7, 6))

        assert quote.total_price == sum(n.price for n in quote.nights)
        assert quote.total_price == 15000 + 15000 + 8000 + 12345 + 10000

    def test_reports_every_sold_out_date_in_order(
        self,
        quoter: RangeQuoter,
        validated_profile: ValidatedPricingProfile,
    ) -> None:
        """All conflicts are surfaced at once, not just the first."""
        entries = [
            CalendarOverride(scope_id=SCOPE_ID, date=dt.date(2025, 8, 9), type=PriceType.SOLD_OUT),
            CalendarOverride(scope_id=SCOPE_ID, date=dt.date(2025, 8, 3), type=PriceType.SOLD_OUT),
            CalendarOverride(scope_id=SCOPE_ID, date=dt.date(2025, 8, 5), type=PriceType.PEAK_SEASON),
            CalendarOverride(scope_id=SCOPE_ID, date=dt.date(2025, 8, 6), type=PriceType.SOLD_OUT),
        ]
        calendar = OverrideCalendar.from_entries(SCOPE_ID, entries)

        quote = quoter.quote(validated_profile, calendar, dt.date(2025, 8, 1), dt.date(2025, 8, 10))

        assert quote.bookable is False
        assert quote.blocking_dates == [dt.date(2025, 8, 3), dt.date(2025, 8, 6), dt.date(2025, 8, 9)]
        assert quote.blocking_dates == sorted(n.date for n in quote.nights if n.type == PriceType.SOLD_OUT)

    def test_sold_out_on_check_out_day_does_not_block(
        self,
        quoter: RangeQuoter,
        validated_profile: ValidatedPricingProfile,
    ) -> None:
        """The check-out night is not part of the stay."""
        calendar = OverrideCalendar.from_entries(
            SCOPE_ID,
            [CalendarOverride(scope_id=SCOPE_ID, date=dt.date(2025, 6, 4), type=PriceType.SOLD_OUT)],
        )

        quote = quoter.quote(validated_profile, calendar, dt.date(2025, 6, 1), dt.date(2025, 6, 4))

        assert quote.bookable is True

    def test_unvalidated_profile_propagates_error(
        self,
        quoter: RangeQuoter,
        sample_profile: PropertyPricingProfile,
        empty_calendar: OverrideCalendar,
    ) -> None:
        with pytest.raises(PricingError) as exc_info:
            quoter.quote(sample_profile, empty_calendar, dt.date(2025, 6, 1), dt.date(2025, 6, 2))

        assert exc_info.value.code == ErrorCode.PROFILE_INVALID

    def test_uses_configured_currency(
        self,
        validated_profile: ValidatedPricingProfile,
        empty_calendar: OverrideCalendar,
    ) -> None:
        config = PricingConfig(currency="IDR")
        quoter = RangeQuoter(CalendarResolver(config), config)

        quote = quoter.quote(validated_profile, empty_calendar, dt.date(2025, 6, 1), dt.date(2025, 6, 2))

        assert quote.currency == "IDR"
