"""Unit tests for DateRangeValidator and date parsing.

Tests cover:
- Canonical YYYY-MM-DD format and real calendar dates
- Strict ordering (zero-night stays rejected)
- Optional maximum stay cap
"""

import datetime as dt

import pytest

from stay_pricing.config import PricingConfig
from stay_pricing.models import ErrorCode, PricingError
from stay_pricing.services import DateRangeValidator, parse_date, parse_month


class TestValidRanges:
    """Ranges that pass validation."""

    def test_returns_typed_dates(self, date_validator: DateRangeValidator) -> None:
        result = date_validator.validate("2025-06-01", "2025-06-04")

        assert result.success is True
        assert result.data == (dt.date(2025, 6, 1), dt.date(2025, 6, 4))

    def test_single_night(self, date_validator: DateRangeValidator) -> None:
        assert date_validator.check("2025-06-10", "2025-06-11") == (
            dt.date(2025, 6, 10),
            dt.date(2025, 6, 11),
        )

    def test_leap_day(self, date_validator: DateRangeValidator) -> None:
        start, _ = date_validator.check("2024-02-29", "2024-03-01")

        assert start == dt.date(2024, 2, 29)

    def test_long_range_has_no_default_cap(self, date_validator: DateRangeValidator) -> None:
        """Ranges beyond a year are ordinary when no cap is configured."""
        result = date_validator.validate("2025-01-01", "2027-01-01")

        assert result.success is True


class TestMalformedDates:
    """Inputs rejected with MALFORMED_DATE."""

    @pytest.mark.parametrize(
        "check_in",
        [
            "2025-02-30",  # matches pattern but does not exist
            "2025-13-01",
            "2025-1-5",
            "25-01-15",
            "2025/06/01",
            "20250601",
            "2025-06-01T00:00:00",
            "2025-06-01\n",
            " 2025-06-01",
            "",
        ],
    )
    def test_rejects_bad_check_in(self, date_validator: DateRangeValidator, check_in: str) -> None:
        result = date_validator.validate(check_in, "2025-07-01")

        assert result.success is False
        assert result.error is not None
        assert result.error.error_code == ErrorCode.MALFORMED_DATE

    def test_rejects_bad_check_out(self, date_validator: DateRangeValidator) -> None:
        result = date_validator.validate("2025-06-01", "2025-06-31")

        assert result.error is not None
        assert result.error.error_code == ErrorCode.MALFORMED_DATE
        assert result.error.details == {"check_out": "2025-06-31"}

    @pytest.mark.parametrize("value", [None, 20250601, dt.date(2025, 6, 1)])
    def test_rejects_non_strings(self, value: object) -> None:
        with pytest.raises(PricingError) as exc_info:
            parse_date(value)

        assert exc_info.value.code == ErrorCode.MALFORMED_DATE

    def test_format_checked_before_ordering(self, date_validator: DateRangeValidator) -> None:
        """A malformed check-out is reported even if it would also be inverted."""
        result = date_validator.validate("2025-06-10", "2025-02-30")

        assert result.error is not None
        assert result.error.error_code == ErrorCode.MALFORMED_DATE


class TestInvertedRanges:
    """Ranges rejected with INVERTED_RANGE."""

    def test_same_day_is_inverted(self, date_validator: DateRangeValidator) -> None:
        """checkIn = checkOut = 2025-06-10 is a zero-night stay."""
        result = date_validator.validate("2025-06-10", "2025-06-10")

        assert result.error is not None
        assert result.error.error_code == ErrorCode.INVERTED_RANGE

    def test_check_out_before_check_in(self, date_validator: DateRangeValidator) -> None:
        result = date_validator.validate("2025-06-10", "2025-06-01")

        assert result.error is not None
        assert result.error.error_code == ErrorCode.INVERTED_RANGE

    def test_inverted_and_malformed_messages_differ(self, date_validator: DateRangeValidator) -> None:
        inverted = date_validator.validate("2025-06-10", "2025-06-10").error
        malformed = date_validator.validate("2025-02-30", "2025-06-10").error

        assert inverted is not None and malformed is not None
        assert inverted.message != malformed.message


class TestStayCap:
    """Optional maximum stay length."""

    def test_rejects_stay_over_cap(self) -> None:
        validator = DateRangeValidator(PricingConfig(max_stay_nights=30))

        result = validator.validate("2025-06-01", "2025-07-02")

        assert result.error is not None
        assert result.error.error_code == ErrorCode.STAY_TOO_LONG
        assert result.error.details == {"nights": "31", "max_stay_nights": "30"}

    def test_accepts_stay_at_cap(self) -> None:
        validator = DateRangeValidator(PricingConfig(max_stay_nights=30))

        assert validator.validate("2025-06-01", "2025-07-01").success is True


class TestParseMonth:
    """YYYY-MM parsing for calendar views."""

    def test_parses_month(self) -> None:
        assert parse_month("2025-06") == (2025, 6)

    @pytest.mark.parametrize("value", ["2025-13", "2025-00", "2025-6", "2025-06-01", "June"])
    def test_rejects_bad_month(self, value: str) -> None:
        with pytest.raises(PricingError) as exc_info:
            parse_month(value)

        assert exc_info.value.code == ErrorCode.MALFORMED_DATE
